"""Unit tests for API configuration and URL building."""

import pytest

from resource_engine.domain.resource.value_objects import PathContext
from resource_engine.providers.base.api_config import APIConfig, PaginationConfig, URLBuilder


def _path(ctx: PathContext) -> str:
    path = f"/things/{ctx.project}"
    if ctx.resource_name:
        path += f"/{ctx.resource_name}"
    return path


@pytest.mark.unit
class TestURLBuilder:
    """Test cases for URLBuilder."""

    def test_collection_url_clears_name(self):
        """Test the collection URL is rendered without the resource name."""
        ctx = PathContext(project="p", resource_name="x")
        builder = URLBuilder(APIConfig(path_builder=_path), ctx)

        assert builder.collection_url() == "/things/p"

    def test_resource_url(self):
        """Test the resource URL appends the given name."""
        builder = URLBuilder(APIConfig(path_builder=_path), PathContext(project="p"))

        assert builder.resource_url("item-1") == "/things/p/item-1"

    def test_base_url_is_prefixed(self):
        """Test a configured base URL prefixes every path."""
        config = APIConfig(base_url="https://api.example.com/1.0", path_builder=_path)
        builder = URLBuilder(config, PathContext(project="p"))

        assert builder.resource_url("a") == "https://api.example.com/1.0/things/p/a"

    def test_paths_exclude_base_url(self):
        """Test paths are rendered without the configured base URL."""
        config = APIConfig(base_url="https://api.example.com/1.0", path_builder=_path)
        builder = URLBuilder(config, PathContext(project="p", resource_name="x"))

        assert builder.collection_path() == "/things/p"
        assert builder.resource_path("a") == "/things/p/a"

    def test_missing_path_builder_is_rejected(self):
        """Test an API configuration without a path builder cannot build URLs."""
        with pytest.raises(ValueError, match="no path builder"):
            URLBuilder(APIConfig(), PathContext())


@pytest.mark.unit
class TestPaginationConfig:
    """Test cases for pagination settings."""

    def test_disabled_by_default(self):
        """Test pagination is disabled by default."""
        assert APIConfig(path_builder=_path).is_pagination_disabled()

    def test_enabled_needs_page_size_param(self):
        """Test pagination without a page size parameter counts as disabled."""
        config = APIConfig(path_builder=_path, pagination=PaginationConfig(disabled=False))

        assert config.is_pagination_disabled()

    def test_enabled(self):
        """Test pagination with a page size parameter is enabled."""
        config = APIConfig(
            path_builder=_path,
            pagination=PaginationConfig(disabled=False, page_size_param="limit", page_size=50),
        )

        assert not config.is_pagination_disabled()
