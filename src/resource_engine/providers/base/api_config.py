"""API-level configuration and URL construction."""

from dataclasses import dataclass, field
from typing import Optional, Protocol

from resource_engine.domain.resource.value_objects import PathContext


class PathBuilder(Protocol):
    """Renders a PathContext into an API path."""

    def __call__(self, ctx: PathContext) -> str: ...


@dataclass(frozen=True)
class PaginationConfig:
    """Pagination parameters of an API family."""

    disabled: bool = True
    page_size_param: str = ""
    page_size: int = 100


@dataclass(frozen=True)
class APIConfig:
    """How to address one REST API family."""

    base_url: str = ""
    api_version: str = ""
    path_builder: Optional[PathBuilder] = None
    pagination: PaginationConfig = field(default_factory=PaginationConfig)

    def is_pagination_disabled(self) -> bool:
        return self.pagination.disabled or not self.pagination.page_size_param


class URLBuilder:
    """Builds collection and resource URLs for one request context."""

    def __init__(self, api_config: APIConfig, ctx: PathContext) -> None:
        if api_config.path_builder is None:
            raise ValueError("API configuration has no path builder")
        self.api_config = api_config
        self.ctx = ctx

    def collection_url(self) -> str:
        """URL of the resource collection (no resource name)."""
        return self._with_base_url(self.collection_path())

    def resource_url(self, name: str) -> str:
        """URL of a single resource."""
        return self._with_base_url(self.resource_path(name))

    def collection_path(self) -> str:
        """Path of the resource collection, without the base URL."""
        return self.api_config.path_builder(self.ctx.with_name(""))

    def resource_path(self, name: str) -> str:
        """Path of a single resource, without the base URL."""
        return self.api_config.path_builder(self.ctx.with_name(name))

    def _with_base_url(self, path: str) -> str:
        if self.api_config.base_url:
            return self.api_config.base_url + path
        return path
