"""Global test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from resource_engine.config.schemas.engine_schema import EngineConfig, PollingConfig  # noqa: E402
from resource_engine.infrastructure.registry.resource_registry import (  # noqa: E402
    ResourceRegistry,
)
from tests.fixtures.fake_transport import FakeTransport  # noqa: E402


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Scripted transport recording every request."""
    return FakeTransport()


@pytest.fixture
def resource_registry() -> ResourceRegistry:
    """Fresh, empty resource registry."""
    return ResourceRegistry()


@pytest.fixture
def engine_config() -> EngineConfig:
    """Engine configuration with short polling intervals."""
    return EngineConfig(
        cloud_project_id="proj-1",
        polling=PollingConfig(initial_interval=0.01, max_interval=0.02, timeout=1.0),
    )
