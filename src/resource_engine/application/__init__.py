"""Application layer - the host-facing plugin facade."""

from resource_engine.application.bootstrap import create_plugin
from resource_engine.application.resource_plugin import ResourcePlugin

__all__: list[str] = ["ResourcePlugin", "create_plugin"]
