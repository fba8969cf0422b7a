"""Wiring of the default plugin."""

from typing import Optional

from resource_engine.application.resource_plugin import ResourcePlugin
from resource_engine.config.schemas.engine_schema import EngineConfig, load_engine_config
from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.infrastructure.logging.logger import setup_logging
from resource_engine.infrastructure.registry.resource_registry import ResourceRegistry
from resource_engine.infrastructure.transport.rest_transport import RestTransport
from resource_engine.providers.ovh import register_default_resources


def create_plugin(
    config: Optional[EngineConfig] = None,
    transport: Optional[TransportPort] = None,
    registry: Optional[ResourceRegistry] = None,
) -> ResourcePlugin:
    """
    Build a plugin with every OVH resource family registered.

    Args:
        config: Engine configuration, loaded from settings when omitted
        transport: Transport to use, a RestTransport on ``config.base_url`` by default
        registry: Registry to populate, a new one by default

    Returns:
        Ready to use plugin
    """
    config = config or load_engine_config()
    setup_logging(
        log_dir=config.logging.log_dir,
        log_filename=config.logging.log_filename,
        log_level=config.logging.level,
        log_destination=config.logging.destination,
        log_format=config.logging.format,
    )

    if registry is None:
        registry = register_default_resources(ResourceRegistry())
    if transport is None:
        transport = RestTransport(base_url=config.base_url, timeout=config.request_timeout)

    return ResourcePlugin(registry, transport, config)
