"""OVH API families built on the declarative engine."""

from resource_engine.infrastructure.registry.resource_registry import ResourceRegistry
from resource_engine.providers.ovh.dns_api import register_dns_resources
from resource_engine.providers.ovh.network import register_network_resources


def register_default_resources(resource_registry: ResourceRegistry) -> ResourceRegistry:
    """Register every OVH resource family into ``resource_registry``."""
    register_network_resources(resource_registry)
    register_dns_resources(resource_registry)
    return resource_registry


__all__: list[str] = [
    "register_default_resources",
    "register_dns_resources",
    "register_network_resources",
]
