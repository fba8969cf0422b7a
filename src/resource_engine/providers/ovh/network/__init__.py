"""OVH Cloud network resource family."""

from resource_engine.providers.ovh.network.resources import (
    FLOATING_IP_RESOURCE_TYPE,
    GATEWAY_RESOURCE_TYPE,
    NETWORK_RESOURCE_TYPE,
    PRIVATE_NETWORK_RESOURCE_TYPE,
    SECURITY_GROUP_RESOURCE_TYPE,
    SUBNET_PRIVATE_RESOURCE_TYPE,
    SUBNET_RESOURCE_TYPE,
    register_network_resources,
)

__all__: list[str] = [
    "FLOATING_IP_RESOURCE_TYPE",
    "GATEWAY_RESOURCE_TYPE",
    "NETWORK_RESOURCE_TYPE",
    "PRIVATE_NETWORK_RESOURCE_TYPE",
    "SECURITY_GROUP_RESOURCE_TYPE",
    "SUBNET_PRIVATE_RESOURCE_TYPE",
    "SUBNET_RESOURCE_TYPE",
    "register_network_resources",
]
