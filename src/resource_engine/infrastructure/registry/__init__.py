"""Resource type registry."""

from resource_engine.infrastructure.registry.resource_registry import (
    ProvisionerFactory,
    ResourceRegistration,
    ResourceRegistry,
)

__all__: list[str] = ["ProvisionerFactory", "ResourceRegistration", "ResourceRegistry"]
