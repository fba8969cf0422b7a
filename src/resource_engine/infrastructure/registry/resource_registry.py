"""Registry mapping resource type names to provisioner factories."""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from resource_engine.domain.base.exceptions import (
    ConfigurationError,
    UnsupportedResourceTypeError,
)
from resource_engine.domain.base.ports.provisioner_port import Provisioner
from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.descriptor import ResourceDescriptor, ResourceSchema
from resource_engine.infrastructure.logging.logger import get_logger

ProvisionerFactory = Callable[[TransportPort, Any], Provisioner]


@dataclass(frozen=True)
class ResourceRegistration:
    """Registration record for a resource type."""

    type_name: str
    descriptor: ResourceDescriptor
    schema: ResourceSchema
    factory: ProvisionerFactory


class ResourceRegistry:
    """
    Concurrency-safe registry of resource types.

    Registration normally happens once at startup while lookups happen on
    every host call. A single re-entrant lock guards all access.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, ResourceRegistration] = {}
        self._registry_lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register(
        self,
        type_name: str,
        descriptor: ResourceDescriptor,
        schema: ResourceSchema,
        factory: ProvisionerFactory,
    ) -> None:
        """
        Register a resource type.

        Args:
            type_name: Unique resource type name
            descriptor: Metadata published to the host
            schema: Property schema published to the host
            factory: Callable building a provisioner from a transport and config

        Raises:
            ConfigurationError: If the type is already registered
        """
        with self._registry_lock:
            if type_name in self._registrations:
                raise ConfigurationError(f"Resource type '{type_name}' is already registered")
            self._registrations[type_name] = ResourceRegistration(
                type_name=type_name,
                descriptor=descriptor,
                schema=schema,
                factory=factory,
            )
        self._logger.debug("Registered resource type: %s", type_name)

    def unregister(self, type_name: str) -> bool:
        """Remove a registration. Returns False if the type was not registered."""
        with self._registry_lock:
            return self._registrations.pop(type_name, None) is not None

    def get(self, type_name: str, transport: TransportPort, config: Any = None) -> Provisioner:
        """
        Build a provisioner for a registered resource type.

        Raises:
            UnsupportedResourceTypeError: If the type is not registered
            ConfigurationError: If the factory fails
        """
        registration = self._get_registration(type_name)
        try:
            return registration.factory(transport, config)
        except Exception as e:
            raise ConfigurationError(
                f"Failed to create provisioner for '{type_name}': {e}"
            ) from e

    def has_provisioner(self, type_name: str) -> bool:
        with self._registry_lock:
            return type_name in self._registrations

    def get_descriptor(self, type_name: str) -> Optional[ResourceDescriptor]:
        with self._registry_lock:
            registration = self._registrations.get(type_name)
        return registration.descriptor if registration else None

    def get_schema(self, type_name: str) -> Optional[ResourceSchema]:
        with self._registry_lock:
            registration = self._registrations.get(type_name)
        return registration.schema if registration else None

    def list_resource_types(self) -> list[str]:
        """Get the sorted names of all registered resource types."""
        with self._registry_lock:
            return sorted(self._registrations)

    def get_all_descriptors(self) -> list[ResourceDescriptor]:
        with self._registry_lock:
            return [self._registrations[name].descriptor for name in sorted(self._registrations)]

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registry_lock:
            self._registrations.clear()

    def _get_registration(self, type_name: str) -> ResourceRegistration:
        with self._registry_lock:
            registration = self._registrations.get(type_name)
        if registration is None:
            raise UnsupportedResourceTypeError(type_name)
        return registration
