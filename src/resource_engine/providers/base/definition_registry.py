"""Declarative resource definitions and their per-API registration."""

import threading
from dataclasses import dataclass, field, replace
from typing import Optional

from resource_engine.config.schemas.engine_schema import EngineConfig
from resource_engine.domain.base.exceptions import ConfigurationError
from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.descriptor import ResourceDescriptor, ResourceSchema
from resource_engine.domain.resource.value_objects import Operation
from resource_engine.infrastructure.logging.logger import get_logger
from resource_engine.infrastructure.registry.resource_registry import ResourceRegistry
from resource_engine.providers.base.api_config import APIConfig
from resource_engine.providers.base.base_resource import BaseResource
from resource_engine.providers.base.native_id import NativeIdConfig
from resource_engine.providers.base.operation_config import OperationConfig, StatusChecker
from resource_engine.providers.base.resource_config import ResourceConfig
from resource_engine.providers.base.transformers import RequestTransformer, ResponseTransformer

STANDARD_OPERATIONS: tuple[Operation, ...] = (
    Operation.CREATE,
    Operation.READ,
    Operation.UPDATE,
    Operation.DELETE,
    Operation.LIST,
    Operation.CHECK_STATUS,
)


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything the engine needs to provision one resource type.

    Unset API, operation and native id configuration is taken from the
    defaults of the :class:`DefinitionRegistry` it is registered with.
    """

    type_name: str
    resource_config: ResourceConfig
    api_config: Optional[APIConfig] = None
    operation_config: Optional[OperationConfig] = None
    native_id_config: Optional[NativeIdConfig] = None
    request_transformer: Optional[RequestTransformer] = None
    response_transformer: Optional[ResponseTransformer] = None
    status_checker: Optional[StatusChecker] = None
    operations: Optional[tuple[Operation, ...]] = None
    schema: ResourceSchema = field(default_factory=ResourceSchema)
    description: str = ""

    @property
    def descriptor(self) -> ResourceDescriptor:
        return ResourceDescriptor(
            type_name=self.type_name,
            discoverable=Operation.LIST in (self.operations or ()),
            extractable=Operation.READ in (self.operations or ()),
            description=self.description,
        )


class DefinitionRegistry:
    """
    Resource definitions of one API family.

    Holds the family's default configuration, completes definitions with it
    and publishes a provisioner factory for each into a
    :class:`ResourceRegistry`.
    """

    def __init__(
        self,
        resource_registry: ResourceRegistry,
        api_config: APIConfig,
        operation_config: OperationConfig,
        native_id_config: NativeIdConfig,
    ) -> None:
        self.resource_registry = resource_registry
        self.api_config = api_config
        self.operation_config = operation_config
        self.native_id_config = native_id_config
        self._definitions: dict[str, ResourceDefinition] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register(self, definition: ResourceDefinition) -> ResourceDefinition:
        """
        Complete a definition with the family defaults and register it.

        Returns:
            The completed definition

        Raises:
            ConfigurationError: If the type name is empty or already registered
        """
        if not definition.type_name:
            raise ConfigurationError("resource type cannot be empty")

        completed = self._complete(definition)
        with self._lock:
            self.resource_registry.register(
                completed.type_name,
                completed.descriptor,
                completed.schema,
                self._factory_for(completed.type_name),
            )
            self._definitions[completed.type_name] = completed
        return completed

    def register_all(self, definitions: list[ResourceDefinition]) -> None:
        """Register several definitions, stopping at the first failure."""
        for definition in definitions:
            try:
                self.register(definition)
            except ConfigurationError as e:
                raise ConfigurationError(
                    f"failed to register {definition.type_name}: {e.message}"
                ) from e

    def get_definition(self, type_name: str) -> Optional[ResourceDefinition]:
        with self._lock:
            return self._definitions.get(type_name)

    def create_provisioner(
        self,
        transport: TransportPort,
        type_name: str,
        config: Optional[EngineConfig] = None,
    ) -> BaseResource:
        """
        Build a provisioner for a registered definition.

        Raises:
            ConfigurationError: If no definition is registered under ``type_name``
        """
        definition = self.get_definition(type_name)
        if definition is None:
            raise ConfigurationError(f"no definition found for resource type: {type_name}")

        polling = config.polling if config is not None else None
        return BaseResource(
            transport=transport,
            api_config=definition.api_config,
            operation_config=definition.operation_config,
            resource_config=definition.resource_config,
            native_id_config=definition.native_id_config,
            request_transformer=definition.request_transformer,
            response_transformer=definition.response_transformer,
            status_checker=definition.status_checker,
            polling=polling,
        )

    def _complete(self, definition: ResourceDefinition) -> ResourceDefinition:
        api_config = definition.api_config
        if api_config is None or api_config.path_builder is None:
            api_config = self.api_config

        native_id_config = definition.native_id_config
        if native_id_config is None or (
            native_id_config.format is None and native_id_config.parser is None
        ):
            native_id_config = self.native_id_config

        return replace(
            definition,
            api_config=api_config,
            operation_config=definition.operation_config or self.operation_config,
            native_id_config=native_id_config,
            operations=definition.operations or STANDARD_OPERATIONS,
        )

    def _factory_for(self, type_name: str):
        def factory(transport: TransportPort, config: Optional[EngineConfig]) -> BaseResource:
            return self.create_provisioner(transport, type_name, config)

        return factory
