"""Host-facing facade routing provisioning calls to registered resource types."""

from __future__ import annotations

import threading
from typing import Optional, TypeVar

from resource_engine.config.schemas.engine_schema import EngineConfig
from resource_engine.config.target_config import augment_target_config
from resource_engine.domain.base.exceptions import UnsupportedResourceTypeError
from resource_engine.domain.base.ports.provisioner_port import Provisioner
from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.descriptor import ResourceDescriptor, ResourceSchema
from resource_engine.domain.resource.requests import (
    CreateRequest,
    DeleteRequest,
    ListRequest,
    ReadRequest,
    ResourceRequest,
    StatusRequest,
    UpdateRequest,
)
from resource_engine.domain.resource.results import ListResult, ProgressResult, ReadResult
from resource_engine.infrastructure.logging.logger import get_logger
from resource_engine.infrastructure.registry.resource_registry import ResourceRegistry

RequestT = TypeVar("RequestT", bound=ResourceRequest)


class ResourcePlugin:
    """
    Entry point used by the host orchestrator.

    Each call augments the request's target configuration with the engine's
    configured project, resolves the provisioner of the requested resource
    type and delegates to it.
    """

    def __init__(
        self,
        registry: ResourceRegistry,
        transport: TransportPort,
        config: Optional[EngineConfig] = None,
    ) -> None:
        """
        Initialize the plugin.

        Args:
            registry: Registry holding every supported resource type
            transport: Transport shared by all provisioners
            config: Engine configuration, defaults apply when omitted
        """
        self.registry = registry
        self.transport = transport
        self.config = config or EngineConfig()
        self._logger = get_logger(__name__)

    def create(
        self, request: CreateRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        request = self._prepare(request)
        return self._provisioner(request.resource_type).create(request, cancel_event)

    def read(
        self, request: ReadRequest, cancel_event: Optional[threading.Event] = None
    ) -> ReadResult:
        request = self._prepare(request)
        result = self._provisioner(request.resource_type).read(request, cancel_event)
        return result.model_copy(update={"resource_type": request.resource_type})

    def update(
        self, request: UpdateRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        request = self._prepare(request)
        return self._provisioner(request.resource_type).update(request, cancel_event)

    def delete(
        self, request: DeleteRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        request = self._prepare(request)
        return self._provisioner(request.resource_type).delete(request, cancel_event)

    def status(
        self, request: StatusRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        request = self._prepare(request)
        return self._provisioner(request.resource_type).status(request, cancel_event)

    def list(
        self, request: ListRequest, cancel_event: Optional[threading.Event] = None
    ) -> ListResult:
        request = self._prepare(request)
        return self._provisioner(request.resource_type).list(request, cancel_event)

    def supported_resources(self) -> list[ResourceDescriptor]:
        """Descriptors of every registered resource type."""
        return self.registry.get_all_descriptors()

    def schema_for_resource(self, resource_type: str) -> ResourceSchema:
        """
        Get the schema of a resource type.

        Raises:
            UnsupportedResourceTypeError: If the type is not registered
        """
        schema = self.registry.get_schema(resource_type)
        if schema is None:
            raise UnsupportedResourceTypeError(resource_type)
        return schema

    def _prepare(self, request: RequestT) -> RequestT:
        target_config = augment_target_config(request.target_config, self.config.cloud_project_id)
        return request.model_copy(update={"target_config": target_config})

    def _provisioner(self, resource_type: str) -> Provisioner:
        if not self.registry.has_provisioner(resource_type):
            self._logger.error("Unsupported resource type: %s", resource_type)
            raise UnsupportedResourceTypeError(resource_type)
        return self.registry.get(resource_type, self.transport, self.config)
