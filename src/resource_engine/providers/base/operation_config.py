"""Operation-level configuration: synchronous vs polled mutations."""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.value_objects import PathContext


class OperationIdExtractor(Protocol):
    """Extracts an operation handle from a mutation response, None if synchronous."""

    def __call__(self, body: dict[str, Any]) -> Optional[str]: ...


class OperationUrlBuilder(Protocol):
    """Builds the URL polled for an operation handle."""

    def __call__(self, ctx: PathContext, operation_id: str) -> str: ...


class OperationStatusChecker(Protocol):
    """Returns True once an operation is done, raises OperationFailedError on failure."""

    def __call__(self, body: dict[str, Any]) -> bool: ...


class NativeIdExtractor(Protocol):
    """Derives the native identifier from a create response, '' if unknown."""

    def __call__(self, body: dict[str, Any], ctx: PathContext) -> str: ...


class PostMutationHook(Protocol):
    """Side effect run after a successful mutation (e.g. zone refresh)."""

    def __call__(self, ctx: PathContext, transport: TransportPort) -> None: ...


@dataclass(frozen=True)
class OperationConfig:
    """How mutations of an API family complete."""

    synchronous: bool = True
    operation_id_extractor: Optional[OperationIdExtractor] = None
    operation_url_builder: Optional[OperationUrlBuilder] = None
    operation_status_checker: Optional[OperationStatusChecker] = None
    native_id_extractor: Optional[NativeIdExtractor] = None
    post_mutation_hook: Optional[PostMutationHook] = None

    @property
    def can_poll(self) -> bool:
        return (
            self.operation_url_builder is not None
            and self.operation_status_checker is not None
        )


class StatusChecker(Protocol):
    """Readiness gate of a created resource.

    Returns True once the resource is ready, raises to signal a failed state.
    """

    def __call__(self, body: dict[str, Any]) -> bool: ...
