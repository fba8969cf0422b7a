"""Domain exceptions for the resource engine.

Recoverable conditions met while serving a provisioning operation are turned
into results by the orchestrator. The exceptions below are what crosses layer
boundaries before that translation happens, plus the few conditions that are
surfaced to the host as errors (registry misuse, list failures).
"""

from typing import Any, Optional


class ResourceEngineError(Exception):
    """Base exception for all resource engine errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable description of the failure
            error_code: Machine-readable code, defaults to the class name
            details: Additional structured context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ResourceEngineError):
    """Raised when engine or registry configuration is invalid."""


class InvalidIdentifierError(ResourceEngineError):
    """Raised when a native identifier cannot be decoded."""

    def __init__(self, message: str, native_id: Optional[str] = None) -> None:
        super().__init__(message, details={"native_id": native_id})
        self.native_id = native_id


class TransformError(ResourceEngineError):
    """Raised by a request or response transformer on invalid input."""


class UnsupportedResourceTypeError(ResourceEngineError):
    """Raised when a resource type has no registered provisioner."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(
            f"Resource type '{resource_type}' is not registered",
            details={"resource_type": resource_type},
        )
        self.resource_type = resource_type


class ResourceListError(ResourceEngineError):
    """Raised when a list operation cannot reach the remote collection."""


class TransportError(ResourceEngineError):
    """Structured failure of a single wire call.

    ``code`` is one of the transport error codes defined in
    :mod:`resource_engine.infrastructure.transport.error_mapping`.
    """

    def __init__(
        self,
        code: str,
        message: str,
        http_code: int = 0,
        underlying: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message,
            error_code=code,
            details={"http_code": http_code},
        )
        self.code = code
        self.http_code = http_code
        self.underlying = underlying

    def __str__(self) -> str:
        if self.underlying is not None:
            return f"{self.code}: {self.message} ({self.underlying})"
        return f"{self.code}: {self.message}"


class OperationPollingError(ResourceEngineError):
    """Raised when an asynchronous remote operation cannot be driven to completion."""

    def __init__(self, message: str, operation_id: Optional[str] = None) -> None:
        super().__init__(message, details={"operation_id": operation_id})
        self.operation_id = operation_id


class OperationTimeoutError(OperationPollingError):
    """Raised when polling exceeds its overall deadline."""


class OperationFailedError(OperationPollingError):
    """Raised when the remote side reports the operation as failed."""


class OperationCancelledError(OperationPollingError):
    """Raised when the caller cancels an in-flight operation."""


class ScopeResolutionError(ResourceEngineError):
    """Raised when a request lacks a scope coordinate its resource type requires."""
