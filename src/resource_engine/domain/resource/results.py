"""Results returned by provisioners."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from resource_engine.domain.resource.value_objects import (
    Operation,
    OperationErrorCode,
    OperationStatus,
)


class ProgressResult(BaseModel):
    """Outcome of a mutating operation (create, update, delete, status).

    Business failures are carried here rather than raised, so a result is
    returned even when the operation failed.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation
    operation_status: OperationStatus
    native_id: str = ""
    error_code: Optional[OperationErrorCode] = None
    status_message: str = ""
    request_id: str = ""
    resource_properties: str = Field(default="", description="Serialized JSON properties")

    @classmethod
    def success(
        cls,
        operation: Operation,
        native_id: str = "",
        resource_properties: str = "",
        request_id: str = "",
    ) -> "ProgressResult":
        """Build a successful result."""
        return cls(
            operation=operation,
            operation_status=OperationStatus.SUCCESS,
            native_id=native_id,
            resource_properties=resource_properties,
            request_id=request_id,
        )

    @classmethod
    def failure(
        cls,
        operation: Operation,
        error_code: OperationErrorCode,
        status_message: str,
        native_id: str = "",
        request_id: str = "",
    ) -> "ProgressResult":
        """Build a failed result."""
        return cls(
            operation=operation,
            operation_status=OperationStatus.FAILURE,
            error_code=error_code,
            status_message=status_message,
            native_id=native_id,
            request_id=request_id,
        )

    @property
    def succeeded(self) -> bool:
        return self.operation_status == OperationStatus.SUCCESS


class ReadResult(BaseModel):
    """Outcome of a read."""

    model_config = ConfigDict(frozen=True)

    resource_type: str
    properties: str = ""
    error_code: Optional[OperationErrorCode] = None
    status_message: str = ""


class ListResult(BaseModel):
    """Native identifiers discovered by a list."""

    model_config = ConfigDict(frozen=True)

    native_ids: list[str] = Field(default_factory=list)
