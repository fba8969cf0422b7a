"""Resource domain - value objects, requests and results of provisioning operations."""

from resource_engine.domain.resource.descriptor import ResourceDescriptor, ResourceSchema
from resource_engine.domain.resource.requests import (
    CreateRequest,
    DeleteRequest,
    ListRequest,
    ReadRequest,
    StatusRequest,
    UpdateRequest,
)
from resource_engine.domain.resource.results import ListResult, ProgressResult, ReadResult
from resource_engine.domain.resource.value_objects import (
    NativeIdFormat,
    Operation,
    OperationErrorCode,
    OperationStatus,
    PathContext,
    ScopeType,
    UpdateMethod,
)

__all__: list[str] = [
    "CreateRequest",
    "DeleteRequest",
    "ListRequest",
    "ListResult",
    "NativeIdFormat",
    "Operation",
    "OperationErrorCode",
    "OperationStatus",
    "PathContext",
    "ProgressResult",
    "ReadRequest",
    "ReadResult",
    "ResourceDescriptor",
    "ResourceSchema",
    "ScopeType",
    "StatusRequest",
    "UpdateMethod",
    "UpdateRequest",
]
