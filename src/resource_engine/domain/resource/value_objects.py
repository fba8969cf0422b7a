"""Resource domain value objects."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Operation(str, Enum):
    """Provisioning operations understood by the engine."""

    CREATE = "Create"
    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"
    LIST = "List"
    CHECK_STATUS = "CheckStatus"


class OperationStatus(str, Enum):
    """Outcome of a mutating operation."""

    SUCCESS = "Success"
    FAILURE = "Failure"
    IN_PROGRESS = "InProgress"


class OperationErrorCode(str, Enum):
    """Error taxonomy reported to the host in results."""

    INVALID_REQUEST = "InvalidRequest"
    NOT_FOUND = "NotFound"
    NOT_UPDATABLE = "NotUpdatable"
    ACCESS_DENIED = "AccessDenied"
    ALREADY_EXISTS = "AlreadyExists"
    THROTTLING = "Throttling"
    SERVICE_INTERNAL_ERROR = "ServiceInternalError"
    GENERAL_SERVICE_EXCEPTION = "GeneralServiceException"


class NativeIdFormat(str, Enum):
    """Composite encodings of a resource's opaque identifier."""

    SIMPLE_NAME = "name"
    FULL_PATH = "path"
    FULL_URL = "url"
    HIERARCHICAL = "hierarchical"
    PROJECT_HIERARCHICAL = "project_hierarchical"
    PROJECT_NESTED = "project_nested"
    PROJECT_REGIONAL = "project_regional"
    PROJECT_REGIONAL_NESTED = "project_regional_nested"

    @property
    def arity(self) -> int:
        """Number of '/'-separated segments the format encodes."""
        return _FORMAT_ARITY[self]


_FORMAT_ARITY = {
    NativeIdFormat.SIMPLE_NAME: 1,
    NativeIdFormat.FULL_PATH: 1,
    NativeIdFormat.FULL_URL: 1,
    NativeIdFormat.HIERARCHICAL: 2,
    NativeIdFormat.PROJECT_HIERARCHICAL: 2,
    NativeIdFormat.PROJECT_NESTED: 3,
    NativeIdFormat.PROJECT_REGIONAL: 3,
    NativeIdFormat.PROJECT_REGIONAL_NESTED: 4,
}


class ScopeType(str, Enum):
    """Scoping level of a resource on the remote platform."""

    NONE = "none"
    GLOBAL = "global"
    REGIONAL = "regional"
    ZONAL = "zonal"
    LOCATION = "location"
    ZONE = "zone"
    PROJECT = "project"

    @property
    def requires_project(self) -> bool:
        """Whether resources of this scope live under a project."""
        return self not in (ScopeType.NONE, ScopeType.ZONE)


class UpdateMethod(str, Enum):
    """HTTP method used for updates."""

    PUT = "PUT"
    PATCH = "PATCH"


class PathContext(BaseModel):
    """Scoping coordinates of a single request.

    Rebuilt for every call. Use ``model_copy(update=...)`` to derive a
    variant; instances are never mutated in place.
    """

    model_config = ConfigDict(frozen=True)

    project: str = ""
    region: str = ""
    zone: str = ""
    location: str = ""
    engine: str = ""
    resource_type: str = ""
    resource_name: str = ""
    parent_resource: str = ""
    parent_type: str = ""
    custom_segments: tuple[str, ...] = ()

    def with_name(self, name: Optional[str]) -> "PathContext":
        """Return a copy addressing the given resource name."""
        return self.model_copy(update={"resource_name": name or ""})
