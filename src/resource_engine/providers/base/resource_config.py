"""Resource-level configuration: scope, parent, update behaviour."""

from dataclasses import dataclass, field
from typing import Optional

from resource_engine.domain.resource.value_objects import ScopeType, UpdateMethod


@dataclass(frozen=True)
class ParentResourceConfig:
    """Parent a nested resource lives under.

    ``create_only`` marks parents that only appear in the create path and are
    not needed to address the resource afterwards.
    """

    requires_parent: bool = False
    parent_type: str = ""
    property_name: str = ""
    create_only: bool = False


@dataclass(frozen=True)
class CustomSegmentsConfig:
    """Properties copied into PathContext.custom_segments for path building."""

    property_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class OptimisticLockingConfig:
    """Version field used for optimistic concurrency on updates."""

    enabled: bool = False
    field_name: str = ""
    location_in_url: bool = False


@dataclass(frozen=True)
class ResourceConfig:
    """How a single resource type is addressed and mutated."""

    resource_type: str
    scope: ScopeType = ScopeType.PROJECT
    parent_resource: Optional[ParentResourceConfig] = None
    custom_segments: Optional[CustomSegmentsConfig] = None
    supports_update: bool = False
    update_method: UpdateMethod = UpdateMethod.PUT
    update_query_params: dict[str, str] = field(default_factory=dict)
    optimistic_locking: Optional[OptimisticLockingConfig] = None
    request_wrapper: str = ""

    @property
    def requires_parent(self) -> bool:
        return self.parent_resource is not None and self.parent_resource.requires_parent

    def requires_parent_for(self, creating: bool) -> bool:
        """Whether the parent id is needed to address the resource."""
        if not self.requires_parent:
            return False
        return creating or not self.parent_resource.create_only

    @property
    def parent_type(self) -> str:
        return self.parent_resource.parent_type if self.parent_resource else ""

    @property
    def parent_property(self) -> str:
        return self.parent_resource.property_name if self.parent_resource else ""
