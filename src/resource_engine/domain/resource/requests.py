"""Requests accepted by provisioners.

Payload fields (properties, target configuration) are JSON documents. They
may arrive as a JSON string, raw bytes, or an already decoded mapping; the
orchestrator decodes them at the point of use.
"""

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

JsonPayload = Union[str, bytes, dict[str, Any], None]


class ResourceRequest(BaseModel):
    """Fields shared by every request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resource_type: str = Field(
        validation_alias=AliasChoices("resource_type", "resourceType", "TypeName"),
        description="Registered resource type name",
    )
    target_config: JsonPayload = Field(
        default=None,
        validation_alias=AliasChoices("target_config", "targetConfig", "TargetConfig"),
        description="Per-target configuration JSON",
    )


class CreateRequest(ResourceRequest):
    """Request to create a resource."""

    label: str = ""
    properties: JsonPayload = Field(default=None, description="Desired properties JSON")


class ReadRequest(ResourceRequest):
    """Request to read a resource."""

    native_id: str = Field(validation_alias=AliasChoices("native_id", "nativeId", "NativeID"))


class UpdateRequest(ResourceRequest):
    """Request to update a resource to its desired properties."""

    native_id: str = Field(validation_alias=AliasChoices("native_id", "nativeId", "NativeID"))
    desired_properties: JsonPayload = Field(
        default=None,
        validation_alias=AliasChoices("desired_properties", "desiredProperties"),
    )


class DeleteRequest(ResourceRequest):
    """Request to delete a resource."""

    native_id: str = Field(validation_alias=AliasChoices("native_id", "nativeId", "NativeID"))


class StatusRequest(ResourceRequest):
    """Request to check readiness of a previously created resource."""

    request_id: str = Field(
        default="", validation_alias=AliasChoices("request_id", "requestId", "RequestID")
    )
    native_id: str = Field(validation_alias=AliasChoices("native_id", "nativeId", "NativeID"))


class ListRequest(ResourceRequest):
    """Request to discover existing resources of a type."""

    additional_properties: Optional[dict[str, str]] = Field(
        default=None,
        validation_alias=AliasChoices("additional_properties", "additionalProperties"),
    )
