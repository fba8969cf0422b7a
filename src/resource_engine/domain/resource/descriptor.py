"""Descriptors and schemas published for registered resource types."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceSchema(BaseModel):
    """Property schema of a resource type as exposed to the host."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field("id", description="Property holding the server-assigned id")
    required: list[str] = Field(default_factory=list, description="Required properties")
    read_only: list[str] = Field(default_factory=list, description="Server-computed properties")
    create_only: list[str] = Field(
        default_factory=list, description="Properties that force replacement when changed"
    )
    fields: dict[str, Any] = Field(default_factory=dict, description="Field hints")


class ResourceDescriptor(BaseModel):
    """Metadata describing a registered resource type."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    discoverable: bool = True
    extractable: bool = True
    label_query: str = Field("$.name", description="JSONPath used to label discovered resources")
    description: str = ""
