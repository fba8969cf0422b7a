"""Encoding and decoding of native identifiers.

A native identifier is the opaque string the host stores for a resource. It
carries the scoping coordinates needed to address the resource again, joined
with '/' according to a :class:`NativeIdFormat`. Only the last segment may
itself contain '/'.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from resource_engine.domain.base.exceptions import InvalidIdentifierError
from resource_engine.domain.resource.value_objects import NativeIdFormat, PathContext


class NativeIdParser(Protocol):
    """Decodes a native identifier into a PathContext."""

    def __call__(self, native_id: str) -> PathContext: ...


class NativeIdBuilder(Protocol):
    """Encodes a PathContext into a native identifier."""

    def __call__(self, ctx: PathContext) -> str: ...


@dataclass(frozen=True)
class NativeIdConfig:
    """How a resource type encodes its native identifiers.

    A custom ``parser`` (and ``builder``) bypasses the format entirely.
    """

    format: Optional[NativeIdFormat] = None
    parser: Optional[NativeIdParser] = None
    builder: Optional[NativeIdBuilder] = None

    @property
    def effective_format(self) -> NativeIdFormat:
        return self.format or NativeIdFormat.SIMPLE_NAME


# Field order of each composite format, resource name always last.
_FORMAT_FIELDS = {
    NativeIdFormat.HIERARCHICAL: ("zone", "resource_name"),
    NativeIdFormat.PROJECT_HIERARCHICAL: ("project", "resource_name"),
    NativeIdFormat.PROJECT_NESTED: ("project", "parent_resource", "resource_name"),
    NativeIdFormat.PROJECT_REGIONAL: ("project", "region", "resource_name"),
    NativeIdFormat.PROJECT_REGIONAL_NESTED: (
        "project",
        "region",
        "parent_resource",
        "resource_name",
    ),
}


def parse_native_id(config: NativeIdConfig, native_id: str) -> PathContext:
    """
    Decode a native identifier.

    Args:
        config: Native id configuration of the resource type
        native_id: Identifier previously produced by :func:`build_native_id`

    Returns:
        PathContext populated with the fields the format encodes

    Raises:
        InvalidIdentifierError: If the identifier is empty or has the wrong
            number of segments for its format
    """
    if config.parser is not None:
        return config.parser(native_id)

    if not native_id:
        raise InvalidIdentifierError("native id is empty", native_id)

    id_format = config.effective_format
    fields = _FORMAT_FIELDS.get(id_format)
    if fields is None:
        return PathContext(resource_name=native_id)

    parts = native_id.split("/", len(fields) - 1)
    if len(parts) != len(fields) or not all(parts):
        raise InvalidIdentifierError(
            f"invalid {id_format.value} id '{native_id}': expected {len(fields)} segments "
            f"({'/'.join(fields)})",
            native_id,
        )
    return PathContext(**dict(zip(fields, parts)))


def build_native_id(config: NativeIdConfig, ctx: PathContext) -> str:
    """
    Encode a PathContext as a native identifier.

    Missing scope degrades the encoding to the longest form the context can
    fill: project/region/parent/name, then project/parent/name, then
    project/name, then the bare name.
    """
    if config.builder is not None:
        return config.builder(ctx)

    id_format = config.effective_format
    name = ctx.resource_name

    if id_format == NativeIdFormat.HIERARCHICAL:
        return _join(ctx.zone, name) if ctx.zone else name

    if id_format not in _FORMAT_FIELDS:
        return name

    if not ctx.project:
        return name

    if id_format == NativeIdFormat.PROJECT_REGIONAL_NESTED:
        if ctx.region and ctx.parent_resource:
            return _join(ctx.project, ctx.region, ctx.parent_resource, name)
        if ctx.parent_resource:
            return _join(ctx.project, ctx.parent_resource, name)
    elif id_format == NativeIdFormat.PROJECT_NESTED:
        if ctx.parent_resource:
            return _join(ctx.project, ctx.parent_resource, name)
    elif id_format == NativeIdFormat.PROJECT_REGIONAL:
        if ctx.region:
            return _join(ctx.project, ctx.region, name)

    return _join(ctx.project, name)


def _join(*segments: str) -> str:
    return "/".join(segments)
