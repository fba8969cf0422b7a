"""Request and response field-mapping hooks."""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.value_objects import Operation


@dataclass(frozen=True)
class TransformContext:
    """Per-call context handed to transformers."""

    operation: Operation
    resource_type: str = ""
    project: str = ""
    region: str = ""
    zone: str = ""
    location: str = ""
    transport: Optional[TransportPort] = None
    cancel_event: Optional[threading.Event] = None


class RequestTransformer(ABC):
    """Maps host properties to the API request body."""

    @abstractmethod
    def transform(self, properties: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        """
        Build the request body. Must not mutate ``properties``.

        Raises:
            TransformError: If the properties cannot be mapped
        """


class ResponseTransformer(ABC):
    """Maps an API response body to host properties."""

    @abstractmethod
    def transform(self, body: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        """Build host properties. Must not mutate ``body``."""


TransformFunc = Callable[[dict[str, Any], TransformContext], dict[str, Any]]


class RequestTransformerFunc(RequestTransformer):
    """Adapts a plain function to RequestTransformer."""

    def __init__(self, func: TransformFunc) -> None:
        self._func = func

    def transform(self, properties: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        return self._func(properties, ctx)


class ResponseTransformerFunc(ResponseTransformer):
    """Adapts a plain function to ResponseTransformer."""

    def __init__(self, func: TransformFunc) -> None:
        self._func = func

    def transform(self, body: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        return self._func(body, ctx)


class PassThroughTransformer(RequestTransformer, ResponseTransformer):
    """Identity transformer, returns a shallow copy of its input."""

    def transform(self, properties: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        return dict(properties)


class FieldMappingTransformer(RequestTransformer, ResponseTransformer):
    """
    Renames fields and optionally drops others.

    Args:
        field_mappings: Source field -> destination field
        drop_fields: Fields removed from the output
        drop_unmapped: Keep only mapped fields when True
    """

    def __init__(
        self,
        field_mappings: Optional[dict[str, str]] = None,
        drop_fields: tuple[str, ...] = (),
        drop_unmapped: bool = False,
    ) -> None:
        self.field_mappings = dict(field_mappings or {})
        self.drop_fields = frozenset(drop_fields)
        self.drop_unmapped = drop_unmapped

    def transform(self, properties: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        mapped: dict[str, Any] = {}

        for source, destination in self.field_mappings.items():
            if source in properties and source not in self.drop_fields:
                mapped[destination] = properties[source]

        if not self.drop_unmapped:
            for key, value in properties.items():
                if key in self.field_mappings or key in self.drop_fields or key in mapped:
                    continue
                mapped[key] = value

        return mapped
