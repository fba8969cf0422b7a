"""Domain ports - interfaces the engine depends on and exposes."""

from resource_engine.domain.base.ports.provisioner_port import Provisioner
from resource_engine.domain.base.ports.transport_port import (
    TransportPort,
    TransportRequest,
    TransportResponse,
)

__all__: list[str] = [
    "Provisioner",
    "TransportPort",
    "TransportRequest",
    "TransportResponse",
]
