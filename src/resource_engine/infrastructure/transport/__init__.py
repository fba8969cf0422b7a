"""REST transport adapter and error classification."""

from resource_engine.infrastructure.transport.error_mapping import (
    TransportErrorCode,
    classify_http_status,
    is_not_found,
    to_operation_error_code,
)
from resource_engine.infrastructure.transport.rest_transport import RestTransport

__all__: list[str] = [
    "RestTransport",
    "TransportErrorCode",
    "classify_http_status",
    "is_not_found",
    "to_operation_error_code",
]
