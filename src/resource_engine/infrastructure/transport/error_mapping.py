"""Classification of wire failures and their translation to result error codes."""

from enum import Enum

from resource_engine.domain.base.exceptions import TransportError
from resource_engine.domain.resource.value_objects import OperationErrorCode


class TransportErrorCode(str, Enum):
    """Transport-level failure categories."""

    NONE = "NONE"
    INVALID_INPUT = "INVALID_INPUT"
    UNAUTHORIZED = "UNAUTHORIZED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    THROTTLING = "THROTTLING"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN = "UNKNOWN"


_STATUS_CODES = {
    400: TransportErrorCode.INVALID_INPUT,
    401: TransportErrorCode.UNAUTHORIZED,
    403: TransportErrorCode.UNAUTHORIZED,
    404: TransportErrorCode.RESOURCE_NOT_FOUND,
    409: TransportErrorCode.ALREADY_EXISTS,
    429: TransportErrorCode.THROTTLING,
    500: TransportErrorCode.INTERNAL_ERROR,
    502: TransportErrorCode.INTERNAL_ERROR,
    503: TransportErrorCode.INTERNAL_ERROR,
}

_OPERATION_CODES = {
    TransportErrorCode.INVALID_INPUT: OperationErrorCode.INVALID_REQUEST,
    TransportErrorCode.UNAUTHORIZED: OperationErrorCode.ACCESS_DENIED,
    TransportErrorCode.RESOURCE_NOT_FOUND: OperationErrorCode.NOT_FOUND,
    TransportErrorCode.ALREADY_EXISTS: OperationErrorCode.ALREADY_EXISTS,
    TransportErrorCode.THROTTLING: OperationErrorCode.THROTTLING,
}


def classify_http_status(status_code: int) -> TransportErrorCode:
    """Map an HTTP status code to a transport error code."""
    if 200 <= status_code < 300:
        return TransportErrorCode.NONE
    return _STATUS_CODES.get(status_code, TransportErrorCode.UNKNOWN)


def to_operation_error_code(code: str) -> OperationErrorCode:
    """Translate a transport error code to the result taxonomy.

    Anything without a dedicated mapping is reported as a service error.
    """
    try:
        transport_code = TransportErrorCode(code)
    except ValueError:
        return OperationErrorCode.SERVICE_INTERNAL_ERROR
    return _OPERATION_CODES.get(transport_code, OperationErrorCode.SERVICE_INTERNAL_ERROR)


def is_not_found(error: TransportError) -> bool:
    """Whether the error denotes an absent remote resource."""
    return error.code == TransportErrorCode.RESOURCE_NOT_FOUND
