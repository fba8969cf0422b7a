"""REST transport adapter built on requests."""

import json
import threading
from typing import Any, Optional

import requests

from resource_engine.domain.base.exceptions import OperationCancelledError, TransportError
from resource_engine.domain.base.ports.transport_port import (
    TransportPort,
    TransportRequest,
    TransportResponse,
)
from resource_engine.infrastructure.logging.logger import get_logger
from resource_engine.infrastructure.transport.error_mapping import (
    TransportErrorCode,
    classify_http_status,
)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


class RestTransport(TransportPort):
    """
    Transport performing exactly one HTTP request per call.

    Authentication is the caller's concern: configure headers, auth hooks or
    certificates on the session passed in. No retries are attempted here.
    """

    def __init__(
        self,
        base_url: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the transport.

        Args:
            base_url: Prefix applied to every request path
            session: Pre-configured requests session, a new one is created if omitted
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self._logger = get_logger(__name__)

    def do(
        self, request: TransportRequest, cancel_event: Optional[threading.Event] = None
    ) -> TransportResponse:
        method = request.method.upper()
        if method not in SUPPORTED_METHODS:
            raise TransportError(TransportErrorCode.UNKNOWN.value, f"unsupported method: {method}")

        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelledError(f"{method} {request.path} cancelled before sending")

        url = f"{self.base_url}{request.path}"
        self._logger.debug("Sending %s %s", method, url)

        try:
            response = self.session.request(
                method,
                url,
                json=request.body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(
                TransportErrorCode.UNKNOWN.value,
                f"{method} {request.path} failed",
                underlying=e,
            ) from e

        self._logger.debug("Received %s for %s %s", response.status_code, method, url)

        code = classify_http_status(response.status_code)
        if code != TransportErrorCode.NONE:
            raise TransportError(
                code.value,
                self._error_message(response),
                http_code=response.status_code,
            )

        return self._parse_response(response)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the API's error message, falling back to the reason phrase."""
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return response.text or response.reason or f"HTTP {response.status_code}"

    @staticmethod
    def _parse_response(response: requests.Response) -> TransportResponse:
        """Decode a JSON object into body or a JSON array into body_array."""
        raw = response.content
        if not raw or not raw.strip():
            return TransportResponse(status_code=response.status_code)

        try:
            decoded: Any = json.loads(raw)
        except ValueError as e:
            raise TransportError(
                TransportErrorCode.UNKNOWN.value,
                f"failed to parse response: {raw[:200]!r}",
                http_code=response.status_code,
                underlying=e,
            ) from e

        if isinstance(decoded, dict):
            return TransportResponse(status_code=response.status_code, body=decoded)
        if isinstance(decoded, list):
            return TransportResponse(status_code=response.status_code, body_array=decoded)
        # Scalar responses (e.g. a bare string id) carry no structured body.
        return TransportResponse(status_code=response.status_code)
