"""Domain port for the REST transport."""

import threading
from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransportRequest(BaseModel):
    """A single wire call."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    body: Optional[dict[str, Any]] = None


class TransportResponse(BaseModel):
    """Decoded response of a wire call.

    A JSON object lands in ``body``, a JSON array in ``body_array``.
    """

    status_code: int = 200
    body: Optional[dict[str, Any]] = None
    body_array: Optional[list[Any]] = None


class TransportPort(ABC):
    """Port performing one logical HTTP request per call."""

    @abstractmethod
    def do(
        self, request: TransportRequest, cancel_event: Optional[threading.Event] = None
    ) -> TransportResponse:
        """
        Execute a request against the remote API.

        Args:
            request: Method, path and optional JSON body
            cancel_event: Set by the caller to abandon the call

        Returns:
            TransportResponse: Decoded response

        Raises:
            TransportError: On any non-2xx status or network failure
        """

    def get(
        self, path: str, cancel_event: Optional[threading.Event] = None
    ) -> TransportResponse:
        """Issue a GET request."""
        return self.do(TransportRequest(method="GET", path=path), cancel_event)

    def post(
        self,
        path: str,
        body: Optional[dict[str, Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> TransportResponse:
        """Issue a POST request."""
        return self.do(TransportRequest(method="POST", path=path, body=body), cancel_event)

    def put(
        self,
        path: str,
        body: Optional[dict[str, Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> TransportResponse:
        """Issue a PUT request."""
        return self.do(TransportRequest(method="PUT", path=path, body=body), cancel_event)

    def patch(
        self,
        path: str,
        body: Optional[dict[str, Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> TransportResponse:
        """Issue a PATCH request."""
        return self.do(TransportRequest(method="PATCH", path=path, body=body), cancel_event)

    def delete(
        self, path: str, cancel_event: Optional[threading.Event] = None
    ) -> TransportResponse:
        """Issue a DELETE request."""
        return self.do(TransportRequest(method="DELETE", path=path), cancel_event)
