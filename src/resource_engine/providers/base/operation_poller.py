"""Polling of asynchronous remote operations."""

import threading
import time
from typing import Any, Callable, Optional

from resource_engine.config.schemas.engine_schema import PollingConfig
from resource_engine.domain.base.exceptions import (
    OperationCancelledError,
    OperationPollingError,
    OperationTimeoutError,
    TransportError,
)
from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.value_objects import PathContext
from resource_engine.infrastructure.logging.logger import get_logger
from resource_engine.providers.base.operation_config import OperationConfig

# Returns True when the wait was interrupted by cancellation.
WaitFunc = Callable[[float, Optional[threading.Event]], bool]


def cancellable_wait(seconds: float, cancel_event: Optional[threading.Event]) -> bool:
    """Sleep for ``seconds`` or until ``cancel_event`` is set."""
    if cancel_event is None:
        time.sleep(seconds)
        return False
    return cancel_event.wait(seconds)


class OperationPoller:
    """
    Drives an asynchronous operation to a terminal state.

    The operation URL is polled immediately, then after waits growing
    geometrically from ``initial_interval`` up to ``max_interval``, until the
    status checker reports completion or ``timeout`` elapses. Waits end early
    when the cancel event is set.
    """

    def __init__(
        self,
        transport: TransportPort,
        operation_config: OperationConfig,
        polling: Optional[PollingConfig] = None,
        wait: WaitFunc = cancellable_wait,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.transport = transport
        self.operation_config = operation_config
        self.polling = polling or PollingConfig()
        self._wait = wait
        self._clock = clock
        self._logger = get_logger(__name__)

    def poll(
        self,
        ctx: PathContext,
        operation_id: str,
        cancel_event: Optional[threading.Event] = None,
    ) -> dict[str, Any]:
        """
        Poll until the operation completes.

        Args:
            ctx: Path context of the mutated resource
            operation_id: Handle extracted from the mutation response
            cancel_event: Set by the caller to abandon polling

        Returns:
            Body of the completed operation

        Raises:
            OperationPollingError: If polling is not configured or a poll or status
                check fails
            OperationFailedError: If the remote side reports a failure
            OperationTimeoutError: If the deadline passes first
            OperationCancelledError: If the caller cancels
        """
        config = self.operation_config
        if not config.can_poll:
            raise OperationPollingError("operation polling not configured", operation_id)

        url = config.operation_url_builder(ctx, operation_id)
        deadline = self._clock() + self.polling.timeout
        interval = self.polling.initial_interval
        attempt = 0

        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise OperationCancelledError(f"operation {operation_id} cancelled", operation_id)

            attempt += 1
            try:
                response = self.transport.get(url, cancel_event)
            except TransportError as e:
                raise OperationPollingError(
                    f"failed to poll operation {operation_id}: {e}", operation_id
                ) from e

            body = response.body or {}
            try:
                done = config.operation_status_checker(body)
            except OperationPollingError:
                raise
            except Exception as e:
                raise OperationPollingError(
                    f"failed to evaluate operation {operation_id}: {e}", operation_id
                ) from e
            if done:
                self._logger.debug(
                    "Operation %s completed after %d poll(s)", operation_id, attempt
                )
                return body

            remaining = deadline - self._clock()
            if remaining <= 0:
                raise OperationTimeoutError(
                    f"operation {operation_id} timed out after {self.polling.timeout:g}s",
                    operation_id,
                )

            delay = min(interval, remaining)
            self._logger.debug(
                "Operation %s not done, next poll in %.1fs", operation_id, delay
            )
            if self._wait(delay, cancel_event):
                raise OperationCancelledError(f"operation {operation_id} cancelled", operation_id)
            interval = min(interval * self.polling.multiplier, self.polling.max_interval)
