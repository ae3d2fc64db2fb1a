# ABOUTME: Rate-limit aware retry loop around the request executor.
# ABOUTME: Waits out 429 responses using the server's Retry-After delay, honoring cancellation.

import enum
import logging
from typing import TypeVar, overload

from vercel_client.core.errors import APIError, RequestCancelledError
from vercel_client.core.executor import ClientRequest, OutputSlot, RequestExecutor

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRIES = 3

# Retry-After values at or above this many seconds are not waited out.
MAX_RETRY_AFTER = 5 * 60.0


class RetryState(enum.Enum):
    """States of a single call moving through the retry loop."""

    ATTEMPTING = "attempting"
    WAITING_TO_RETRY = "waiting_to_retry"
    SUCCEEDED = "succeeded"
    FAILED_FINAL = "failed_final"
    CANCELLED = "cancelled"


class RetryCoordinator:
    """Runs a ClientRequest, retrying only when the API rate-limits it.

    A call is retried when it fails with a 429 APIError whose retry delay is
    above zero and below ``max_retry_after``. Every other failure is raised
    straight away. After ``max_retries`` retries the last error is raised.
    The coordinator keeps no per-call state, so one instance serves
    concurrent calls.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        *,
        max_retries: int = MAX_RETRIES,
        max_retry_after: float = MAX_RETRY_AFTER,
    ) -> None:
        self._executor = executor
        self._max_retries = max_retries
        self._max_retry_after = max_retry_after

    def retry_delay(self, exc: Exception) -> float | None:
        """Seconds to wait before retrying after exc, or None if it is final."""
        if not isinstance(exc, APIError) or exc.status_code != 429:
            return None
        if exc.retry_after <= 0 or exc.retry_after >= self._max_retry_after:
            return None
        return exc.retry_after

    @overload
    def run(self, request: ClientRequest, output: OutputSlot[T]) -> T: ...

    @overload
    def run(self, request: ClientRequest, output: None = None) -> None: ...

    def run(self, request: ClientRequest, output: OutputSlot[T] | None = None) -> T | None:
        """Execute request, waiting out rate limits up to max_retries times.

        Raises:
            RequestCancelledError: The cancellation fired while waiting to retry.
            VercelClientError: Whatever the final attempt failed with.
        """
        retries = 0
        while True:
            try:
                result = self._executor.execute(request, output)
            except APIError as exc:
                delay = self.retry_delay(exc)
                if delay is None or retries >= self._max_retries:
                    self._log_transition(request, RetryState.FAILED_FINAL)
                    raise
                retries += 1
                self._wait(request, exc, delay, retries)
                continue
            self._log_transition(request, RetryState.SUCCEEDED)
            return result

    def _wait(self, request: ClientRequest, exc: APIError, delay: float, attempt: int) -> None:
        self._log_transition(request, RetryState.WAITING_TO_RETRY)
        self._report_rate_limit(request, exc, delay, attempt)
        if request.cancellation.wait(delay):
            self._log_transition(request, RetryState.CANCELLED)
            raise RequestCancelledError("request cancelled while waiting to retry") from exc
        self._log_transition(request, RetryState.ATTEMPTING)

    def _report_rate_limit(
        self, request: ClientRequest, exc: APIError, delay: float, attempt: int
    ) -> None:
        """Emit the structured rate-limit event. A failing log handler is ignored."""
        try:
            logger.error(
                "Rate limit was hit, retrying %s %s in %.1fs (retry %d/%d): %s",
                request.method,
                request.url,
                delay,
                attempt,
                self._max_retries,
                exc,
                extra={
                    "retry_after": delay,
                    "status_code": exc.status_code,
                    "error_code": exc.code,
                    "attempt": attempt,
                },
            )
        except Exception:  # noqa: BLE001
            # Handler.handle does not catch errors raised by a custom emit().
            pass

    @staticmethod
    def _log_transition(request: ClientRequest, state: RetryState) -> None:
        logger.debug("%s %s: %s", request.method, request.url, state.value)
