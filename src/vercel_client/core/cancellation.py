# ABOUTME: Caller-driven cancellation and deadlines for client calls.
# ABOUTME: Wraps a threading.Event so another thread can abort a request or a retry wait.

import threading
import time
from collections.abc import Callable

from vercel_client.core.errors import RequestCancelledError


class Cancellation:
    """Cancellation signal threaded through every client call.

    A Cancellation fires when cancel() is called or when its optional
    deadline (a time.monotonic() value) passes. It is safe to share between
    threads: one thread may block in wait() while another calls cancel().
    """

    def __init__(
        self,
        deadline: float | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._event = threading.Event()
        self._deadline = deadline
        self._clock = clock

    @classmethod
    def with_timeout(cls, seconds: float) -> "Cancellation":
        """Create a Cancellation whose deadline is ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._event.set()

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and self._clock() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def wait(self, seconds: float) -> bool:
        """Block for up to ``seconds``.

        Returns:
            True if the signal fired before the delay elapsed, False if the
            full delay passed.
        """
        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            # The deadline lands inside the delay either way.
            self._event.wait(remaining)
            return True
        return self._event.wait(seconds)

    def raise_if_cancelled(self) -> None:
        """Raise RequestCancelledError if the signal has fired."""
        if self._event.is_set():
            raise RequestCancelledError("request cancelled")
        if self.cancelled:
            raise RequestCancelledError("request deadline exceeded")
