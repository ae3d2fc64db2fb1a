# ABOUTME: Unit tests for the Cancellation signal.
# ABOUTME: Tests explicit cancel, deadlines, and waits that end early.

import threading
import time

import pytest

from vercel_client.core.cancellation import Cancellation
from vercel_client.core.errors import RequestCancelledError


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestCancellation:
    """Tests for Cancellation."""

    def test_fresh_cancellation_is_not_cancelled(self) -> None:
        cancellation = Cancellation()
        assert not cancellation.cancelled
        assert cancellation.remaining() is None
        cancellation.raise_if_cancelled()

    def test_cancel_fires(self) -> None:
        cancellation = Cancellation()
        cancellation.cancel()
        assert cancellation.cancelled
        with pytest.raises(RequestCancelledError, match="cancelled"):
            cancellation.raise_if_cancelled()

    def test_deadline_fires(self) -> None:
        clock = FakeClock()
        cancellation = Cancellation(deadline=105.0, clock=clock)
        assert cancellation.remaining() == 5.0
        assert not cancellation.cancelled
        clock.now = 105.0
        assert cancellation.cancelled
        assert cancellation.remaining() == 0.0
        with pytest.raises(RequestCancelledError, match="deadline"):
            cancellation.raise_if_cancelled()

    def test_wait_full_delay_returns_false(self) -> None:
        assert Cancellation().wait(0.01) is False

    def test_wait_returns_true_when_cancelled(self) -> None:
        cancellation = Cancellation()
        cancellation.cancel()
        assert cancellation.wait(10) is True

    def test_wait_ends_early_on_cancel_from_another_thread(self) -> None:
        """A cancel from another thread interrupts a long wait promptly."""
        cancellation = Cancellation()
        timer = threading.Timer(0.05, cancellation.cancel)
        timer.start()
        start = time.monotonic()
        try:
            assert cancellation.wait(10) is True
        finally:
            timer.cancel()
        assert time.monotonic() - start < 2

    def test_wait_ends_at_deadline(self) -> None:
        """A deadline inside the delay ends the wait at the deadline."""
        cancellation = Cancellation.with_timeout(0.05)
        start = time.monotonic()
        assert cancellation.wait(10) is True
        assert time.monotonic() - start < 2
