# ABOUTME: Unit tests for the rate-limit retry coordinator.
# ABOUTME: Uses a recording cancellation so retries are observed without real waiting.

import logging

import httpx
import pytest

from tests.fixtures.fakes import FakeTransport, RecordingCancellation, json_response, rate_limited
from vercel_client.core.errors import APIError, RequestCancelledError, TransportError
from vercel_client.core.executor import ClientRequest, RequestExecutor
from vercel_client.core.retry import MAX_RETRIES, RetryCoordinator

URL = "https://api.vercel.test/v1/edge-config"


def _identity(data: object) -> object:
    return data


@pytest.fixture
def coordinator(transport: FakeTransport) -> RetryCoordinator:
    http = httpx.Client(transport=transport)
    return RetryCoordinator(RequestExecutor(http, "token", 300.0))


def _request(cancellation: RecordingCancellation, body: str = "") -> ClientRequest:
    method = "POST" if body else "GET"
    return ClientRequest(method=method, url=URL, body=body, cancellation=cancellation)


class TestRetryCoordinator:
    """Tests for RetryCoordinator.run."""

    def test_success_on_first_attempt(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(json_response(200, {"id": "ecfg_1"}))
        assert coordinator.run(_request(cancellation), _identity) == {"id": "ecfg_1"}
        assert cancellation.waits == []
        assert transport.call_count == 1

    def test_waits_retry_after_then_succeeds(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        """A 429 with Retry-After: 2 followed by a 200 waits 2s and succeeds."""
        cancellation = RecordingCancellation()
        transport.queue(rate_limited("2"), json_response(200, {"id": "ecfg_1"}))
        assert coordinator.run(_request(cancellation), _identity) == {"id": "ecfg_1"}
        assert cancellation.waits == [2.0]
        assert transport.call_count == 2

    def test_retry_after_above_ceiling_fails_immediately(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(rate_limited("400"))
        with pytest.raises(APIError) as excinfo:
            coordinator.run(_request(cancellation), _identity)
        assert excinfo.value.status_code == 429
        assert cancellation.waits == []
        assert transport.call_count == 1

    def test_retry_after_at_ceiling_fails_immediately(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(rate_limited("300"))
        with pytest.raises(APIError):
            coordinator.run(_request(cancellation), _identity)
        assert transport.call_count == 1

    def test_missing_retry_after_uses_default_delay(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(rate_limited(None), json_response(200, {}))
        coordinator.run(_request(cancellation), _identity)
        assert cancellation.waits == [1.0]

    def test_empty_rate_limit_body_is_final(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        """A bare 429 carries no retry delay, so it is not retried."""
        cancellation = RecordingCancellation()
        transport.queue(json_response(429, headers={"Retry-After": "2"}))
        with pytest.raises(APIError):
            coordinator.run(_request(cancellation), _identity)
        assert transport.call_count == 1

    def test_stops_after_max_retries(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        """Persistent rate limiting gives up after 3 retries (4 attempts)."""
        cancellation = RecordingCancellation()
        transport.queue(*(rate_limited(str(n)) for n in (1, 2, 3, 4)))
        with pytest.raises(APIError) as excinfo:
            coordinator.run(_request(cancellation), _identity)
        assert transport.call_count == MAX_RETRIES + 1 == 4
        assert cancellation.waits == [1.0, 2.0, 3.0]
        assert excinfo.value.retry_after == 4.0

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_non_rate_limit_errors_are_final(
        self, coordinator: RetryCoordinator, transport: FakeTransport, status: int
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(json_response(status, {"error": {"code": "x", "message": "y"}}))
        with pytest.raises(APIError) as excinfo:
            coordinator.run(_request(cancellation), _identity)
        assert excinfo.value.status_code == status
        assert transport.call_count == 1

    def test_transport_error_after_rate_limit_is_final(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(rate_limited("1"), httpx.ConnectError("reset"))
        with pytest.raises(TransportError):
            coordinator.run(_request(cancellation), _identity)
        assert transport.call_count == 2

    def test_cancellation_during_wait(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        """Cancelling while waiting to retry returns a cancellation error, no new attempt."""
        cancellation = RecordingCancellation(cancel_on_wait=True)
        transport.queue(rate_limited("2"), json_response(200, {}))
        with pytest.raises(RequestCancelledError) as excinfo:
            coordinator.run(_request(cancellation), _identity)
        assert isinstance(excinfo.value.__cause__, APIError)
        assert transport.call_count == 1

    def test_body_is_resent_on_retry(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        """Every attempt carries the full request body."""
        cancellation = RecordingCancellation()
        transport.queue(rate_limited("1"), json_response(200, {}))
        coordinator.run(_request(cancellation, body='{"slug": "flags"}'), _identity)
        assert [r.content for r in transport.requests] == [b'{"slug": "flags"}'] * 2

    def test_rate_limit_is_logged(
        self,
        coordinator: RetryCoordinator,
        transport: FakeTransport,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        cancellation = RecordingCancellation()
        transport.queue(rate_limited("2"), json_response(200, {}))
        with caplog.at_level(logging.ERROR, logger="vercel_client.core.retry"):
            coordinator.run(_request(cancellation), _identity)
        records = [r for r in caplog.records if "Rate limit was hit" in r.getMessage()]
        assert len(records) == 1
        assert records[0].retry_after == 2.0
        assert records[0].status_code == 429

    def test_broken_log_handler_does_not_affect_result(
        self, coordinator: RetryCoordinator, transport: FakeTransport
    ) -> None:
        """A failing log handler never changes the outcome of the call."""

        class BrokenHandler(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                raise RuntimeError("log sink down")

        retry_logger = logging.getLogger("vercel_client.core.retry")
        handler = BrokenHandler(level=logging.ERROR)
        retry_logger.addHandler(handler)
        try:
            cancellation = RecordingCancellation()
            transport.queue(rate_limited("1"), json_response(200, {"ok": 1}))
            assert coordinator.run(_request(cancellation), _identity) == {"ok": 1}
        finally:
            retry_logger.removeHandler(handler)

    def test_retry_delay_classification(self, coordinator: RetryCoordinator) -> None:
        assert coordinator.retry_delay(APIError(429, retry_after=5.0)) == 5.0
        assert coordinator.retry_delay(APIError(429, retry_after=0.0)) is None
        assert coordinator.retry_delay(APIError(429, retry_after=300.0)) is None
        assert coordinator.retry_delay(APIError(500, retry_after=5.0)) is None
        assert coordinator.retry_delay(TransportError("boom")) is None
