# ABOUTME: Error types raised by the Vercel API client and the response classifier.
# ABOUTME: Turns non-2xx responses into APIError and exposes status predicates like not_found().

import enum
import json
from collections.abc import Mapping

import httpx

# Fallback delay carried by every classified error. Only 429s are retried.
DEFAULT_RETRY_AFTER = 1.0


class VercelClientError(Exception):
    """Base class for every error raised by the client."""


class TransportError(VercelClientError):
    """The HTTP round-trip failed (DNS, connection, timeout)."""


class DecodeError(VercelClientError):
    """A response body could not be decoded into the expected JSON shape."""

    def __init__(self, message: str, raw_body: bytes = b"", status_code: int | None = None) -> None:
        super().__init__(message)
        self.raw_body = raw_body
        self.status_code = status_code


class RequestCancelledError(VercelClientError):
    """The caller cancelled the request or its deadline passed."""


class ErrorKind(enum.Enum):
    """Discriminates the API error cases callers branch on."""

    NOT_FOUND = "not_found"
    NO_CONTENT = "no_content"
    RATE_LIMITED = "rate_limited"
    OTHER = "other"


_KIND_BY_STATUS = {
    404: ErrorKind.NOT_FOUND,
    204: ErrorKind.NO_CONTENT,
    429: ErrorKind.RATE_LIMITED,
}


class APIError(VercelClientError):
    """An error response returned by the Vercel API.

    The status code is always set. ``code`` and ``message`` come from the
    ``{"error": {...}}`` envelope and are empty when the body was empty.
    ``retry_after`` is the delay in seconds the server asked for; it is only
    meaningful for 429 responses.
    """

    def __init__(
        self,
        status_code: int,
        code: str = "",
        message: str = "",
        raw_message: bytes = b"",
        retry_after: float = 0.0,
    ) -> None:
        self._status_code = status_code
        self._code = code
        self._message = message
        self._raw_message = raw_message
        self._retry_after = retry_after
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def raw_message(self) -> bytes:
        return self._raw_message

    @property
    def retry_after(self) -> float:
        return self._retry_after

    @property
    def kind(self) -> ErrorKind:
        return _KIND_BY_STATUS.get(self._status_code, ErrorKind.OTHER)

    def __str__(self) -> str:
        if self._code or self._message:
            return f"{self._code} - {self._message}"
        return f"HTTP {self._status_code}"

    def __repr__(self) -> str:
        return (
            f"APIError(status_code={self._status_code!r}, code={self._code!r}, "
            f"message={self._message!r})"
        )


def _parse_retry_after(raw: str | None) -> float | None:
    """Parse a Retry-After header holding a positive number of seconds."""
    if not raw:
        return None
    try:
        seconds = int(raw)
    except ValueError:
        return None
    if seconds <= 0:
        return None
    return float(seconds)


def classify_response(
    status_code: int, body: bytes, headers: Mapping[str, str] | None = None
) -> APIError:
    """Build the APIError for a response with a status code of 300 or above.

    Args:
        status_code: HTTP status of the response.
        body: The raw response body.
        headers: Response headers; only Retry-After is consulted.

    Returns:
        The classified error. It is returned, not raised.

    Raises:
        DecodeError: If a non-empty body is not a JSON error envelope.
    """
    if not body:
        return APIError(status_code=status_code)

    try:
        payload = json.loads(body)
    except ValueError as exc:
        msg = f"error unmarshaling response for status code {status_code}: {exc}"
        raise DecodeError(msg, raw_body=body, status_code=status_code) from exc

    envelope = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(payload, dict) or not isinstance(envelope, (dict, type(None))):
        msg = f"error unmarshaling response for status code {status_code}: unexpected error shape"
        raise DecodeError(msg, raw_body=body, status_code=status_code)
    envelope = envelope or {}

    retry_after = DEFAULT_RETRY_AFTER
    if status_code == 429:
        parsed = _parse_retry_after(httpx.Headers(headers or {}).get("Retry-After"))
        if parsed is not None:
            retry_after = parsed

    return APIError(
        status_code=status_code,
        code=str(envelope.get("code") or ""),
        message=str(envelope.get("message") or ""),
        raw_message=body,
        retry_after=retry_after,
    )


def has_status(err: BaseException | None, status_code: int) -> bool:
    """Whether err is an APIError (or wraps one) with the given status code."""
    while err is not None:
        if isinstance(err, APIError):
            return err.status_code == status_code
        err = err.__cause__
    return False


def not_found(err: BaseException | None) -> bool:
    """Whether err reports that the requested entity does not exist."""
    return has_status(err, 404)


def no_content(err: BaseException | None) -> bool:
    return has_status(err, 204)
