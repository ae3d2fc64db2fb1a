# ABOUTME: Executes a single authenticated HTTP round-trip against the Vercel API.
# ABOUTME: Builds the request, classifies error responses, and decodes JSON into an output slot.

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, overload

import httpx

from vercel_client.config import USER_AGENT
from vercel_client.core.cancellation import Cancellation
from vercel_client.core.errors import (
    APIError,
    DecodeError,
    RequestCancelledError,
    TransportError,
    classify_response,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Receives the decoded JSON body and returns the caller's typed result.
OutputSlot = Callable[[Any], T]


@dataclass
class ClientRequest:
    """One logical API call. Turned into a fresh httpx.Request on every attempt."""

    method: str
    url: str
    body: str = ""
    error_on_no_content: bool = False
    cancellation: Cancellation = field(default_factory=Cancellation)


class RequestExecutor:
    """Performs one attempt of a ClientRequest over a shared httpx.Client.

    The httpx.Client is safe to share between threads, so a single executor
    serves any number of concurrent calls.
    """

    def __init__(self, http: httpx.Client, token: str, timeout: float) -> None:
        self._http = http
        self._token = token
        self._timeout = timeout

    def build(self, request: ClientRequest) -> httpx.Request:
        """Build a new httpx.Request carrying the user agent, auth, and content headers."""
        headers = {
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {self._token}",
        }
        if request.body:
            headers["Content-Type"] = "application/json"

        timeout: Any = httpx.USE_CLIENT_DEFAULT
        remaining = request.cancellation.remaining()
        if remaining is not None:
            timeout = min(self._timeout, remaining)

        return self._http.build_request(
            request.method,
            request.url,
            content=request.body.encode() if request.body else None,
            headers=headers,
            timeout=timeout,
        )

    @overload
    def execute(self, request: ClientRequest, output: OutputSlot[T]) -> T: ...

    @overload
    def execute(self, request: ClientRequest, output: None = None) -> None: ...

    def execute(self, request: ClientRequest, output: OutputSlot[T] | None = None) -> T | None:
        """Send the request once and decode the response.

        Args:
            request: The call to perform.
            output: Maps the decoded JSON body to the caller's result. When
                None the body is not decoded (fire-and-forget calls).

        Returns:
            ``output(decoded_body)``, or None when no output slot was given.

        Raises:
            APIError: The API answered with a status of 300 or above, or with
                204 while ``error_on_no_content`` is set.
            TransportError: The round-trip itself failed.
            DecodeError: The body was not the expected JSON.
            RequestCancelledError: The cancellation fired before or during the call.
        """
        request.cancellation.raise_if_cancelled()
        http_request = self.build(request)

        try:
            response = self._http.send(http_request, stream=True)
        except httpx.TimeoutException as exc:
            if request.cancellation.cancelled:
                raise RequestCancelledError("request deadline exceeded") from exc
            raise TransportError(f"error doing http request: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"error doing http request: {exc}") from exc

        try:
            body = self._read_body(request, response)
        finally:
            response.close()

        # A cancel that lands during the round-trip wins over its result.
        request.cancellation.raise_if_cancelled()

        logger.debug(
            "%s %s -> %d (%d bytes)",
            request.method,
            request.url,
            response.status_code,
            len(body),
        )

        if response.status_code >= 300:
            raise classify_response(response.status_code, body, response.headers)

        if output is None:
            return None

        if request.error_on_no_content and response.status_code == 204:
            raise APIError(status_code=204, code="no_content", message="No content")

        try:
            return output(json.loads(body))
        except (ValueError, KeyError, TypeError) as exc:
            msg = f"error unmarshaling response {body!r}: {exc}"
            raise DecodeError(msg, raw_body=body, status_code=response.status_code) from exc

    @staticmethod
    def _read_body(request: ClientRequest, response: httpx.Response) -> bytes:
        """Read the whole body, stopping between chunks if the cancellation fires."""
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                request.cancellation.raise_if_cancelled()
                chunks.append(chunk)
        except httpx.TimeoutException as exc:
            if request.cancellation.cancelled:
                raise RequestCancelledError("request deadline exceeded") from exc
            raise TransportError(f"error reading response body: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"error reading response body: {exc}") from exc
        return b"".join(chunks)
