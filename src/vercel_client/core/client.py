# ABOUTME: VercelClient, the entrypoint every API operation goes through.
# ABOUTME: Owns the immutable settings and the shared httpx.Client used for all requests.

import dataclasses
from types import TracebackType
from typing import Any, TypeVar, overload

import httpx

from vercel_client.config import USER_AGENT, ClientSettings
from vercel_client.core.cancellation import Cancellation
from vercel_client.core.executor import ClientRequest, OutputSlot, RequestExecutor
from vercel_client.core.retry import RetryCoordinator
from vercel_client.core.scope import resolve_scope
from vercel_client.core.urls import build_url, with_team
from vercel_client.resources.teams import get_team
from vercel_client.resources.types import Team

T = TypeVar("T")


class VercelClient:
    """High-level wrapper around the Vercel REST API.

    The httpx.Client is created here, once, and reused for every request the
    client (and any client derived from it with ``with_team``) makes. Pass a
    ``transport`` to route requests somewhere other than the network, e.g. an
    httpx.MockTransport in tests.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if http_client is None:
            client_kwargs: dict[str, Any] = {
                "headers": {"User-Agent": USER_AGENT},
                "timeout": settings.timeout,
            }
            if transport is not None:
                client_kwargs["transport"] = transport
            http_client = httpx.Client(**client_kwargs)
        self._settings = settings
        self._http = http_client
        self._retry = RetryCoordinator(
            RequestExecutor(http_client, settings.token, settings.timeout)
        )

    @classmethod
    def from_token(
        cls, token: str, *, transport: httpx.BaseTransport | None = None
    ) -> "VercelClient":
        """Create a client for an API token with default settings."""
        return cls(ClientSettings(token=token), transport=transport)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def with_team(self, team_id: str) -> "VercelClient":
        """Return a client that shares this transport but defaults to team_id."""
        settings = dataclasses.replace(self._settings, team_id=team_id)
        return VercelClient(settings, http_client=self._http)

    def team_id(self, explicit: str | None = None) -> str:
        """Resolve the team for a call: explicit if given, else the client default."""
        return resolve_scope(explicit, self._settings.team_id)

    def team(self, team_id: str = "", cancellation: Cancellation | None = None) -> Team:
        """Fetch team_id from the API, or return the client's default team."""
        if team_id:
            return get_team(self, team_id, cancellation=cancellation)
        return Team(id=self._settings.team_id)

    def make_url(self, template: str, *values: str) -> str:
        """Build an endpoint URL from a ``%s`` path template and raw segment values."""
        return build_url(self._settings.base_url, template, *values)

    def scoped_url(self, template: str, *values: str, team_id: str | None = None) -> str:
        """Like make_url, with a teamId query parameter for the resolved team."""
        return with_team(self.make_url(template, *values), self.team_id(team_id))

    @overload
    def do_request(self, request: ClientRequest, output: OutputSlot[T]) -> T: ...

    @overload
    def do_request(self, request: ClientRequest, output: None = None) -> None: ...

    def do_request(self, request: ClientRequest, output: OutputSlot[T] | None = None) -> T | None:
        """Perform request, retrying rate-limited attempts.

        Args:
            request: The call to perform.
            output: Maps the decoded JSON body to a result. None skips decoding.

        Returns:
            The mapped result, or None for calls without an output slot.
        """
        return self._retry.run(request, output)

    def close(self) -> None:
        """Close the underlying transport, shared with any with_team() clients."""
        self._http.close()

    def __enter__(self) -> "VercelClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
