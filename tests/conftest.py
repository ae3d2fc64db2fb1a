# ABOUTME: Shared pytest fixtures for vercel-client tests.
# ABOUTME: Provides a fake transport and a VercelClient wired to it.

from collections.abc import Iterator

import pytest

from tests.fixtures.fakes import TEST_BASE_URL, TEST_TOKEN, FakeTransport
from vercel_client.config import ClientSettings
from vercel_client.core.client import VercelClient


@pytest.fixture
def transport() -> FakeTransport:
    """A fake transport with no canned responses; tests queue their own."""
    return FakeTransport()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(token=TEST_TOKEN, base_url=TEST_BASE_URL)


@pytest.fixture
def client(settings: ClientSettings, transport: FakeTransport) -> Iterator[VercelClient]:
    """A VercelClient whose requests go to the fake transport."""
    with VercelClient(settings, transport=transport) as vercel:
        yield vercel


@pytest.fixture
def team_client(client: VercelClient) -> VercelClient:
    """The shared client with a default team configured."""
    return client.with_team("team_default")
