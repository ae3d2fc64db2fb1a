# ABOUTME: Team operations against the Vercel API.
# ABOUTME: Create, fetch, and delete teams.

import json
import logging
from typing import TYPE_CHECKING

from vercel_client.core.cancellation import Cancellation
from vercel_client.core.executor import ClientRequest
from vercel_client.resources.types import Team, TeamCreateRequest

if TYPE_CHECKING:
    from vercel_client.core.client import VercelClient

logger = logging.getLogger(__name__)


def create_team(
    client: "VercelClient",
    request: TeamCreateRequest,
    *,
    cancellation: Cancellation | None = None,
) -> Team:
    """Create a team within Vercel."""
    url = client.make_url("/v1/teams")
    payload = json.dumps(request.to_json())
    logger.info("creating team url=%s payload=%s", url, payload)
    return client.do_request(
        ClientRequest(
            method="POST",
            url=url,
            body=payload,
            cancellation=cancellation or Cancellation(),
        ),
        Team.from_json,
    )


def delete_team(
    client: "VercelClient", team_id: str, *, cancellation: Cancellation | None = None
) -> None:
    """Delete an existing team."""
    url = client.make_url("/v1/teams/%s", team_id)
    logger.info("deleting team url=%s", url)
    client.do_request(
        ClientRequest(method="DELETE", url=url, cancellation=cancellation or Cancellation())
    )


def get_team(
    client: "VercelClient", id_or_slug: str, *, cancellation: Cancellation | None = None
) -> Team:
    """Fetch a team by id or slug."""
    url = client.make_url("/v2/teams/%s", id_or_slug)
    logger.info("getting team url=%s", url)
    return client.do_request(
        ClientRequest(method="GET", url=url, cancellation=cancellation or Cancellation()),
        Team.from_json,
    )
