# ABOUTME: Project domain operations against the Vercel API.
# ABOUTME: Attaches, reads, updates, and detaches domain names on a project.

import json
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from vercel_client.core.cancellation import Cancellation
from vercel_client.core.executor import ClientRequest
from vercel_client.resources.types import (
    CreateProjectDomainRequest,
    ProjectDomain,
    UpdateProjectDomainRequest,
)

if TYPE_CHECKING:
    from vercel_client.core.client import VercelClient

logger = logging.getLogger(__name__)


def _domain_for_team(team_id: str) -> Callable[[Any], ProjectDomain]:
    def parse(data: Any) -> ProjectDomain:
        domain = ProjectDomain.from_json(data)
        domain.team_id = team_id
        return domain

    return parse


def create_project_domain(
    client: "VercelClient",
    project_id: str,
    request: CreateProjectDomainRequest,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> ProjectDomain:
    """Associate a domain name with a project."""
    url = client.scoped_url("/v10/projects/%s/domains", project_id, team_id=team_id)
    payload = json.dumps(request.to_json())
    logger.info("creating project domain url=%s payload=%s", url, payload)
    return client.do_request(
        ClientRequest(
            method="POST",
            url=url,
            body=payload,
            cancellation=cancellation or Cancellation(),
        ),
        _domain_for_team(client.team_id(team_id)),
    )


def get_project_domain(
    client: "VercelClient",
    project_id: str,
    domain: str,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> ProjectDomain:
    url = client.scoped_url("/v8/projects/%s/domains/%s", project_id, domain, team_id=team_id)
    logger.info("getting project domain url=%s", url)
    return client.do_request(
        ClientRequest(method="GET", url=url, cancellation=cancellation or Cancellation()),
        _domain_for_team(client.team_id(team_id)),
    )


def update_project_domain(
    client: "VercelClient",
    project_id: str,
    domain: str,
    request: UpdateProjectDomainRequest,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> ProjectDomain:
    url = client.scoped_url("/v8/projects/%s/domains/%s", project_id, domain, team_id=team_id)
    payload = json.dumps(request.to_json())
    logger.info("updating project domain url=%s payload=%s", url, payload)
    return client.do_request(
        ClientRequest(
            method="PATCH",
            url=url,
            body=payload,
            cancellation=cancellation or Cancellation(),
        ),
        _domain_for_team(client.team_id(team_id)),
    )


def delete_project_domain(
    client: "VercelClient",
    project_id: str,
    domain: str,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> None:
    """Remove a domain name from a project."""
    url = client.scoped_url("/v8/projects/%s/domains/%s", project_id, domain, team_id=team_id)
    logger.info("deleting project domain url=%s", url)
    client.do_request(
        ClientRequest(method="DELETE", url=url, cancellation=cancellation or Cancellation())
    )
