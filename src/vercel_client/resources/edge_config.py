# ABOUTME: Edge Config operations against the Vercel API.
# ABOUTME: CRUD and listing for Edge Configs, scoped to the resolved team.

import json
import logging
from typing import TYPE_CHECKING, Any

from vercel_client.core.cancellation import Cancellation
from vercel_client.core.executor import ClientRequest
from vercel_client.resources.types import (
    CreateEdgeConfigRequest,
    EdgeConfig,
    UpdateEdgeConfigRequest,
)

if TYPE_CHECKING:
    from vercel_client.core.client import VercelClient

logger = logging.getLogger(__name__)


def _edge_config_list(data: Any) -> list[EdgeConfig]:
    return [EdgeConfig.from_json(item) for item in data or []]


def create_edge_config(
    client: "VercelClient",
    request: CreateEdgeConfigRequest,
    *,
    cancellation: Cancellation | None = None,
) -> EdgeConfig:
    url = client.scoped_url("/v1/edge-config", team_id=request.team_id)
    payload = json.dumps(request.to_json())
    logger.info("creating edge config url=%s payload=%s", url, payload)
    return client.do_request(
        ClientRequest(
            method="POST",
            url=url,
            body=payload,
            cancellation=cancellation or Cancellation(),
        ),
        EdgeConfig.from_json,
    )


def get_edge_config(
    client: "VercelClient",
    edge_config_id: str,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> EdgeConfig:
    url = client.scoped_url("/v1/edge-config/%s", edge_config_id, team_id=team_id)
    logger.info("reading edge config url=%s", url)
    return client.do_request(
        ClientRequest(method="GET", url=url, cancellation=cancellation or Cancellation()),
        EdgeConfig.from_json,
    )


def update_edge_config(
    client: "VercelClient",
    request: UpdateEdgeConfigRequest,
    *,
    cancellation: Cancellation | None = None,
) -> EdgeConfig:
    url = client.scoped_url("/v1/edge-config/%s", request.id, team_id=request.team_id)
    payload = json.dumps(request.to_json())
    logger.debug("updating edge config url=%s payload=%s", url, payload)
    return client.do_request(
        ClientRequest(
            method="PUT",
            url=url,
            body=payload,
            cancellation=cancellation or Cancellation(),
        ),
        EdgeConfig.from_json,
    )


def delete_edge_config(
    client: "VercelClient",
    edge_config_id: str,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> None:
    url = client.scoped_url("/v1/edge-config/%s", edge_config_id, team_id=team_id)
    logger.info("deleting edge config url=%s", url)
    client.do_request(
        ClientRequest(method="DELETE", url=url, cancellation=cancellation or Cancellation())
    )


def list_edge_configs(
    client: "VercelClient", team_id: str = "", *, cancellation: Cancellation | None = None
) -> list[EdgeConfig]:
    """List every Edge Config owned by the resolved team."""
    url = client.scoped_url("/v1/edge-config", team_id=team_id)
    logger.info("listing edge configs url=%s", url)
    return client.do_request(
        ClientRequest(method="GET", url=url, cancellation=cancellation or Cancellation()),
        _edge_config_list,
    )
