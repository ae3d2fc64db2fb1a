# ABOUTME: Edge Config schema operations against the Vercel API.
# ABOUTME: A missing schema comes back as 204 and is reported as a 404 APIError.

import json
import logging
from typing import TYPE_CHECKING, Any

from vercel_client.core.cancellation import Cancellation
from vercel_client.core.errors import APIError, no_content
from vercel_client.core.executor import ClientRequest
from vercel_client.resources.types import EdgeConfigSchema

if TYPE_CHECKING:
    from vercel_client.core.client import VercelClient

logger = logging.getLogger(__name__)


def _definition(data: Any) -> Any:
    return data.get("definition") if isinstance(data, dict) else None


def upsert_edge_config_schema(
    client: "VercelClient",
    schema: EdgeConfigSchema,
    *,
    cancellation: Cancellation | None = None,
) -> EdgeConfigSchema:
    """Create or replace the schema of an Edge Config."""
    url = client.scoped_url("/v1/edge-config/%s/schema", schema.id, team_id=schema.team_id)
    payload = json.dumps(schema.to_json())
    logger.info("creating edge config schema url=%s payload=%s", url, payload)
    definition = client.do_request(
        ClientRequest(
            method="POST",
            url=url,
            body=payload,
            cancellation=cancellation or Cancellation(),
        ),
        _definition,
    )
    return EdgeConfigSchema(
        id=schema.id,
        definition=definition,
        team_id=client.team_id(schema.team_id),
    )


def get_edge_config_schema(
    client: "VercelClient",
    edge_config_id: str,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> EdgeConfigSchema:
    """Fetch the schema of an Edge Config.

    Raises:
        APIError: With status 404 and code ``not_found`` when the Edge Config
            has no schema.
    """
    url = client.scoped_url("/v1/edge-config/%s/schema", edge_config_id, team_id=team_id)
    logger.info("getting edge config schema url=%s", url)
    try:
        definition = client.do_request(
            ClientRequest(
                method="GET",
                url=url,
                error_on_no_content=True,
                cancellation=cancellation or Cancellation(),
            ),
            _definition,
        )
    except APIError as exc:
        if no_content(exc):
            raise APIError(
                status_code=404,
                code="not_found",
                message="Edge Config Schema not found",
            ) from exc
        raise
    return EdgeConfigSchema(
        id=edge_config_id,
        definition=definition,
        team_id=client.team_id(team_id),
    )


def delete_edge_config_schema(
    client: "VercelClient",
    edge_config_id: str,
    team_id: str = "",
    *,
    cancellation: Cancellation | None = None,
) -> None:
    url = client.scoped_url("/v1/edge-config/%s/schema", edge_config_id, team_id=team_id)
    logger.info("deleting edge config schema url=%s", url)
    client.do_request(
        ClientRequest(method="DELETE", url=url, cancellation=cancellation or Cancellation())
    )
