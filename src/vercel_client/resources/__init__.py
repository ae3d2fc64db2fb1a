# ABOUTME: Resource operations built on top of VercelClient.do_request.
# ABOUTME: Exports the typed records and the team, Edge Config, and project domain calls.

from vercel_client.resources.edge_config import (
    create_edge_config,
    delete_edge_config,
    get_edge_config,
    list_edge_configs,
    update_edge_config,
)
from vercel_client.resources.edge_config_schema import (
    delete_edge_config_schema,
    get_edge_config_schema,
    upsert_edge_config_schema,
)
from vercel_client.resources.project_domain import (
    create_project_domain,
    delete_project_domain,
    get_project_domain,
    update_project_domain,
)
from vercel_client.resources.teams import create_team, delete_team, get_team
from vercel_client.resources.types import (
    CreateEdgeConfigRequest,
    CreateProjectDomainRequest,
    EdgeConfig,
    EdgeConfigSchema,
    ProjectDomain,
    Team,
    TeamCreateRequest,
    UpdateEdgeConfigRequest,
    UpdateProjectDomainRequest,
)

__all__ = [
    "CreateEdgeConfigRequest",
    "CreateProjectDomainRequest",
    "EdgeConfig",
    "EdgeConfigSchema",
    "ProjectDomain",
    "Team",
    "TeamCreateRequest",
    "UpdateEdgeConfigRequest",
    "UpdateProjectDomainRequest",
    "create_edge_config",
    "create_project_domain",
    "create_team",
    "delete_edge_config",
    "delete_edge_config_schema",
    "delete_project_domain",
    "delete_team",
    "get_edge_config",
    "get_edge_config_schema",
    "get_project_domain",
    "get_team",
    "list_edge_configs",
    "update_edge_config",
    "update_project_domain",
    "upsert_edge_config_schema",
]
