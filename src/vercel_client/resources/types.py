# ABOUTME: Typed records for the Vercel resources the client operates on.
# ABOUTME: Each record knows how to build itself from, and render itself to, API JSON.

from dataclasses import dataclass
from typing import Any


@dataclass
class Team:
    """A Vercel team. The API only reports the fields the client needs."""

    id: str
    sensitive_environment_variable_policy: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Team":
        return cls(
            id=data["id"],
            sensitive_environment_variable_policy=data.get("sensitiveEnvironmentVariablePolicy"),
        )


@dataclass
class TeamCreateRequest:
    slug: str
    name: str

    def to_json(self) -> dict[str, Any]:
        return {"slug": self.slug, "name": self.name}


@dataclass
class EdgeConfig:
    """A global key/value store used for feature flags, redirects and the like."""

    slug: str
    id: str
    team_id: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "EdgeConfig":
        return cls(slug=data["slug"], id=data["id"], team_id=data.get("ownerId") or "")


@dataclass
class CreateEdgeConfigRequest:
    name: str
    team_id: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"slug": self.name}


@dataclass
class UpdateEdgeConfigRequest:
    id: str
    slug: str
    team_id: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"slug": self.slug}


@dataclass
class EdgeConfigSchema:
    """The JSON schema attached to an Edge Config.

    Only ``definition`` travels over the wire; ``id`` and ``team_id`` are
    filled in from the request.
    """

    id: str
    definition: Any = None
    team_id: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"definition": self.definition}


@dataclass
class CreateProjectDomainRequest:
    """Associates a domain name with a project.

    Typically used to give production deployments a domain, to configure a
    redirect, or to give a git branch its own domain.
    """

    name: str
    git_branch: str = ""
    redirect: str = ""
    redirect_status_code: int = 0

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.git_branch:
            payload["gitBranch"] = self.git_branch
        if self.redirect:
            payload["redirect"] = self.redirect
        if self.redirect_status_code:
            payload["redirectStatusCode"] = self.redirect_status_code
        return payload


@dataclass
class UpdateProjectDomainRequest:
    """Fields to change on a project domain. None clears the field."""

    git_branch: str | None = None
    redirect: str | None = None
    redirect_status_code: int | None = None

    def to_json(self) -> dict[str, Any]:
        return {
            "gitBranch": self.git_branch,
            "redirect": self.redirect,
            "redirectStatusCode": self.redirect_status_code,
        }


@dataclass
class ProjectDomain:
    name: str
    project_id: str
    team_id: str = ""
    redirect: str | None = None
    redirect_status_code: int | None = None
    git_branch: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "ProjectDomain":
        return cls(
            name=data["name"],
            project_id=data["projectId"],
            redirect=data.get("redirect"),
            redirect_status_code=data.get("redirectStatusCode"),
            git_branch=data.get("gitBranch"),
        )
