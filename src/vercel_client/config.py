# ABOUTME: Client configuration for the Vercel API client.
# ABOUTME: Holds the immutable settings (token, base URL, default team, timeout) and env loading.

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.vercel.com"

# Sized for uploading a single large deployment file.
DEFAULT_TIMEOUT = 5 * 60.0

USER_AGENT = "vercel-client/0.1.0"

TOKEN_ENV = "VERCEL_API_TOKEN"
TEAM_ENV = "VERCEL_TEAM"
BASE_URL_ENV = "VERCEL_BASE_URL"


@dataclass(frozen=True)
class ClientSettings:
    """Settings shared by every request a VercelClient makes.

    Created once and never mutated; use dataclasses.replace() to derive a
    variant (for example a different default team).
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    team_id: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout}"
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ClientSettings":
        """Build settings from VERCEL_API_TOKEN, VERCEL_TEAM and VERCEL_BASE_URL.

        Raises:
            ValueError: If no API token is configured.
        """
        env = os.environ if environ is None else environ
        token = env.get(TOKEN_ENV, "")
        if not token:
            msg = f"{TOKEN_ENV} is not set"
            raise ValueError(msg)
        return cls(
            token=token,
            base_url=env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
            team_id=env.get(TEAM_ENV, ""),
        )
