# ABOUTME: Shared Click options and client wiring for vercel-client commands.
# ABOUTME: Reads token, team, and base URL from flags or the VERCEL_* environment variables.

import logging

import click
from rich.logging import RichHandler

from vercel_client.config import (
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    TEAM_ENV,
    TOKEN_ENV,
    ClientSettings,
)
from vercel_client.core.client import VercelClient

token_option = click.option(
    "--token",
    envvar=TOKEN_ENV,
    required=True,
    help=f"Vercel API token (env: {TOKEN_ENV})",
)

team_option = click.option(
    "--team",
    "team_id",
    envvar=TEAM_ENV,
    default="",
    help=f"Default team id for scoped calls (env: {TEAM_ENV})",
)

base_url_option = click.option(
    "--base-url",
    envvar=BASE_URL_ENV,
    default=DEFAULT_BASE_URL,
    show_default=True,
    help=f"API base URL (env: {BASE_URL_ENV})",
)

verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log requests and retries.",
)


def configure_logging(verbose: bool) -> None:
    """Send client log records to the terminal through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def create_client(token: str, team_id: str, base_url: str) -> VercelClient:
    """Build the client commands run against. Patched in tests."""
    return VercelClient(ClientSettings(token=token, team_id=team_id, base_url=base_url))
