# ABOUTME: CLI package for vercel-client, built on Click.
# ABOUTME: Defines the root command group, wires the client into the context, and registers subcommands.

import click

from vercel_client.cli.commands import edge_config_cmd, team_cmd
from vercel_client.cli.options import (
    base_url_option,
    configure_logging,
    create_client,
    team_option,
    token_option,
    verbose_option,
)


@click.group()
@click.version_option(package_name="vercel-client")
@token_option
@team_option
@base_url_option
@verbose_option
@click.pass_context
def cli(ctx: click.Context, token: str, team_id: str, base_url: str, verbose: bool) -> None:
    """vercel-client - inspect Vercel teams and Edge Configs from the terminal."""
    configure_logging(verbose)
    client = create_client(token, team_id, base_url)
    ctx.obj = ctx.with_resource(client)


cli.add_command(team_cmd.team)
cli.add_command(edge_config_cmd.edge_config)
