# ABOUTME: The `vercel-client edge-config` command group.
# ABOUTME: Lists Edge Configs for a team and shows a single Edge Config with its schema.

import click
from rich.console import Console
from rich.table import Table

from vercel_client.core.client import VercelClient
from vercel_client.core.errors import VercelClientError, not_found
from vercel_client.resources.edge_config import get_edge_config, list_edge_configs
from vercel_client.resources.edge_config_schema import get_edge_config_schema

console = Console()


@click.group("edge-config")
def edge_config() -> None:
    """Inspect Edge Configs."""


@edge_config.command("list")
@click.option("--team", "team_id", default="", help="Team to list (default: client team).")
@click.pass_obj
def list_cmd(client: VercelClient, team_id: str) -> None:
    """List Edge Configs owned by a team."""
    try:
        configs = list_edge_configs(client, team_id)
    except VercelClientError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if not configs:
        console.print("[yellow]No Edge Configs found.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Slug", style="bold")
    table.add_column("Owner")
    for config in configs:
        table.add_row(config.id, config.slug, config.team_id or "[dim]unknown[/dim]")

    console.print(table)
    console.print(f"\n[dim]{len(configs)} Edge Config(s)[/dim]")


@edge_config.command("get")
@click.argument("edge_config_id")
@click.option("--team", "team_id", default="", help="Team that owns the Edge Config.")
@click.option("--schema/--no-schema", default=False, help="Also show the attached schema.")
@click.pass_obj
def get_cmd(client: VercelClient, edge_config_id: str, team_id: str, schema: bool) -> None:
    """Show a single Edge Config."""
    try:
        config = get_edge_config(client, edge_config_id, team_id)
    except VercelClientError as exc:
        if not_found(exc):
            console.print(f"[yellow]Edge Config not found:[/yellow] {edge_config_id}")
        else:
            console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    table = Table(title=config.slug, show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", config.id)
    table.add_row("Slug", config.slug)
    table.add_row("Owner", config.team_id or "[dim]unknown[/dim]")

    if schema:
        try:
            definition = get_edge_config_schema(client, edge_config_id, team_id).definition
        except VercelClientError as exc:
            if not not_found(exc):
                console.print(f"[red]Error:[/red] {exc}")
                raise SystemExit(1) from exc
            definition = None
        table.add_row("Schema", str(definition) if definition is not None else "[dim]none[/dim]")

    console.print(table)
