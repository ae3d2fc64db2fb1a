# ABOUTME: The `vercel-client team` command for looking up a team.
# ABOUTME: Prints the team id and its sensitive environment variable policy.

import click
from rich.console import Console
from rich.table import Table

from vercel_client.core.client import VercelClient
from vercel_client.core.errors import VercelClientError, not_found

console = Console()


@click.command()
@click.argument("id_or_slug", required=False, default="")
@click.pass_obj
def team(client: VercelClient, id_or_slug: str) -> None:
    """Show a team, or the configured default team when none is given."""
    try:
        result = client.team(id_or_slug)
    except VercelClientError as exc:
        if not_found(exc):
            console.print(f"[yellow]Team not found:[/yellow] {id_or_slug}")
        else:
            console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if not result.id:
        console.print("[yellow]No team given and no default team configured.[/yellow]")
        return

    table = Table(show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", result.id)
    table.add_row(
        "Sensitive env policy",
        result.sensitive_environment_variable_policy or "[dim]unset[/dim]",
    )
    console.print(table)
