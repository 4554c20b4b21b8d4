"""Jules MCP CLI - serve the Jules API as MCP tools."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from julesmcp import __version__
from julesmcp.config import Settings, load_settings
from julesmcp.exceptions import ConfigError

app = typer.Typer(
    name="jules-mcp",
    help="Delegate coding tasks to Jules from MCP-capable assistants.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"jules-mcp {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Jules MCP - delegate coding tasks to Jules."""


@app.command("serve")
def serve(
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging")] = False,
) -> None:
    """Start the MCP server (stdio transport)."""
    from julesmcp.api.client import JulesClient
    from julesmcp.logging_config import setup_logging
    from julesmcp.mcp.server import JulesTools, create_server

    try:
        settings = load_settings()
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    setup_logging(settings.log_level, debug=debug)
    client = JulesClient(settings.api_key, base_url=settings.api_base_url)
    create_server(JulesTools(client)).run()


@app.command("check")
def check(
    project_path: Annotated[
        Path, typer.Option("--path", "-p", help="Repository to inspect")
    ] = Path("."),
) -> None:
    """Show configuration and the git context a new session would use."""
    from julesmcp.git_context import get_current_git_context

    settings = Settings()
    git = get_current_git_context(project_path.resolve())

    table = Table(title="Jules MCP")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("API key", "[green]set[/green]" if settings.api_key else "[red]missing[/red]")
    table.add_row("API base URL", settings.api_base_url)
    if git:
        table.add_row("Source", git.source)
        table.add_row("Branch", git.branch)
    else:
        table.add_row("Source", "[dim]no GitHub remote detected[/dim]")

    console.print(table)
