"""MCP server commands."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from linear_issues.mcp.config import CONFIG_DIR, MCPConfig
from linear_issues.mcp.server import MCPServer

app = typer.Typer(help="Linear issues MCP server")
# stdout is the JSON-RPC channel under stdio transport
console = Console(stderr=True)


def _get_project_root() -> Path:
    """Get project root directory (contains .linear-issues/)."""
    cwd = Path.cwd()

    current = cwd
    while current != current.parent:
        if (current / CONFIG_DIR).exists():
            return current
        current = current.parent

    return cwd


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def start(
    host: str = typer.Option(None, help="Server host (SSE only, overrides config)"),
    port: int = typer.Option(None, help="Server port (SSE only, overrides config)"),
    transport: str = typer.Option(None, help="Transport: stdio or sse (overrides config)"),
    config_file: bool = typer.Option(True, help="Load from .linear-issues/mcp-config.yaml"),
):
    """
    Start the MCP server.

    Configuration is loaded from .linear-issues/mcp-config.yaml if it exists,
    then environment variables, then command-line options.

    Examples:
        # Start with stdio transport
        linear-issues mcp start

        # Start with SSE transport
        linear-issues mcp start --transport sse --host 0.0.0.0 --port 8000
    """
    project_root = _get_project_root()

    try:
        config = MCPConfig.load(project_root) if config_file else MCPConfig()

        if host is not None:
            config.host = host
        if port is not None:
            config.port = port
        if transport is not None:
            config.transport = transport

        _configure_logging(config.log_level)

        server = MCPServer(
            host=config.host,
            port=config.port,
            transport=config.transport,
            linear_api_key=config.linear_api_key,
            api_url=config.api_url,
        )

        console.print("[green]Starting MCP server...[/green]")
        console.print(f"Transport: {config.transport}")
        if config.transport == "sse":
            console.print(f"Listening on {config.host}:{config.port}")
        if not config.linear_api_key:
            console.print("[yellow]LINEAR_API_KEY is not set; tools will report AuthError[/yellow]")

        server.start()
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)
    except RuntimeError as e:
        console.print(f"[red]Error starting server:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
        raise typer.Exit(0)


@app.command("config")
def show_config():
    """
    Show the resolved server configuration.

    Exits with code 1 when no Linear API key is configured.
    """
    project_root = _get_project_root()

    try:
        resolved = MCPConfig.load(project_root)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="MCP Server Configuration", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Config File", str(MCPConfig.config_path(project_root)))
    table.add_row("Transport", resolved.transport)
    if resolved.transport == "sse":
        table.add_row("Host", resolved.host)
        table.add_row("Port", str(resolved.port))
    table.add_row("Linear API", resolved.api_url)
    table.add_row("Linear API Key", resolved.masked_api_key())
    table.add_row("Log Level", resolved.log_level)

    console.print(table)

    if not resolved.linear_api_key:
        raise typer.Exit(1)
