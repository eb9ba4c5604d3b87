"""Command-line entry point for linear-issues."""

import typer

from linear_issues.cli.commands import mcp

app = typer.Typer(help="Linear issue tools for MCP clients")
app.add_typer(mcp.app, name="mcp")


def main():
    app()
