"""Main CLI entry point for Canvas MCP."""

import asyncio
from typing import Annotated

import typer
from mcp.shared.exceptions import McpError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from canvas_mcp.config import configure_logging, get_settings
from canvas_mcp.mcp.dispatcher import ToolDispatcher
from canvas_mcp.mcp.server import load_server_config, run_stdio

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="canvas-mcp",
    help="Canvas LMS tools for AI agents over the Model Context Protocol",
    no_args_is_help=True,
)


def _mask(secret: str) -> str:
    if not secret:
        return "[red]not set[/red]"
    if len(secret) <= 8:
        return "****"
    return f"{secret[:4]}…{secret[-4:]}"


@app.command("serve")
def serve():
    """Run the MCP server on stdin/stdout."""
    asyncio.run(run_stdio(load_server_config()))


@app.command("tools")
def tools():
    """List the available tools."""
    settings = get_settings()
    dispatcher = ToolDispatcher(settings.to_server_config())

    table = Table(title="Canvas tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Description")

    for tool in dispatcher.list_tools():
        required = ", ".join(tool.inputSchema.get("required", [])) or "-"
        table.add_row(tool.name, required, tool.description or "")

    console.print(table)


@app.command("call")
def call(
    name: Annotated[str, typer.Argument(help="Tool name, e.g. list_courses")],
    course_id: Annotated[
        int | None,
        typer.Option("--course-id", "-c", help="Canvas course ID"),
    ] = None,
    assignment_id: Annotated[
        int | None,
        typer.Option("--assignment-id", "-a", help="Assignment ID"),
    ] = None,
):
    """
    Run a single tool and print its output.

    Examples:
        canvas-mcp call list_courses
        canvas-mcp call get_assignments --course-id 1234
        canvas-mcp call get_submission_status -c 1234 -a 5678
    """
    settings = get_settings()
    configure_logging(settings.debug)
    dispatcher = ToolDispatcher(settings.to_server_config())

    arguments = {}
    if course_id is not None:
        arguments["course_id"] = course_id
    if assignment_id is not None:
        arguments["assignment_id"] = assignment_id

    try:
        result = asyncio.run(dispatcher.call_tool(name, arguments))
    except McpError as e:
        err_console.print(Panel(e.error.message, title="Tool failed", border_style="red"))
        raise typer.Exit(1)

    for content in result.content:
        console.print(content.text, markup=False)


@app.command("config")
def show_config():
    """Show the effective configuration."""
    settings = get_settings()

    table = Table(show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("api_key", _mask(settings.api_key))
    table.add_row("base_url", settings.base_url)
    table.add_row("debug", str(settings.debug))

    console.print(table)


if __name__ == "__main__":
    app()
