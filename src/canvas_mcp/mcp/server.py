"""MCP server for Canvas.

Exposes the Canvas tool catalog over the Model Context Protocol.

Usage:
    # Run the server
    canvas-mcp-server

    # Or through the CLI
    canvas-mcp serve

Configuration is read from CANVAS_API_KEY, CANVAS_BASE_URL and DEBUG
(see canvas_mcp.config).
"""

import asyncio
import logging

import mcp.server.stdio
from mcp import types
from mcp.server.lowlevel import Server

from canvas_mcp import __version__
from canvas_mcp.config import ServerConfig, configure_logging, get_settings
from canvas_mcp.mcp.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "canvas-mcp"


def create_server(
    config: ServerConfig, dispatcher: ToolDispatcher | None = None
) -> Server:
    """Build an MCP server with the Canvas tools registered."""
    dispatcher = dispatcher or ToolDispatcher(config)
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # Registered without the call_tool() decorator, which turns every exception
    # into an isError result. McpError has to reach the session so it is sent
    # back as a JSON-RPC error with its code.
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def run_stdio(config: ServerConfig) -> None:
    """Serve on stdin/stdout until the client disconnects."""
    server = create_server(config)
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.debug("Canvas MCP running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def load_server_config() -> ServerConfig:
    """Read settings from the environment and warn about a missing API key."""
    settings = get_settings()
    configure_logging(settings.debug)
    if not settings.api_key:
        logger.warning("CANVAS_API_KEY not set. Tools will fail without it.")
    return settings.to_server_config()


def main():
    """Run the MCP server."""
    asyncio.run(run_stdio(load_server_config()))


if __name__ == "__main__":
    main()
