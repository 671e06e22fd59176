"""MCP server module for Canvas MCP.

This module provides an MCP (Model Context Protocol) server that exposes
Canvas LMS data as tools for Claude and other AI agents.
"""

from canvas_mcp.mcp.dispatcher import ToolDispatcher
from canvas_mcp.mcp.server import create_server, main

__all__ = ["ToolDispatcher", "create_server", "main"]
