"""API module for Canvas MCP."""

from canvas_mcp.api.client import CanvasClient
from canvas_mcp.api.exceptions import CanvasAPIError, UnauthorizedError

__all__ = [
    # Client
    "CanvasClient",
    # Exceptions
    "CanvasAPIError",
    "UnauthorizedError",
]
