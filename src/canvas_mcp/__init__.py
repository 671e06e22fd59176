"""Canvas MCP - expose the Canvas LMS API as Model Context Protocol tools."""

__version__ = "1.0.0"
