"""DSFR documentation MCP server."""

__version__ = "1.0.0"
