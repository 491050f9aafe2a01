"""MCP tool registration - modular tool definitions."""

import logging

from mcp.server.fastmcp import FastMCP

from ..loaders import DocsCorpus
from .colors import register_color_tools
from .components import register_component_tools
from .core import register_core_tools
from .icons import register_icon_tools

logger = logging.getLogger(__name__)


def register_all_tools(mcp: FastMCP, corpus: DocsCorpus) -> None:
	"""Register all MCP tools against one loaded corpus."""
	register_core_tools(mcp, corpus)
	register_component_tools(mcp, corpus)
	register_icon_tools(mcp, corpus)
	register_color_tools(mcp, corpus)
	logger.debug("Registered DSFR tools")
