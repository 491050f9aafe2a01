"""DSFR documentation MCP server."""

import logging

from mcp.server.fastmcp import FastMCP

from .config import Config
from .loaders import load_corpus
from .tools import register_all_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "dsfr"


def build_server(config: Config) -> FastMCP:
	"""
	Load the documentation corpus and register every tool.

	Raises ArtifactNotFoundError when an artifact is missing, so a server is
	never returned without its data.
	"""
	corpus = load_corpus(config.docs_dir, config.cache_size)
	mcp = FastMCP(SERVER_NAME)
	register_all_tools(mcp, corpus)
	logger.info(f"DSFR MCP server ready ({len(corpus.index)} entries from {corpus.docs_dir})")
	return mcp
