"""Core health check tool."""

import json

from mcp.server.fastmcp import FastMCP

from ..loaders import DocsCorpus


def register_core_tools(mcp: FastMCP, corpus: DocsCorpus) -> None:
	"""Register core tools."""

	@mcp.tool()
	async def health_check() -> str:
		"""
		Check the health of the DSFR documentation server.
		Returns corpus version, artifact counts and cache usage.
		"""
		status = {
			"server": "running",
			"docs_dir": str(corpus.docs_dir),
			"dsfr_version": corpus.meta.get("dsfrVersion", "unknown"),
			"entries": len(corpus.index),
			"icons": len(corpus.icons),
			"decision_tokens": len(corpus.colors.decision_tokens),
			"color_families": len(corpus.colors.families),
			"cache": {"size": corpus.cache.size, "max_size": corpus.cache.max_size},
		}
		return json.dumps(status, indent=2)
