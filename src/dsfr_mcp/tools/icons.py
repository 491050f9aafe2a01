"""Icon search tool."""

from mcp.server.fastmcp import FastMCP

from .. import icons
from ..loaders import DocsCorpus


def register_icon_tools(mcp: FastMCP, corpus: DocsCorpus) -> None:
	"""Register DSFR icon tools."""

	@mcp.tool()
	async def search_icons(query: str, category: str = "") -> str:
		"""
		Recherche une icône DSFR par nom ou classe CSS.

		Args:
			query: Nom ou fragment de nom (ex: 'download', 'arrow', 'fr-icon-home')
			category: Catégorie optionnelle (ex: 'arrows', 'system', 'document')
		"""
		return icons.search_icons(corpus.icons, query, category if category else None)
