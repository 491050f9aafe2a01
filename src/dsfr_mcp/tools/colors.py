"""Color token tool."""

from mcp.server.fastmcp import FastMCP

from .. import colors
from ..loaders import DocsCorpus


def register_color_tools(mcp: FastMCP, corpus: DocsCorpus) -> None:
	"""Register DSFR color tools."""

	@mcp.tool()
	async def get_color_tokens(context: str = "", usage: str = "", family: str = "") -> str:
		"""
		Retourne les tokens de couleur DSFR (tokens de décision et familles).
		Sans paramètre, retourne un résumé des contextes et familles disponibles.

		Args:
			context: background, text ou artwork
			usage: Fragment du token ou de sa description (ex: 'error', 'action-high')
			family: Famille de couleur ou catégorie (ex: 'blue-france', 'systeme')
		"""
		return colors.get_color_tokens(
			corpus.colors,
			context=context or None,
			usage=usage or None,
			family=family or None,
		)
