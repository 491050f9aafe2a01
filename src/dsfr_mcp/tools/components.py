"""
Component documentation tools - list, read, search.

Section reads hit the disk, so they run in a worker thread; the shared
cache is lock-protected.
"""

import asyncio

from mcp.server.fastmcp import FastMCP

from .. import components
from ..loaders import DocsCorpus


def register_component_tools(mcp: FastMCP, corpus: DocsCorpus) -> None:
	"""Register DSFR component documentation tools."""

	@mcp.tool()
	async def list_components() -> str:
		"""
		Liste tous les composants, fondamentaux et modèles DSFR disponibles.
		Retourne nom, titre français, description et sections documentées.
		"""
		return components.list_components(corpus.index)

	@mcp.tool()
	async def get_component_doc(name: str, section: str = "code") -> str:
		"""
		Retourne la documentation d'un composant DSFR.

		La section 'code' contient la structure HTML, les classes CSS et les variantes.
		La section 'overview' donne une vue d'ensemble. La section 'accessibility'
		donne les exigences d'accessibilité.

		Args:
			name: Nom du composant (ex: 'button', 'input', 'accordion', 'card')
			section: overview, code, design, accessibility ou demo (défaut: 'code')
		"""
		return await asyncio.to_thread(
			components.get_component_doc,
			corpus.index, corpus.docs_dir, name, section, corpus.cache,
		)

	@mcp.tool()
	async def search_components(query: str) -> str:
		"""
		Recherche dans la documentation DSFR par mot-clé.
		Cherche dans les noms, titres, descriptions et le contenu des fichiers markdown.

		Args:
			query: Mot-clé de recherche (ex: 'tableau', 'navigation', 'formulaire', 'fr-btn')
		"""
		return await asyncio.to_thread(
			components.search_components,
			corpus.index, corpus.docs_dir, query, corpus.cache,
		)
