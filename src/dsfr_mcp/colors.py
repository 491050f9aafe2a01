"""
Color tokens - combinable filters over decision tokens and color families.

Filters are case-insensitive substrings except `context`, which must match
exactly. The `family` filter applies to decision tokens by looking for the
family name inside the token identifier, and separately selects families
by name or category.
"""

from dataclasses import dataclass
from typing import Optional

from .models import ColorDecisionToken, ColorFamily, ColorsIndex

CONTEXTS = ["background", "text", "artwork"]


@dataclass
class ColorFilters:
	"""Optional filters; empty strings count as absent."""
	context: Optional[str] = None
	usage: Optional[str] = None
	family: Optional[str] = None

	def __post_init__(self) -> None:
		self.context = self.context or None
		self.usage = self.usage or None
		self.family = self.family or None

	@property
	def empty(self) -> bool:
		return not (self.context or self.usage or self.family)

	def describe(self) -> str:
		parts = []
		if self.context:
			parts.append(f'context="{self.context}"')
		if self.usage:
			parts.append(f'usage="{self.usage}"')
		if self.family:
			parts.append(f'family="{self.family}"')
		return ", ".join(parts)


def distinct_contexts(colors: ColorsIndex) -> list[str]:
	"""Contexts present among decision tokens, in first-seen order."""
	return list(dict.fromkeys(t.context for t in colors.decision_tokens))


def filter_tokens(colors: ColorsIndex, filters: ColorFilters) -> list[ColorDecisionToken]:
	tokens = list(colors.decision_tokens)
	if filters.context:
		tokens = [t for t in tokens if t.context == filters.context]
	if filters.usage:
		u = filters.usage.lower()
		tokens = [t for t in tokens if u in t.token.lower() or u in t.description.lower()]
	if filters.family:
		f = filters.family.lower()
		tokens = [t for t in tokens if f in t.token.lower()]
	return tokens


def filter_families(colors: ColorsIndex, family: Optional[str]) -> list[ColorFamily]:
	if not family:
		return []
	f = family.lower()
	return [
		fam for fam in colors.families
		if f in fam.name.lower() or f in fam.category.lower()
	]


def _summary(colors: ColorsIndex) -> str:
	families = ", ".join(f"{f.name} ({f.category})" for f in colors.families)
	return (
		"Tokens de couleur DSFR disponibles :\n\n"
		f"**Contextes :** {', '.join(distinct_contexts(colors))}\n"
		f"**Familles :** {families}\n"
		f"**Couleurs illustratives :** {', '.join(colors.illustrative_names)}\n\n"
		"Utilisez les paramètres context, usage ou family pour filtrer."
	)


def _render_tokens(tokens: list[ColorDecisionToken]) -> str:
	lines = [
		f"- `{t.token}`\n  {t.description}\n  Clair : {t.light} | Sombre : {t.dark}"
		for t in tokens
	]
	return "### Tokens de décision\n" + "\n".join(lines)


def _render_family(family: ColorFamily) -> str:
	lines = [
		f"  {key} : {pair.light} (clair) / {pair.dark} (sombre)"
		for key, pair in family.correspondences.items()
	]
	return f'### Famille "{family.name}" ({family.category})\n' + "\n".join(lines)


def get_color_tokens(
	colors: ColorsIndex,
	context: Optional[str] = None,
	usage: Optional[str] = None,
	family: Optional[str] = None,
) -> str:
	"""
	Query DSFR color tokens.

	Without filters returns a summary of contexts, families and illustrative
	colors. Otherwise returns the matching decision tokens followed by the
	matching family correspondence tables.
	"""
	filters = ColorFilters(context=context, usage=usage, family=family)
	if filters.empty:
		return _summary(colors)

	sections: list[str] = []

	tokens = filter_tokens(colors, filters)
	if tokens:
		sections.append(_render_tokens(tokens))

	for fam in filter_families(colors, filters.family):
		sections.append(_render_family(fam))

	if not sections:
		contexts = distinct_contexts(colors) or CONTEXTS
		family_names = ", ".join(f.name for f in colors.families)
		return (
			f"Aucun token trouvé pour {filters.describe()}. "
			f"Contextes disponibles : {', '.join(contexts)}. "
			f"Familles : {family_names}"
		)

	return "\n\n".join(sections)
