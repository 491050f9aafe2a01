"""Icon search - scored substring/prefix/equality matching over the icon index."""

from typing import Optional, Sequence

from .models import IconEntry

MAX_ICON_RESULTS = 20

ICON_CATEGORIES = [
	"arrows", "buildings", "business", "communication", "design",
	"development", "device", "document", "editor", "finance",
	"health", "logo", "map", "media", "others", "system", "user", "weather",
]


def score_icon(icon: IconEntry, query: str) -> int:
	"""
	Rank an icon against a lower-cased query.

	3 for an exact name, 2 for a name prefix, 1 for a name or CSS class
	substring, 0 for no match.
	"""
	name = icon.name.lower()
	if name == query:
		return 3
	if name.startswith(query):
		return 2
	if query in name:
		return 1
	if any(query in c.lower() for c in icon.classes):
		return 1
	return 0


def rank_icons(
	icons: Sequence[IconEntry],
	query: str,
	category: Optional[str] = None,
	limit: int = MAX_ICON_RESULTS,
) -> list[IconEntry]:
	"""Matching icons, best score first, ties by name."""
	q = query.lower()
	candidates = [i for i in icons if i.category == category] if category else icons

	scored = [(score_icon(icon, q), icon) for icon in candidates]
	scored = [(s, icon) for s, icon in scored if s > 0]
	scored.sort(key=lambda pair: (-pair[0], pair[1].name))
	return [icon for _, icon in scored[:limit]]


def search_icons(
	icons: Sequence[IconEntry],
	query: str,
	category: Optional[str] = None,
) -> str:
	"""Search icons by name or CSS class, optionally within one category."""
	matches = rank_icons(icons, query, category)

	if not matches:
		if category:
			hint = f'Catégorie "{category}" filtrée.'
		else:
			hint = f"Catégories disponibles : {', '.join(ICON_CATEGORIES)}"
		return f'Aucune icône trouvée pour "{query}". {hint}'

	lines = []
	for icon in matches:
		variants = ", ".join(icon.variants) if icon.variants else "sans variante"
		lines.append(
			f"- **{icon.name}** [{icon.category}] — {variants}\n"
			f"  Classes : {', '.join(icon.classes)}"
		)

	scope = f' dans "{category}"' if category else ""
	return f'{len(matches)} icône(s) trouvée(s) pour "{query}"{scope} :\n\n' + "\n".join(lines)
