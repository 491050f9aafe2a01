"""
Component documentation - listing, lookup with suggestions, and search.

Every function is a pure read over the loaded index; section files are
read through the shared LRU cache.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .cache import LRUCache
from .content import read_with_cache, section_path
from .models import ComponentEntry, SearchResult

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
EXCERPT_RADIUS = 80


def list_components(index: Sequence[ComponentEntry]) -> str:
	"""JSON listing of every entry with its available sections."""
	return json.dumps(
		[entry.model_dump() for entry in index],
		indent=2,
		ensure_ascii=False,
	)


def find_entry(index: Sequence[ComponentEntry], name: str) -> Optional[ComponentEntry]:
	"""Exact name match first, then a case-insensitive one."""
	for entry in index:
		if entry.name == name:
			return entry
	lowered = name.lower()
	for entry in index:
		if entry.name.lower() == lowered:
			return entry
	return None


def suggest_entries(index: Sequence[ComponentEntry], name: str, limit: int = MAX_SUGGESTIONS) -> list[ComponentEntry]:
	"""Entries whose name or title contains the query, in index order."""
	q = name.lower()
	matches = [e for e in index if q in e.name.lower() or q in e.title.lower()]
	return matches[:limit]


def _unavailable_section(entry: ComponentEntry, section: str) -> str:
	return (
		f'Section "{section}" non disponible pour {entry.name} ({entry.title}). '
		f"Sections disponibles : {', '.join(entry.sections)}"
	)


def get_component_doc(
	index: Sequence[ComponentEntry],
	docs_dir: Path,
	name: str,
	section: str,
	cache: LRUCache[str, str],
) -> str:
	"""
	Return one documentation section for an entry.

	Unknown names yield up to five suggestions; sections the entry does not
	have yield the list of sections it does have.
	"""
	entry = find_entry(index, name)
	if entry is None:
		suggestions = suggest_entries(index, name)
		if suggestions:
			hint = " Suggestions : " + ", ".join(f"{e.name} ({e.title})" for e in suggestions)
		else:
			hint = " Aucune suggestion trouvée."
		return (
			f'Composant "{name}" non trouvé.{hint}\n'
			"Utilisez list_components pour voir la liste complète."
		)

	if section not in entry.sections:
		return _unavailable_section(entry, section)

	content = read_with_cache(section_path(docs_dir, entry, section), cache)
	if content is None:
		# Index lists the section but the file is gone
		logger.warning(f"Section file missing for {entry.name}/{section}")
		return _unavailable_section(entry, section)

	return f"# {entry.title} — {section}\n\n{content}"


def make_excerpt(content: str, start: int, length: int, radius: int = EXCERPT_RADIUS) -> str:
	"""Window of `radius` chars around a match, with ellipses where clamped."""
	begin = max(0, start - radius)
	end = min(len(content), start + length + radius)
	excerpt = content[begin:end].replace("\n", " ")
	if begin > 0:
		excerpt = "..." + excerpt
	if end < len(content):
		excerpt = excerpt + "..."
	return excerpt


def find_matches(
	index: Sequence[ComponentEntry],
	docs_dir: Path,
	query: str,
	cache: LRUCache[str, str],
) -> list[SearchResult]:
	"""At most one result per entry, in index order; metadata beats content."""
	q = query.lower()
	results: list[SearchResult] = []

	for entry in index:
		if q in entry.name.lower() or q in entry.title.lower() or q in entry.description.lower():
			results.append(SearchResult(
				name=entry.name,
				title=entry.title,
				category=entry.category,
				match_type="metadata",
				excerpt=entry.description,
			))
			continue

		for section in entry.sections:
			content = read_with_cache(section_path(docs_dir, entry, section), cache)
			if not content:
				continue
			pos = content.lower().find(q)
			if pos == -1:
				continue
			results.append(SearchResult(
				name=entry.name,
				title=entry.title,
				category=entry.category,
				match_type=f"content ({section})",
				excerpt=make_excerpt(content, pos, len(q)),
			))
			break

	return results


def search_components(
	index: Sequence[ComponentEntry],
	docs_dir: Path,
	query: str,
	cache: LRUCache[str, str],
) -> str:
	"""Case-insensitive search over entry metadata and section contents."""
	results = find_matches(index, docs_dir, query, cache)

	if not results:
		return (
			f'Aucun résultat pour "{query}". Essayez un autre terme ou utilisez '
			"list_components pour voir tous les composants."
		)

	lines = [
		f"- **{r.name}** ({r.title}) [{r.category}] — {r.match_type}\n  {r.excerpt}"
		for r in results
	]
	return f'{len(results)} résultat(s) pour "{query}" :\n\n' + "\n\n".join(lines)
