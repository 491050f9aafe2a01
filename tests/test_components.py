"""Tests for component listing, lookup and search."""

import json
import re
from pathlib import Path

from dsfr_mcp.cache import LRUCache
from dsfr_mcp.components import (
	find_entry,
	find_matches,
	get_component_doc,
	list_components,
	make_excerpt,
	search_components,
	suggest_entries,
)
from dsfr_mcp.models import ComponentEntry
from tests.helpers import FIXTURES_DIR, write_file


class TestListComponents:
	def test_returns_json_listing(self, index):
		parsed = json.loads(list_components(index))
		assert len(parsed) == 3
		assert parsed[0] == {
			"name": "button",
			"title": "Bouton",
			"description": "Le bouton permet à l'usager d'exécuter une action.",
			"category": "component",
			"sections": ["overview", "code"],
		}

	def test_keeps_accents_readable(self, index):
		assert "exécuter" in list_components(index)


class TestGetComponentDoc:
	def test_returns_section_document(self, index, cache):
		text = get_component_doc(index, FIXTURES_DIR, "button", "code", cache)
		assert text.startswith("# Bouton — code\n\n")
		assert "fr-btn" in text

	def test_case_insensitive_name(self, index, cache):
		upper = get_component_doc(index, FIXTURES_DIR, "BUTTON", "code", cache)
		lower = get_component_doc(index, FIXTURES_DIR, "button", "code", cache)
		assert upper == lower

	def test_unknown_name_suggests(self, index, cache):
		text = get_component_doc(index, FIXTURES_DIR, "butto", "code", cache)
		assert 'Composant "butto" non trouvé.' in text
		assert "button (Bouton)" in text
		assert "list_components" in text

	def test_unknown_name_matches_title(self, index, cache):
		text = get_component_doc(index, FIXTURES_DIR, "carte", "code", cache)
		assert "non trouvé" in text
		assert "card (Carte)" in text

	def test_unknown_name_without_suggestions(self, index, cache):
		text = get_component_doc(index, FIXTURES_DIR, "xyz", "code", cache)
		assert "non trouvé" in text
		assert "Aucune suggestion" in text
		assert "Suggestions :" not in text

	def test_unavailable_section_lists_available(self, index, cache):
		text = get_component_doc(index, FIXTURES_DIR, "button", "demo", cache)
		assert text == (
			'Section "demo" non disponible pour button (Bouton). '
			"Sections disponibles : overview, code"
		)

	def test_unknown_section_name(self, index, cache):
		text = get_component_doc(index, FIXTURES_DIR, "button", "examples", cache)
		assert "non disponible" in text

	def test_missing_file_reported_as_unavailable(self, tmp_path: Path, cache):
		entry = ComponentEntry(name="tag", title="Tag", category="component", sections=["overview", "code"])
		write_file(tmp_path / "component" / "tag" / "overview.md", "Tag")
		text = get_component_doc([entry], tmp_path, "tag", "code", cache)
		assert "non disponible" in text
		assert "Sections disponibles : overview, code" in text

	def test_reads_are_cached(self, index, cache):
		get_component_doc(index, FIXTURES_DIR, "button", "code", cache)
		key = str(FIXTURES_DIR / "component" / "button" / "code.md")
		assert cache.get(key) is not None
		again = get_component_doc(index, FIXTURES_DIR, "button", "code", cache)
		assert "fr-btn" in again
		assert cache.size == 1


class TestLookupHelpers:
	def test_find_entry_prefers_exact(self):
		index = [
			ComponentEntry(name="Tag", title="Tag majuscule", category="component", sections=["overview"]),
			ComponentEntry(name="tag", title="Tag", category="component", sections=["overview"]),
		]
		assert find_entry(index, "tag").title == "Tag"
		assert find_entry(index, "Tag").title == "Tag majuscule"

	def test_suggestions_capped_at_five_in_index_order(self):
		index = [
			ComponentEntry(name=f"input-{i}", title=f"Champ {i}", category="component", sections=["code"])
			for i in range(8)
		]
		suggestions = suggest_entries(index, "input")
		assert [e.name for e in suggestions] == [f"input-{i}" for i in range(5)]


class TestSearchComponents:
	def test_metadata_match(self, index, cache):
		text = search_components(index, FIXTURES_DIR, "Bouton", cache)
		assert "**button**" in text
		assert "metadata" in text

	def test_content_match(self, index, cache):
		text = search_components(index, FIXTURES_DIR, "fr-btn", cache)
		assert "**button** (Bouton) [component] — content (code)" in text
		assert "**card**" not in text

	def test_css_class_in_content(self, index, cache):
		text = search_components(index, FIXTURES_DIR, "fr-card__title", cache)
		assert "**card**" in text
		assert "content (code)" in text

	def test_no_results(self, index, cache):
		text = search_components(index, FIXTURES_DIR, "xyznonexistent", cache)
		assert text.startswith('Aucun résultat pour "xyznonexistent"')
		assert "list_components" in text

	def test_case_insensitive(self, index, cache):
		lower = search_components(index, FIXTURES_DIR, "bouton", LRUCache(10))
		upper = search_components(index, FIXTURES_DIR, "BOUTON", LRUCache(10))
		assert lower.split("\n", 1)[1] == upper.split("\n", 1)[1]

	def test_one_result_per_entry(self, index, cache):
		"""button matches on title and in two sections but appears once."""
		text = search_components(index, FIXTURES_DIR, "bouton", cache)
		assert len(re.findall(r"\*\*button\*\*", text)) == 1

	def test_results_in_index_order(self, index, cache):
		results = find_matches(index, FIXTURES_DIR, "bouton", cache)
		assert [r.name for r in results] == ["button", "card"]
		assert results[0].match_type == "metadata"
		assert results[1].match_type == "content (overview)"

	def test_first_matching_section_wins(self, tmp_path: Path, cache):
		entry = ComponentEntry(
			name="tile", title="Tuile", category="component", sections=["overview", "code", "design"],
		)
		write_file(tmp_path / "component" / "tile" / "overview.md", "Rien ici")
		write_file(tmp_path / "component" / "tile" / "code.md", "classe fr-tile")
		write_file(tmp_path / "component" / "tile" / "design.md", "fr-tile aussi")
		results = find_matches([entry], tmp_path, "FR-TILE", cache)
		assert len(results) == 1
		assert results[0].match_type == "content (code)"

	def test_skips_missing_section_files(self, tmp_path: Path, cache):
		entry = ComponentEntry(name="tile", title="Tuile", category="component", sections=["overview", "code"])
		write_file(tmp_path / "component" / "tile" / "code.md", "fr-tile")
		results = find_matches([entry], tmp_path, "fr-tile", cache)
		assert results[0].match_type == "content (code)"

	def test_badly_encoded_file_still_answers(self, tmp_path: Path, cache):
		entry = ComponentEntry(name="tag", title="Tag", category="component", sections=["overview"])
		path = tmp_path / "component" / "tag" / "overview.md"
		path.parent.mkdir(parents=True)
		path.write_bytes(b"caf\xe9 fr-tag")

		assert "**tag**" in search_components([entry], tmp_path, "fr-tag", cache)
		doc = get_component_doc([entry], tmp_path, "tag", "overview", cache)
		assert doc.endswith("fr-tag")


class TestExcerpt:
	def test_short_content_has_no_ellipsis(self):
		assert make_excerpt("abc fr-btn def", 4, 6) == "abc fr-btn def"

	def test_clamped_both_sides(self):
		content = "x" * 100 + "MATCH" + "y" * 100
		excerpt = make_excerpt(content, 100, 5)
		assert excerpt == "..." + "x" * 80 + "MATCH" + "y" * 80 + "..."

	def test_newlines_flattened(self):
		assert make_excerpt("ligne 1\nfr-btn\nligne 3", 8, 6) == "ligne 1 fr-btn ligne 3"
