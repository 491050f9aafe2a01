"""Tests for cached section reads."""

from pathlib import Path

from dsfr_mcp.cache import LRUCache
from dsfr_mcp.content import read_with_cache, section_path
from dsfr_mcp.models import ComponentEntry


def test_section_path_convention(tmp_path: Path):
	entry = ComponentEntry(name="page/login", title="Connexion", category="layout", sections=["overview"])
	assert section_path(tmp_path, entry, "overview") == tmp_path / "layout" / "page" / "login" / "overview.md"


def test_miss_reads_disk_and_populates_cache(tmp_path: Path):
	path = tmp_path / "doc.md"
	path.write_text("contenu", encoding="utf-8")
	cache = LRUCache(2)

	assert read_with_cache(path, cache) == "contenu"
	assert cache.get(str(path)) == "contenu"


def test_hit_does_not_touch_disk(tmp_path: Path):
	path = tmp_path / "doc.md"
	path.write_text("original", encoding="utf-8")
	cache = LRUCache(2)
	read_with_cache(path, cache)

	path.write_text("changed on disk", encoding="utf-8")
	assert read_with_cache(path, cache) == "original"


def test_missing_file_returns_none(tmp_path: Path):
	cache = LRUCache(2)
	assert read_with_cache(tmp_path / "absent.md", cache) is None
	assert cache.size == 0


def test_cache_bounds_reads(tmp_path: Path):
	cache = LRUCache(2)
	for name in ["a", "b", "c"]:
		path = tmp_path / f"{name}.md"
		path.write_text(name, encoding="utf-8")
		read_with_cache(path, cache)
	assert cache.size == 2
	assert str(tmp_path / "a.md") not in cache


def test_undecodable_bytes_are_replaced(tmp_path: Path):
	path = tmp_path / "doc.md"
	path.write_bytes(b"caf\xe9 fr-tag")
	cache = LRUCache(2)

	assert read_with_cache(path, cache) == "caf� fr-tag"
