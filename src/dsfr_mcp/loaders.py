"""
Artifact loaders - read the extracted JSON artifacts into typed structures.

The artifacts are loaded once at startup and never mutated afterwards.
A missing artifact is fatal: the server must not start without it.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import TypeAdapter

from .cache import LRUCache
from .models import ColorsIndex, ComponentEntry, IconEntry

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"
ICONS_FILENAME = "icons.json"
COLORS_FILENAME = "colors.json"
META_FILENAME = "meta.json"

_entries_adapter = TypeAdapter(list[ComponentEntry])
_icons_adapter = TypeAdapter(list[IconEntry])


class ArtifactNotFoundError(FileNotFoundError):
	"""Raised when a required artifact has not been extracted yet."""

	def __init__(self, label: str, path: Path):
		self.label = label
		self.path = path
		super().__init__(
			f'{label} not found at {path}. Run "dsfr-mcp fetch-docs" first.'
		)


def _read_artifact(path: Path, label: str) -> bytes:
	if not path.exists():
		raise ArtifactNotFoundError(label, path)
	return path.read_bytes()


def load_index(docs_dir: Path) -> list[ComponentEntry]:
	"""Load index.json as a list of entries."""
	path = Path(docs_dir) / INDEX_FILENAME
	entries = _entries_adapter.validate_json(_read_artifact(path, "Documentation index"))
	logger.info(f"Loaded {len(entries)} documentation entries from {path}")
	return entries


def load_icons(docs_dir: Path) -> list[IconEntry]:
	"""Load icons.json as a list of icons."""
	path = Path(docs_dir) / ICONS_FILENAME
	icons = _icons_adapter.validate_json(_read_artifact(path, "Icons index"))
	logger.info(f"Loaded {len(icons)} icons from {path}")
	return icons


def load_colors(docs_dir: Path) -> ColorsIndex:
	"""Load colors.json as a ColorsIndex."""
	path = Path(docs_dir) / COLORS_FILENAME
	colors = ColorsIndex.model_validate_json(_read_artifact(path, "Colors index"))
	logger.info(
		f"Loaded {len(colors.decision_tokens)} decision tokens and "
		f"{len(colors.families)} color families from {path}"
	)
	return colors


def load_meta(docs_dir: Path) -> dict:
	"""Load meta.json if present; it is informational only."""
	path = Path(docs_dir) / META_FILENAME
	if not path.exists():
		return {}
	try:
		with open(path, encoding="utf-8") as f:
			return json.load(f)
	except json.JSONDecodeError as e:
		logger.warning(f"Ignoring unreadable {path}: {e}")
		return {}


@dataclass(frozen=True)
class DocsCorpus:
	"""
	Everything a query needs: the loaded artifacts plus the content cache.

	Built once by load_corpus() and passed by reference to every tool.
	The cache is the only mutable part.
	"""
	docs_dir: Path
	index: tuple[ComponentEntry, ...]
	icons: tuple[IconEntry, ...]
	colors: ColorsIndex
	cache: LRUCache[str, str]
	meta: dict


def load_corpus(docs_dir: Path, cache_size: int) -> DocsCorpus:
	"""Load all artifacts eagerly. Raises ArtifactNotFoundError on any missing file."""
	docs_dir = Path(docs_dir)
	cache: LRUCache[str, str] = LRUCache(cache_size)
	return DocsCorpus(
		docs_dir=docs_dir,
		index=tuple(load_index(docs_dir)),
		icons=tuple(load_icons(docs_dir)),
		colors=load_colors(docs_dir),
		cache=cache,
		meta=load_meta(docs_dir),
	)
