"""Content accessor - section file paths and cached reads."""

import logging
from pathlib import Path
from typing import Optional

from .cache import LRUCache
from .models import ComponentEntry

logger = logging.getLogger(__name__)


def section_path(docs_dir: Path, entry: ComponentEntry, section: str) -> Path:
	"""Conventional location of a section file: <docs>/<category>/<name>/<section>.md."""
	return Path(docs_dir) / entry.category / entry.name / f"{section}.md"


def read_with_cache(file_path: Path, cache: LRUCache[str, str]) -> Optional[str]:
	"""
	Return the file's text, serving from the cache when possible.

	Returns None when the file does not exist. Successful disk reads are
	stored in the cache keyed by path.
	"""
	key = str(file_path)
	cached = cache.get(key)
	if cached is not None:
		return cached

	path = Path(file_path)
	if not path.is_file():
		return None

	# Undecodable bytes become U+FFFD so queries never fail on a bad file
	content = path.read_text(encoding="utf-8", errors="replace")
	cache.set(key, content)
	logger.debug(f"Cache miss, read {path} ({cache.size}/{cache.max_size} cached)")
	return content
