"""
Artifact extraction - regenerate index.json, icons.json and colors.json
from a sparse checkout of the upstream DSFR repository.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..models import ColorsIndex, ComponentEntry, IconEntry
from .colors import extract_colors
from .docs import extract_docs
from .icons import extract_icons
from .repo import RepoSyncError, sync_repo

logger = logging.getLogger(__name__)

__all__ = ["ExtractionResult", "RepoSyncError", "extract_all", "fetch_docs"]


@dataclass
class ExtractionResult:
	"""What one extraction run wrote to docs_dir."""
	docs_dir: Path
	tag: str
	entries: list[ComponentEntry] = field(default_factory=list)
	icons: list[IconEntry] = field(default_factory=list)
	colors: ColorsIndex = field(default_factory=ColorsIndex)


def extract_all(repo_dir: Path, docs_dir: Path, tag: str) -> ExtractionResult:
	"""Extract every artifact from an already checked-out repo."""
	entries = extract_docs(repo_dir, docs_dir, tag)
	icons = extract_icons(repo_dir, docs_dir)
	colors = extract_colors(docs_dir)
	return ExtractionResult(docs_dir=Path(docs_dir), tag=tag, entries=entries, icons=icons, colors=colors)


async def fetch_docs(repo_dir: Path, docs_dir: Path, repo_url: str, tag: str) -> ExtractionResult:
	"""Sync the upstream repo, then extract every artifact."""
	await sync_repo(repo_dir, repo_url, tag)
	result = extract_all(repo_dir, docs_dir, tag)
	logger.info(f"Done! Extracted {len(result.entries)} entries into {docs_dir}")
	return result
