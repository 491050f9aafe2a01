"""
Documentation extraction - flatten the DSFR doc tree into per-entry section files.

Output layout:
	<docs>/<category>/<name>/<section>.md
	<docs>/index.json
	<docs>/meta.json
"""

import json
import logging
import shutil
from pathlib import Path
from typing import Optional

from ..models import SECTION_NAMES, ComponentEntry, Section
from .markdown import parse_frontmatter

logger = logging.getLogger(__name__)

SUB_SECTIONS = [s for s in SECTION_NAMES if s != Section.OVERVIEW.value]


def _make_entry(name: str, category: str, sections: list[str], out_dir: Path) -> ComponentEntry:
	"""Build an entry from the frontmatter of its first section file."""
	first = out_dir / f"{sections[0]}.md"
	frontmatter = parse_frontmatter(first.read_text(encoding="utf-8"))
	return ComponentEntry(
		name=name,
		title=frontmatter.title or name,
		description=frontmatter.description,
		category=category,
		sections=sections,
	)


def process_doc_dir(doc_dir: Path, name: str, category: str, docs_dir: Path) -> Optional[ComponentEntry]:
	"""
	Copy an upstream `_part/doc` directory into the flat layout.

	index.md becomes overview.md; <sub>/index.md becomes <sub>.md.
	Returns None when no section file was found.
	"""
	if not doc_dir.is_dir():
		return None

	out_dir = docs_dir / category / name
	sections: list[str] = []

	main_index = doc_dir / "index.md"
	if main_index.is_file():
		out_dir.mkdir(parents=True, exist_ok=True)
		shutil.copyfile(main_index, out_dir / "overview.md")
		sections.append("overview")

	for sub in SUB_SECTIONS:
		sub_index = doc_dir / sub / "index.md"
		if sub_index.is_file():
			out_dir.mkdir(parents=True, exist_ok=True)
			shutil.copyfile(sub_index, out_dir / f"{sub}.md")
			sections.append(sub)

	if not sections:
		logger.debug(f"No documentation sections in {doc_dir}")
		return None

	return _make_entry(name, category, sections, out_dir)


def _visible_children(directory: Path) -> list[Path]:
	"""Sub-directories not starting with an underscore, sorted by name."""
	if not directory.is_dir():
		return []
	return sorted(
		p for p in directory.iterdir()
		if p.is_dir() and not p.name.startswith("_")
	)


def extract_components(repo_dir: Path, docs_dir: Path) -> list[ComponentEntry]:
	entries = []
	for child in _visible_children(repo_dir / "src/dsfr/component"):
		entry = process_doc_dir(child / "_part/doc", child.name, "component", docs_dir)
		if entry:
			entries.append(entry)
	return entries


def extract_core(repo_dir: Path, docs_dir: Path) -> list[ComponentEntry]:
	"""Each core sub-topic is a single overview page."""
	entries = []
	core_doc_dir = repo_dir / "src/dsfr/core/_part/doc"
	if not core_doc_dir.is_dir():
		return entries

	for child in sorted(p for p in core_doc_dir.iterdir() if p.is_dir()):
		source = child / "index.md"
		if not source.is_file():
			continue
		out_dir = docs_dir / "core" / child.name
		out_dir.mkdir(parents=True, exist_ok=True)
		shutil.copyfile(source, out_dir / "overview.md")
		entries.append(_make_entry(child.name, "core", ["overview"], out_dir))
	return entries


def extract_layout(repo_dir: Path, docs_dir: Path) -> list[ComponentEntry]:
	"""Layouts, including nested ones such as page/login."""
	entries = []
	for child in _visible_children(repo_dir / "src/dsfr/layout"):
		entry = process_doc_dir(child / "_part/doc", child.name, "layout", docs_dir)
		if entry:
			entries.append(entry)

		for sub in _visible_children(child):
			entry = process_doc_dir(sub / "_part/doc", f"{child.name}/{sub.name}", "layout", docs_dir)
			if entry:
				entries.append(entry)
	return entries


def extract_docs(repo_dir: Path, docs_dir: Path, tag: str) -> list[ComponentEntry]:
	"""
	Rebuild docs_dir from the checked-out repo and write index.json and meta.json.

	Returns:
		The entries written to index.json, sorted by name
	"""
	repo_dir = Path(repo_dir)
	docs_dir = Path(docs_dir)
	if docs_dir.exists():
		shutil.rmtree(docs_dir)
	docs_dir.mkdir(parents=True)

	index = [
		*extract_components(repo_dir, docs_dir),
		*extract_core(repo_dir, docs_dir),
		*extract_layout(repo_dir, docs_dir),
	]
	index.sort(key=lambda e: e.name)

	with open(docs_dir / "index.json", "w", encoding="utf-8") as f:
		json.dump([e.model_dump() for e in index], f, indent=2, ensure_ascii=False)
	with open(docs_dir / "meta.json", "w", encoding="utf-8") as f:
		json.dump({"dsfrVersion": tag}, f, indent=2)

	logger.info(f"Extracted {len(index)} documentation entries")
	return index
