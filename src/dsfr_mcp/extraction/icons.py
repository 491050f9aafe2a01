"""Icon extraction - group the DSFR svg icons by base name and variant."""

import json
import logging
from pathlib import Path

from ..models import IconEntry

logger = logging.getLogger(__name__)

ICON_DIR = "src/dsfr/core/icon"
VARIANT_SUFFIXES = {"-fill": "fill", "-line": "line"}


def split_variant(stem: str) -> tuple[str, str | None]:
	"""'arrow-left-line' -> ('arrow-left', 'line'); 'italic' -> ('italic', None)."""
	for suffix, variant in VARIANT_SUFFIXES.items():
		if stem.endswith(suffix) and len(stem) > len(suffix):
			return stem[:-len(suffix)], variant
	return stem, None


def collect_icons(icon_dir: Path) -> list[IconEntry]:
	"""Scan <icon_dir>/<category>/*.svg into grouped icon entries."""
	groups: dict[tuple[str, str], tuple[set[str], set[str]]] = {}

	for category_dir in sorted(p for p in icon_dir.iterdir() if p.is_dir()):
		for svg in sorted(category_dir.glob("*.svg")):
			base, variant = split_variant(svg.stem)
			variants, classes = groups.setdefault((category_dir.name, base), (set(), set()))
			if variant:
				variants.add(variant)
			classes.add(f"fr-icon-{svg.stem}")

	icons = [
		IconEntry(name=name, category=category, variants=sorted(variants), classes=sorted(classes))
		for (category, name), (variants, classes) in groups.items()
	]
	icons.sort(key=lambda i: (i.category, i.name))
	return icons


def extract_icons(repo_dir: Path, docs_dir: Path) -> list[IconEntry]:
	"""Write icons.json; skipped with a warning when the icon tree is absent."""
	icon_dir = Path(repo_dir) / ICON_DIR
	if not icon_dir.is_dir():
		logger.warning("Icon directory not found, skipping icon extraction")
		return []

	icons = collect_icons(icon_dir)
	with open(Path(docs_dir) / "icons.json", "w", encoding="utf-8") as f:
		json.dump([i.model_dump() for i in icons], f, indent=2, ensure_ascii=False)

	categories = {i.category for i in icons}
	logger.info(f"Extracted {len(icons)} icons across {len(categories)} categories")
	return icons
