"""
Color extraction - decision tokens and palette families from the core docs.

Reads the already-flattened docs (core/color and core/palette overviews),
so it runs after extract_docs().
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..models import ColorDecisionToken, ColorFamily, ColorPair, ColorsIndex
from .markdown import bold_text, clean_cell_text, code_token, parse_table_row

logger = logging.getLogger(__name__)

COLOR_DOC = "core/color/overview.md"
PALETTE_DOC = "core/palette/overview.md"

CONTEXT_MARKERS = ("couleurs de fond", "couleurs de texte", "couleurs d'illustrations")

CATEGORY_HEADINGS = [
	("### Couleurs primaires", "primaire"),
	("### Couleur neutre", "neutre"),
	("### Couleurs système", "systeme"),
	("### Couleurs illustratives", "illustrative"),
]

FAMILY_NAMES = {
	"Bleu France": "blue-france",
	"Rouge Marianne": "red-marianne",
	"Gris": "grey",
}

TABLE_PREFIX = "::::fr-table["
ILLUSTRATIVE_PREFIX = "Les couleurs illustratives sont :"

DERIVED_SYSTEM_FAMILIES = ["warning", "error", "success"]

# variant -> (light suffix, dark suffix)
ILLUSTRATIVE_VARIANTS = {
	"softest": ("850", "200"),
	"light": ("925", "125"),
	"lighter": ("950", "100"),
	"lightest": ("975", "75"),
}


def detect_context(line: str, current: str) -> str:
	"""Switch the token context on headings introducing a table."""
	if not any(marker in line for marker in CONTEXT_MARKERS):
		return current
	lowered = line.lower()
	if "fond" in lowered:
		return "background"
	if "texte" in lowered:
		return "text"
	if "illustration" in lowered:
		return "artwork"
	return current


def parse_decision_row(line: str, context: str) -> Optional[ColorDecisionToken]:
	"""`| description | `$token` | `$light` | `$dark` |` -> token, else None."""
	cells = parse_table_row(line)
	if not cells or len(cells) < 4:
		return None

	token, light, dark = (code_token(c) for c in cells[-3:])
	if not (token and light and dark):
		return None

	description = clean_cell_text("|".join(cells[:-3]))
	if not description or description.startswith("Description") or description.startswith(":"):
		return None

	return ColorDecisionToken(
		token=token, context=context, description=description, light=light, dark=dark,
	)


def parse_decision_tokens(content: str) -> list[ColorDecisionToken]:
	tokens = []
	context = "background"
	for line in content.splitlines():
		context = detect_context(line, context)
		token = parse_decision_row(line, context)
		if token:
			tokens.append(token)
	return tokens


def parse_correspondence_row(line: str) -> Optional[tuple[str, ColorPair]]:
	"""`| **key** | `$light` | `$dark` |` -> (key, pair), else None."""
	cells = parse_table_row(line)
	if not cells or len(cells) != 3:
		return None
	key = bold_text(cells[0])
	light, dark = code_token(cells[1]), code_token(cells[2])
	if not (key and light and dark):
		return None
	return key, ColorPair(light=light, dark=dark)


def family_name_for_table(raw_name: str) -> Optional[str]:
	"""Map a palette table caption to a family name; None for tables to skip."""
	if "Déclinaisons" in raw_name:
		return None
	if "Info" in raw_name:
		return "info"
	return FAMILY_NAMES.get(raw_name)


def parse_illustrative_names(line: str) -> list[str]:
	names = line[len(ILLUSTRATIVE_PREFIX):].strip().rstrip(".")
	return [n.strip() for n in names.split(",") if n.strip()]


def parse_palette(content: str) -> tuple[list[ColorFamily], list[str]]:
	"""Families declared by tables, plus the illustrative color names."""
	families: list[ColorFamily] = []
	illustrative_names: list[str] = []

	category = "primaire"
	family_name: Optional[str] = None
	family_category = category
	correspondences: dict[str, ColorPair] = {}

	def flush() -> None:
		if family_name and correspondences:
			families.append(ColorFamily(
				name=family_name, category=family_category, correspondences=dict(correspondences),
			))
		correspondences.clear()

	for line in content.splitlines():
		for heading, heading_category in CATEGORY_HEADINGS:
			if line.startswith(heading):
				category = heading_category
				break

		if line.startswith(TABLE_PREFIX) and "]" in line:
			flush()
			raw_name = line[len(TABLE_PREFIX):line.index("]")]
			family_name = family_name_for_table(raw_name)
			family_category = category
			continue

		if line.startswith(ILLUSTRATIVE_PREFIX) and not illustrative_names:
			illustrative_names = parse_illustrative_names(line)

		if family_name:
			row = parse_correspondence_row(line)
			if row:
				correspondences[row[0]] = row[1]

	flush()
	return families, illustrative_names


def derive_system_families(families: list[ColorFamily]) -> list[ColorFamily]:
	"""warning/error/success follow the documented info family pattern."""
	info = next((f for f in families if f.name == "info"), None)
	if info is None:
		return []
	return [
		ColorFamily(
			name=name,
			category="systeme",
			correspondences={
				key: ColorPair(light=pair.light.replace("info", name), dark=pair.dark.replace("info", name))
				for key, pair in info.correspondences.items()
			},
		)
		for name in DERIVED_SYSTEM_FAMILIES
	]


def illustrative_families(names: list[str]) -> list[ColorFamily]:
	return [
		ColorFamily(
			name=name,
			category="illustrative",
			correspondences={
				key: ColorPair(light=f"${name}-{light}", dark=f"${name}-{dark}")
				for key, (light, dark) in ILLUSTRATIVE_VARIANTS.items()
			},
		)
		for name in names
	]


def build_colors_index(docs_dir: Path) -> ColorsIndex:
	docs_dir = Path(docs_dir)
	tokens: list[ColorDecisionToken] = []
	families: list[ColorFamily] = []
	names: list[str] = []

	color_doc = docs_dir / COLOR_DOC
	if color_doc.is_file():
		tokens = parse_decision_tokens(color_doc.read_text(encoding="utf-8"))
	else:
		logger.warning(f"{color_doc} not found, no decision tokens extracted")

	palette_doc = docs_dir / PALETTE_DOC
	if palette_doc.is_file():
		families, names = parse_palette(palette_doc.read_text(encoding="utf-8"))
		families += derive_system_families(families)
		families += illustrative_families(names)
	else:
		logger.warning(f"{palette_doc} not found, no color families extracted")

	return ColorsIndex(decision_tokens=tokens, families=families, illustrative_names=names)


def extract_colors(docs_dir: Path) -> ColorsIndex:
	"""Write colors.json from the flattened core docs."""
	colors = build_colors_index(docs_dir)
	with open(Path(docs_dir) / "colors.json", "w", encoding="utf-8") as f:
		json.dump(colors.model_dump(by_alias=True), f, indent=2, ensure_ascii=False)

	logger.info(
		f"Extracted {len(colors.decision_tokens)} decision tokens, "
		f"{len(colors.families)} color families"
	)
	return colors
