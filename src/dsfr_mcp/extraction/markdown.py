"""
Line-grammar parsers for the DSFR markdown sources.

Each parser looks at one line (or the frontmatter block) and returns None or
an empty value when the input does not fit; malformed input never raises.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"

_CODE_TOKEN = re.compile(r"^`(\$[\w-]+)`$")
_BOLD = re.compile(r"^\*\*(.+?)\*\*$")
_BR = re.compile(r"<br\s*/?>\s*", re.IGNORECASE)
_TAG = re.compile(r"<[^>]*>")


@dataclass
class Frontmatter:
	title: str = ""
	description: str = ""


def split_frontmatter(content: str) -> Optional[list[str]]:
	"""Lines between the leading `---` and the next `---`, or None."""
	lines = content.splitlines()
	if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
		return None
	for i, line in enumerate(lines[1:], start=1):
		if line.strip() == FRONTMATTER_DELIMITER:
			return lines[1:i]
	return None


def _scan_key_values(lines: list[str]) -> dict[str, str]:
	"""Fallback for frontmatter that is not valid YAML: top-level `key: value` lines."""
	fields: dict[str, str] = {}
	for line in lines:
		if not line or line[0].isspace() or ":" not in line:
			continue
		key, _, value = line.partition(":")
		value = value.strip()
		if key.strip() and value:
			fields.setdefault(key.strip(), value)
	return fields


def parse_frontmatter(content: str) -> Frontmatter:
	"""
	Extract title and description from a markdown file's frontmatter.

	The description prefers `shortDescription` over `description`. Missing or
	malformed frontmatter yields empty fields.
	"""
	lines = split_frontmatter(content)
	if lines is None:
		return Frontmatter()

	try:
		data = yaml.safe_load("\n".join(lines))
	except yaml.YAMLError as e:
		logger.debug(f"Frontmatter is not valid YAML, scanning lines: {e}")
		data = None
	if not isinstance(data, dict):
		data = _scan_key_values(lines)

	def field_text(key: str) -> str:
		value = data.get(key)
		return str(value).strip() if value not in (None, "") else ""

	return Frontmatter(
		title=field_text("title"),
		description=field_text("shortDescription") or field_text("description"),
	)


def parse_table_row(line: str) -> Optional[list[str]]:
	"""Cells of a `| a | b |` markdown table row, or None for any other line."""
	stripped = line.strip()
	if len(stripped) < 2 or not (stripped.startswith("|") and stripped.endswith("|")):
		return None
	return [cell.strip() for cell in stripped[1:-1].split("|")]


def code_token(cell: str) -> Optional[str]:
	"""`$token` wrapped in backticks -> `$token`."""
	match = _CODE_TOKEN.match(cell)
	return match.group(1) if match else None


def bold_text(cell: str) -> Optional[str]:
	match = _BOLD.match(cell)
	return match.group(1).strip() if match else None


def clean_cell_text(text: str) -> str:
	"""Flatten <br> to spaces and strip remaining HTML tags."""
	return _TAG.sub("", _BR.sub(" ", text)).strip()
