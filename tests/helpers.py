"""Shared test fixtures and helpers for dsfr-mcp tests."""

from pathlib import Path
from typing import Callable

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def capture_tools(corpus, register_fn: Callable) -> dict:
	"""Register tools on a mock MCP and return the captured tool functions.

	Args:
		corpus: Loaded DocsCorpus passed to the registration function
		register_fn: The registration function (e.g., register_icon_tools)

	Returns:
		Dict mapping tool name to the tool function
	"""
	captured = {}

	class MockMCP:
		def tool(self):
			def decorator(fn):
				captured[fn.__name__] = fn
				return fn
			return decorator

	register_fn(MockMCP(), corpus)
	return captured


def write_file(path: Path, content: str) -> Path:
	"""Write a text file, creating parent directories."""
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(content, encoding="utf-8")
	return path
