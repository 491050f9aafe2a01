"""Tests for server startup and tool registration."""

from pathlib import Path

import pytest

from dsfr_mcp.config import Config
from dsfr_mcp.loaders import ArtifactNotFoundError
from dsfr_mcp.server import build_server
from tests.helpers import FIXTURES_DIR


def _config(tmp_path: Path, docs_dir: Path) -> Config:
	return Config(config_dir=tmp_path / "config", data_dir=tmp_path / "data", docs_dir_override=docs_dir)


def test_server_tool_names(tmp_path: Path):
	"""Server should register every DSFR tool."""
	mcp = build_server(_config(tmp_path, FIXTURES_DIR))
	tool_names = set(mcp._tool_manager._tools.keys())
	assert tool_names == {
		"health_check",
		"list_components", "get_component_doc", "search_components",
		"search_icons",
		"get_color_tokens",
	}


def test_missing_artifacts_prevent_startup(tmp_path: Path):
	with pytest.raises(ArtifactNotFoundError, match="Documentation index not found"):
		build_server(_config(tmp_path, tmp_path / "empty"))


def test_invalid_cache_size_prevents_startup(tmp_path: Path):
	config = _config(tmp_path, FIXTURES_DIR)
	config.cache_size = 0
	with pytest.raises(ValueError):
		build_server(config)
