"""Configuration system using platformdirs for cross-platform paths."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

APP_NAME = "dsfr-mcp"

DEFAULT_DSFR_TAG = "v1.14.3"
DEFAULT_REPO_URL = "https://github.com/GouvernementFR/dsfr.git"
DEFAULT_CACHE_SIZE = 50


@dataclass
class Config:
	"""Central configuration with XDG/platform conventions."""

	config_dir: Path = field(default_factory=lambda: Path(platformdirs.user_config_dir(APP_NAME)))
	data_dir: Path = field(default_factory=lambda: Path(platformdirs.user_data_dir(APP_NAME)))

	# Explicit docs location; derived from data_dir when unset
	docs_dir_override: Path | None = None

	# Derived paths
	docs_dir: Path = field(init=False)
	repo_dir: Path = field(init=False)
	log_dir: Path = field(init=False)

	# User-configurable
	cache_size: int = DEFAULT_CACHE_SIZE
	dsfr_tag: str = DEFAULT_DSFR_TAG
	repo_url: str = DEFAULT_REPO_URL
	log_level: str = "INFO"

	def __post_init__(self) -> None:
		self.docs_dir = self.docs_dir_override or self.data_dir / "docs"
		self.repo_dir = self.data_dir / ".dsfr-repo"
		self.log_dir = self.data_dir / "logs"

	@property
	def index_path(self) -> Path:
		return self.docs_dir / "index.json"

	@property
	def icons_path(self) -> Path:
		return self.docs_dir / "icons.json"

	@property
	def colors_path(self) -> Path:
		return self.docs_dir / "colors.json"

	def ensure_dirs(self) -> None:
		"""Create all required directories."""
		self.config_dir.mkdir(parents=True, exist_ok=True)
		self.data_dir.mkdir(parents=True, exist_ok=True)
		self.log_dir.mkdir(parents=True, exist_ok=True)


def _apply_env_overrides(config: Config) -> Config:
	"""Apply DSFR_MCP_* environment variable overrides."""
	env_map = {
		"DSFR_MCP_CONFIG_DIR": "config_dir",
		"DSFR_MCP_DATA_DIR": "data_dir",
		"DSFR_MCP_DOCS_DIR": "docs_dir_override",
	}
	for env_key, attr in env_map.items():
		val = os.getenv(env_key)
		if val:
			setattr(config, attr, Path(val))

	cache_size = os.getenv("DSFR_MCP_CACHE_SIZE")
	if cache_size:
		config.cache_size = int(cache_size)
	tag = os.getenv("DSFR_TAG")
	if tag:
		config.dsfr_tag = tag
	log_level = os.getenv("DSFR_MCP_LOG_LEVEL")
	if log_level:
		config.log_level = log_level

	# Recompute derived paths after overrides
	config.__post_init__()
	return config


def _apply_toml(config: Config) -> Config:
	"""Apply config.toml overrides if file exists."""
	toml_path = config.config_dir / "config.toml"
	if not toml_path.exists():
		return config

	with open(toml_path, "rb") as f:
		data = tomllib.load(f)

	path_fields = {"config_dir", "data_dir"}
	for key, val in data.items():
		if key == "docs_dir":
			config.docs_dir_override = Path(os.path.expanduser(val))
		elif key in path_fields:
			setattr(config, key, Path(os.path.expanduser(val)))
		elif hasattr(config, key):
			setattr(config, key, val)

	# Recompute derived paths after toml overrides
	config.__post_init__()
	return config


def load_config() -> Config:
	"""Load config with precedence: env vars > config.toml > defaults."""
	config = Config()
	# config.toml lives in the config dir, so that override applies first
	env_config_dir = os.getenv("DSFR_MCP_CONFIG_DIR")
	if env_config_dir:
		config.config_dir = Path(env_config_dir)
	config = _apply_toml(config)
	config = _apply_env_overrides(config)
	config.ensure_dirs()
	return config
