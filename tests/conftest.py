"""Pytest fixtures shared across the suite."""

import pytest

from dsfr_mcp.cache import LRUCache
from dsfr_mcp.loaders import DocsCorpus, load_colors, load_corpus, load_icons, load_index

from tests.helpers import FIXTURES_DIR


@pytest.fixture
def fixtures_dir():
	return FIXTURES_DIR


@pytest.fixture
def index():
	return load_index(FIXTURES_DIR)


@pytest.fixture
def icons():
	return load_icons(FIXTURES_DIR)


@pytest.fixture
def colors():
	return load_colors(FIXTURES_DIR)


@pytest.fixture
def cache():
	return LRUCache(10)


@pytest.fixture
def corpus() -> DocsCorpus:
	return load_corpus(FIXTURES_DIR, cache_size=10)
