"""Tests for the bounded LRU cache."""

import threading

import pytest

from dsfr_mcp.cache import LRUCache


class TestConstruction:
	@pytest.mark.parametrize("max_size", [0, -1, -100])
	def test_rejects_capacity_below_one(self, max_size: int):
		with pytest.raises(ValueError, match="at least 1"):
			LRUCache(max_size)

	def test_capacity_one_is_valid(self):
		cache = LRUCache(1)
		assert cache.max_size == 1
		assert cache.size == 0


class TestGetSet:
	def test_get_missing_returns_none(self):
		cache = LRUCache(3)
		assert cache.get("missing") is None

	def test_set_then_get(self):
		cache = LRUCache(3)
		cache.set("a", "1")
		assert cache.get("a") == "1"

	def test_overwrite_updates_value_without_growing(self):
		cache = LRUCache(3)
		cache.set("a", "1")
		cache.set("b", "2")
		cache.set("a", "updated")
		assert cache.get("a") == "updated"
		assert cache.size == 2

	def test_clear_removes_everything(self):
		cache = LRUCache(3)
		cache.set("a", "1")
		cache.set("b", "2")
		cache.clear()
		assert cache.size == 0
		assert cache.get("a") is None
		# Still usable after clear
		cache.set("c", "3")
		assert cache.keys() == ["c"]


class TestEviction:
	def test_scenario_capacity_three(self):
		"""a, b, c, d inserted into a 3-slot cache evicts a."""
		cache = LRUCache(3)
		cache.set("a", 1)
		cache.set("b", 2)
		cache.set("c", 3)
		cache.set("d", 4)
		assert cache.get("a") is None
		assert cache.get("b") == 2
		assert cache.get("d") == 4
		assert cache.size == 3

	@pytest.mark.parametrize("n", [1, 2, 5, 17])
	def test_n_plus_one_inserts_evict_first(self, n: int):
		cache = LRUCache(n)
		keys = [f"k{i}" for i in range(n + 1)]
		for k in keys:
			cache.set(k, k)
		assert "k0" not in cache
		for k in keys[1:]:
			assert k in cache

	def test_get_refreshes_recency(self):
		cache = LRUCache(3)
		cache.set("a", 1)
		cache.set("b", 2)
		cache.set("c", 3)
		cache.get("a")
		cache.set("d", 4)
		assert cache.get("a") == 1
		assert cache.get("b") is None

	def test_set_existing_refreshes_recency(self):
		cache = LRUCache(2)
		cache.set("a", 1)
		cache.set("b", 2)
		cache.set("a", 10)
		cache.set("c", 3)
		assert cache.get("a") == 10
		assert "b" not in cache

	def test_size_never_exceeds_capacity(self):
		cache = LRUCache(4)
		for i in range(100):
			cache.set(i % 11, i)
			assert cache.size <= 4

	def test_keys_ordered_most_recent_first(self):
		cache = LRUCache(3)
		cache.set("a", 1)
		cache.set("b", 2)
		cache.set("c", 3)
		cache.get("a")
		assert cache.keys() == ["a", "c", "b"]

	def test_contains_does_not_refresh(self):
		cache = LRUCache(2)
		cache.set("a", 1)
		cache.set("b", 2)
		assert "a" in cache
		cache.set("c", 3)
		assert "a" not in cache


def test_concurrent_sets_keep_bound():
	"""Writers on several threads never push the cache past capacity."""
	cache = LRUCache(8)

	def worker(offset: int) -> None:
		for i in range(500):
			cache.set((offset, i % 20), i)
			cache.get((offset, (i * 7) % 20))

	threads = [threading.Thread(target=worker, args=(t,)) for t in range(4)]
	for t in threads:
		t.start()
	for t in threads:
		t.join()

	assert cache.size == 8
	assert len(cache.keys()) == 8
