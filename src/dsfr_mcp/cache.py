"""
Bounded LRU cache for documentation file contents.

Recency is tracked with a doubly-linked list of nodes plus a key -> node
dict, so get, set and eviction are all O(1). A sentinel node closes the
list into a ring: sentinel.next is the most recently used entry and
sentinel.prev the least recently used one.
"""

import threading
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Node:
	__slots__ = ("key", "value", "prev", "next")

	def __init__(self, key=None, value=None):
		self.key = key
		self.value = value
		self.prev: "_Node" = self
		self.next: "_Node" = self


class LRUCache(Generic[K, V]):
	"""
	Fixed-capacity key/value store with least-recently-used eviction.

	Usage:
		cache = LRUCache[str, str](50)
		cache.set("a", "1")
		cache.get("a")  # "1", and "a" becomes most recently used
		cache.get("b")  # None

	All operations run under one lock so the recency order stays
	consistent when the cache is shared by concurrent callers.
	"""

	def __init__(self, max_size: int):
		if max_size < 1:
			raise ValueError("LRU cache max_size must be at least 1")
		self._max_size = max_size
		self._nodes: dict[K, _Node] = {}
		self._sentinel = _Node()
		self._lock = threading.Lock()

	@property
	def max_size(self) -> int:
		return self._max_size

	@property
	def size(self) -> int:
		return len(self._nodes)

	def __len__(self) -> int:
		return len(self._nodes)

	def __contains__(self, key: K) -> bool:
		"""Membership test that does not refresh recency."""
		return key in self._nodes

	def get(self, key: K) -> Optional[V]:
		"""Return the cached value and mark it most recently used, or None."""
		with self._lock:
			node = self._nodes.get(key)
			if node is None:
				return None
			self._unlink(node)
			self._push_front(node)
			return node.value

	def set(self, key: K, value: V) -> None:
		"""Insert or overwrite a value; evicts the LRU entry when over capacity."""
		with self._lock:
			node = self._nodes.get(key)
			if node is not None:
				node.value = value
				self._unlink(node)
				self._push_front(node)
				return

			node = _Node(key, value)
			self._nodes[key] = node
			self._push_front(node)

			if len(self._nodes) > self._max_size:
				lru = self._sentinel.prev
				self._unlink(lru)
				del self._nodes[lru.key]

	def clear(self) -> None:
		"""Remove all entries."""
		with self._lock:
			self._nodes.clear()
			self._sentinel.prev = self._sentinel
			self._sentinel.next = self._sentinel

	def keys(self) -> list[K]:
		"""Keys ordered from most to least recently used."""
		with self._lock:
			result = []
			node = self._sentinel.next
			while node is not self._sentinel:
				result.append(node.key)
				node = node.next
			return result

	def _unlink(self, node: _Node) -> None:
		node.prev.next = node.next
		node.next.prev = node.prev

	def _push_front(self, node: _Node) -> None:
		head = self._sentinel.next
		node.prev = self._sentinel
		node.next = head
		head.prev = node
		self._sentinel.next = node
