"""
In-process LRU cache.

Used for composed template configurations; entries are keyed by values
that change on every write, so no TTL-driven invalidation is needed.
"""

from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total * 100


class LRUCache:
    """Simple in-memory LRU cache."""

    def __init__(self, max_size: int = 1000):
        self._cache: OrderedDict = OrderedDict()
        self._max_size = max_size
        self._stats = CacheStats()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache

    def get(self, key: Hashable) -> Any | None:
        """Get value and move to end (most recently used)."""
        if key in self._cache:
            self._cache.move_to_end(key)
            self._stats.hits += 1
            return self._cache[key]
        self._stats.misses += 1
        return None

    def set(self, key: Hashable, value: Any) -> None:
        if key in self._cache:
            self._cache.move_to_end(key)
        self._cache[key] = value

        # Evict oldest if over capacity
        while len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

        self._stats.sets += 1

    def delete(self, key: Hashable) -> bool:
        if key in self._cache:
            del self._cache[key]
            self._stats.deletes += 1
            return True
        return False

    def delete_where(self, predicate) -> int:
        """Delete every entry whose key satisfies ``predicate``."""
        doomed = [key for key in self._cache if predicate(key)]
        for key in doomed:
            self.delete(key)
        return len(doomed)

    def clear(self) -> None:
        self._cache.clear()

    def get_stats(self) -> dict:
        return {
            "size": len(self._cache),
            "max_size": self._max_size,
            "hits": self._stats.hits,
            "misses": self._stats.misses,
            "hit_rate": f"{self._stats.hit_rate:.2f}%",
        }
