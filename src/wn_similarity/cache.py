"""Bounded cache of computed similarity scores.

Key: "<key1>-<key2>" built from the synset keys in call order, so the
cache is not symmetric: (a, b) and (b, a) are separate entries.
Eviction: least recently used, where both lookups and stores count as use.
"""

import logging
from collections import OrderedDict

from wn_similarity.constants import CACHE_KEY_SEPARATOR, DEFAULT_CACHE_SIZE

logger = logging.getLogger(__name__)


def make_key(key1: str, key2: str) -> str:
    """Build the cache key for an ordered pair of synset keys."""
    return f"{key1}{CACHE_KEY_SEPARATOR}{key2}"


class SimilarityCache:
    """LRU cache for similarity scores.

    Not thread-safe: callers sharing a measure across threads must
    synchronize access themselves.

    Args:
        capacity: Maximum number of entries. Negative disables eviction.
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_SIZE):
        self.capacity = capacity
        self._entries: OrderedDict[str, float] = OrderedDict()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def bounded(self) -> bool:
        return self.capacity >= 0

    def lookup(self, key1: str, key2: str) -> float | None:
        """Return the cached score for (key1, key2), or None on a miss."""
        key = make_key(key1, key2)
        score = self._entries.get(key)
        if score is None:
            self._misses += 1
            return None

        self._entries.move_to_end(key)
        self._hits += 1
        logger.debug(f"Cache hit for {key}")
        return score

    def store(self, key1: str, key2: str, score: float) -> float:
        """Cache ``score`` for (key1, key2) and return it."""
        key = make_key(key1, key2)
        self._entries[key] = score
        self._entries.move_to_end(key)

        if self.bounded:
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug(f"Evicted {evicted} from similarity cache")
        return score

    def clear(self) -> None:
        """Remove all entries (statistics are kept)."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dict with hits, misses, evictions, size, capacity, hit_rate.
        """
        total = self._hits + self._misses
        return {
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "size": len(self._entries),
            "capacity": self.capacity,
            "hit_rate": self._hits / total if total > 0 else 0.0,
        }
