from __future__ import annotations

from typing import Callable, Optional

from techno_store.algo.lru import LRUCache


class CachedLookup:
    """Read-through lookup in front of an authoritative loader.

    A cache miss is not "does not exist": it falls through to the loader.
    Only values the loader actually found are cached, so a key created later
    in the backing store is picked up on the next lookup.
    """

    def __init__(self, loader: Callable[[str], Optional[str]], cache: LRUCache[str, str]) -> None:
        """
        Args:
            loader: authoritative source, returns None when the key does not exist
            cache: cache instance owned by the caller
        """
        self.loader = loader
        self.cache = cache
        self.hits = 0
        self.misses = 0

    def lookup(self, key: str) -> Optional[str]:
        value, found = self.cache.get(key)
        if found:
            self.hits += 1
            return value

        self.misses += 1
        value = self.loader(key)
        if value is not None:
            self.cache.put(key, value)
        return value

    def get_stats(self) -> dict:
        return {
            'hits': self.hits,
            'misses': self.misses,
            'cache_size': len(self.cache),
            'capacity': self.cache.capacity,
        }
