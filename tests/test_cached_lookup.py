import pytest

from techno_store.algo.lru import LRUCache
from techno_store.services.cached_lookup import CachedLookup


class FakeStore:
    def __init__(self, rows):
        self.rows = dict(rows)
        self.calls = []

    def load(self, key):
        self.calls.append(key)
        return self.rows.get(key)


def test_miss_falls_through_then_hits():
    store = FakeStore({"p1": "Phone"})
    lookup = CachedLookup(store.load, LRUCache[str, str](2))

    assert lookup.lookup("p1") == "Phone"
    assert lookup.lookup("p1") == "Phone"
    assert store.calls == ["p1"]
    assert lookup.get_stats() == {'hits': 1, 'misses': 1, 'cache_size': 1, 'capacity': 2}


def test_missing_rows_are_not_cached():
    store = FakeStore({})
    lookup = CachedLookup(store.load, LRUCache[str, str](2))

    assert lookup.lookup("p9") is None
    store.rows["p9"] = "Tablet"
    assert lookup.lookup("p9") == "Tablet"
    assert store.calls == ["p9", "p9"]


def test_evicted_entries_reload_from_store():
    store = FakeStore({"a": "1", "b": "2", "c": "3"})
    cache = LRUCache[str, str](2)
    lookup = CachedLookup(store.load, cache)

    for key in ("a", "b", "c", "a"):
        lookup.lookup(key)

    assert store.calls == ["a", "b", "c", "a"]
    assert cache.keys() == ["a", "c"]


def test_loader_errors_propagate():
    def broken(key):
        raise ConnectionError("store unavailable")

    cache = LRUCache[str, str](2)
    lookup = CachedLookup(broken, cache)
    with pytest.raises(ConnectionError):
        lookup.lookup("p1")
    assert len(cache) == 0
