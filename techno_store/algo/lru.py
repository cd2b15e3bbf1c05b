from __future__ import annotations

from typing import Dict, Generic, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_NIL = -1


class LRUCache(Generic[K, V]):
    """Fixed-capacity LRU cache (hash index + doubly linked recency list).

    - get: returns (value, True) on a hit and marks the entry most recently used
    - put: sets the value; a new key beyond capacity evicts the least recently used entry

    Entries live in slot arrays addressed by integer handles, so the list links
    are plain indices instead of object references. head is the most recently
    used slot, tail the eviction candidate.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, float) and not capacity.is_integer():
            raise ValueError(f"LRUCache capacity must be an integer, got {capacity!r}")
        capacity = int(capacity)
        if capacity <= 0:
            raise ValueError("LRUCache capacity must be > 0")
        self._capacity = capacity
        self._index: Dict[K, int] = {}
        self._keys: List[Optional[K]] = []
        self._values: List[Optional[V]] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._head = _NIL
        self._tail = _NIL

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> Tuple[Optional[V], bool]:
        slot = self._index.get(key, _NIL)
        if slot == _NIL:
            return None, False
        self._move_to_head(slot)
        return self._values[slot], True

    def put(self, key: K, value: V) -> None:
        slot = self._index.get(key, _NIL)
        if slot != _NIL:
            self._values[slot] = value
            self._move_to_head(slot)
            return
        slot = self._alloc(key, value)
        self._index[key] = slot
        self._add_to_head(slot)
        if len(self._index) > self._capacity:
            evicted = self._remove_tail()
            del self._index[self._keys[evicted]]
            self._release(evicted)

    def keys(self) -> List[K]:
        """Keys from most to least recently used. Does not touch recency."""
        out: List[K] = []
        slot = self._head
        while slot != _NIL:
            out.append(self._keys[slot])
            slot = self._next[slot]
        return out

    def check_invariants(self) -> None:
        """Walk the list and the index and raise RuntimeError on any mismatch."""
        seen: Dict[K, int] = {}
        prev = _NIL
        slot = self._head
        while slot != _NIL:
            if self._prev[slot] != prev:
                raise RuntimeError(f"broken back link at slot {slot}")
            key = self._keys[slot]
            if key in seen:
                raise RuntimeError(f"key {key!r} appears twice in recency list")
            seen[key] = slot
            if len(seen) > self._capacity:
                raise RuntimeError("recency list longer than capacity")
            prev = slot
            slot = self._next[slot]
        if prev != self._tail:
            raise RuntimeError("tail does not point at the last list entry")
        if seen != self._index:
            raise RuntimeError("index and recency list disagree")

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._index)})"

    # slot management

    def _alloc(self, key: K, value: V) -> int:
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._values[slot] = value
            self._prev[slot] = _NIL
            self._next[slot] = _NIL
            return slot
        self._keys.append(key)
        self._values.append(value)
        self._prev.append(_NIL)
        self._next.append(_NIL)
        return len(self._keys) - 1

    def _release(self, slot: int) -> None:
        # drop references so evicted payloads can be collected
        self._keys[slot] = None
        self._values[slot] = None
        self._free.append(slot)

    # list operations

    def _move_to_head(self, slot: int) -> None:
        if slot == self._head:
            return
        prev, nxt = self._prev[slot], self._next[slot]
        if prev != _NIL:
            self._next[prev] = nxt
        if nxt != _NIL:
            self._prev[nxt] = prev
        if slot == self._tail:
            self._tail = prev
        self._add_to_head(slot)

    def _add_to_head(self, slot: int) -> None:
        self._prev[slot] = _NIL
        self._next[slot] = self._head
        if self._head != _NIL:
            self._prev[self._head] = slot
        self._head = slot
        if self._tail == _NIL:
            self._tail = slot

    def _remove_tail(self) -> int:
        tail = self._tail
        if tail == _NIL:
            return _NIL
        prev = self._prev[tail]
        if prev != _NIL:
            self._next[prev] = _NIL
        else:
            self._head = _NIL
        self._tail = prev
        self._prev[tail] = _NIL
        self._next[tail] = _NIL
        return tail
