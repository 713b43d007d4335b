"""Fixed-capacity key/value caches with LRU and LFU eviction."""

from __future__ import annotations

from collections import OrderedDict, defaultdict
from typing import Hashable

MISSING = -1


class LRUCache:
    """A cache that evicts the least recently used key when it is full.

    ``get`` returns -1 for a key that is not cached.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> int:
        """Return the value for ``key`` and mark it most recently used, or -1."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key``, evicting the stalest key if over capacity."""
        self._entries[key] = value
        self._entries.move_to_end(key)
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)


class LFUCache:
    """A cache that evicts the least frequently used key when it is full.

    Ties between keys of equal frequency go to the least recently used.
    ``get`` returns -1 for a key that is not cached.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._values: dict[Hashable, int] = {}
        self._counts: dict[Hashable, int] = {}
        self._buckets: defaultdict[int, OrderedDict[Hashable, None]] = defaultdict(
            OrderedDict
        )
        self._min_count = 0

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._values

    def _touch(self, key: Hashable) -> None:
        count = self._counts[key]
        bucket = self._buckets[count]
        del bucket[key]
        if not bucket:
            del self._buckets[count]
            if self._min_count == count:
                self._min_count = count + 1
        self._counts[key] = count + 1
        self._buckets[count + 1][key] = None

    def get(self, key: Hashable) -> int:
        """Return the value for ``key`` and count the use, or -1."""
        if key not in self._values:
            return MISSING
        self._touch(key)
        return self._values[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key``; an update counts as a use."""
        if self.capacity == 0:
            return
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) >= self.capacity:
            bucket = self._buckets[self._min_count]
            victim, _ = bucket.popitem(last=False)
            if not bucket:
                del self._buckets[self._min_count]
            del self._values[victim]
            del self._counts[victim]
        self._values[key] = value
        self._counts[key] = 1
        self._buckets[1][key] = None
        self._min_count = 1