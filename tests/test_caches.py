import pytest
from hypothesis import given, strategies as st

from dsakit.caches import LFUCache, LRUCache


def test_lru_worked_example():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_missing_key():
    assert LRUCache(3).get(42) == -1


def test_lru_update_refreshes_key():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert cache.get("a") == 10
    assert cache.get("b") == -1
    assert cache.get("c") == 3


def test_lru_zero_capacity_stores_nothing():
    cache = LRUCache(0)
    cache.put(1, 1)
    assert cache.get(1) == -1
    assert len(cache) == 0


def test_lru_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)


@given(
    st.integers(min_value=1, max_value=5),
    st.lists(st.tuples(st.integers(0, 9), st.integers()), max_size=50),
)
def test_lru_never_exceeds_capacity_and_keeps_last_put(capacity, ops):
    cache = LRUCache(capacity)
    for key, value in ops:
        cache.put(key, value)
        assert len(cache) <= capacity
        assert cache.get(key) == value


def test_lfu_worked_example():
    cache = LFUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    assert cache.get(3) == 3
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lfu_ties_broken_by_recency():
    cache = LFUCache(2)
    cache.put("x", 1)
    cache.put("y", 2)
    cache.put("z", 3)
    assert "x" not in cache
    assert cache.get("y") == 2
    assert cache.get("z") == 3


def test_lfu_update_counts_as_use():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 5)
    cache.put("c", 3)
    assert cache.get("a") == 5
    assert cache.get("b") == -1


def test_lfu_zero_capacity_stores_nothing():
    cache = LFUCache(0)
    cache.put(0, 0)
    assert cache.get(0) == -1
    assert len(cache) == 0


def test_lfu_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LFUCache(-2)


@given(
    st.integers(min_value=1, max_value=5),
    st.lists(st.tuples(st.integers(0, 9), st.integers()), max_size=50),
)
def test_lfu_never_exceeds_capacity_and_keeps_last_put(capacity, ops):
    cache = LFUCache(capacity)
    for key, value in ops:
        cache.put(key, value)
        assert len(cache) <= capacity
        assert cache.get(key) == value