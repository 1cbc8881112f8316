"""Tests for the compiled template cache."""

import pytest
from hypothesis import given, strategies as st

from viewkit.core.cache import CacheStats, TemplateCache


@pytest.mark.unit
def test_get_returns_stored_value():
    cache = TemplateCache[str]()

    cache.set("<p>a</p>", "compiled_a")
    cache.set("<p>b</p>", "compiled_b")

    assert cache.get("<p>a</p>") == "compiled_a"
    assert cache.get("<p>b</p>") == "compiled_b"
    assert len(cache) == 2


@pytest.mark.unit
def test_unbounded_by_default():
    cache = TemplateCache[int]()

    for i in range(500):
        cache.set(f"template-{i}", i)

    assert len(cache) == 500
    assert cache.get("template-0") == 0
    assert cache.stats.evictions == 0


@pytest.mark.unit
def test_bound_evicts_least_recently_used():
    cache = TemplateCache[str](max_size=2)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    cache.get("a")  # "b" is now the oldest
    cache.set("c", "value_c")

    assert "b" not in cache
    assert cache.get("a") == "value_a"
    assert cache.get("c") == "value_c"
    assert cache.stats.evictions == 1


@pytest.mark.unit
def test_restore_counts_as_recent_use():
    cache = TemplateCache[str](max_size=2)

    cache.set("a", "first")
    cache.set("b", "value_b")
    cache.set("a", "second")  # "b" is now the oldest
    cache.set("c", "value_c")

    assert cache.get("a") == "second"
    assert "b" not in cache


@pytest.mark.unit
def test_last_write_wins():
    cache = TemplateCache[str]()

    cache.set("{{ x }}", "first")
    cache.set("{{ x }}", "second")

    assert cache.get("{{ x }}") == "second"
    assert len(cache) == 1
    assert cache.stats.stores == 2


@pytest.mark.unit
def test_keys_are_full_text():
    """Sources differing only in whitespace never share an entry."""
    cache = TemplateCache[str]()

    cache.set("{{ a }}", "one")
    cache.set("{{ a }} ", "two")

    assert cache.get("{{ a }}") == "one"
    assert cache.get("{{ a }} ") == "two"


@pytest.mark.unit
def test_clear_keeps_counters():
    cache = TemplateCache[str]()
    cache.set("a", "value_a")
    cache.get("a")

    cache.clear()

    assert len(cache) == 0
    assert cache.get("a") is None
    assert cache.stats.hits == 1
    assert cache.stats.misses == 1


@pytest.mark.unit
def test_contains_does_not_count():
    cache = TemplateCache[str]()
    cache.set("key", "value")

    assert "key" in cache
    assert "missing" not in cache
    assert cache.stats.hits == 0
    assert cache.stats.misses == 0


@pytest.mark.unit
def test_stats_snapshot():
    cache = TemplateCache[str](max_size=10)
    cache.set("key", "value")
    cache.get("key")
    cache.get("missing")

    stats = cache.stats
    cache.get("key")

    assert stats.hit_rate == 0.5
    assert stats.to_dict() == {
        "size": 1,
        "max_size": 10,
        "hits": 1,
        "misses": 1,
        "stores": 1,
        "evictions": 0,
        "hit_rate": 0.5,
    }
    assert cache.stats.hits == 2


@pytest.mark.unit
def test_empty_stats_hit_rate():
    assert CacheStats().hit_rate == 0.0


@pytest.mark.unit
@pytest.mark.parametrize("max_size", [0, -1])
def test_invalid_max_size(max_size):
    with pytest.raises(ValueError):
        TemplateCache[str](max_size=max_size)


@given(st.lists(st.text(max_size=20), min_size=1, max_size=50))
def test_cache_preserves_values(keys):
    """Property test: every stored source maps to its latest value."""
    cache = TemplateCache[str]()

    for key in keys:
        cache.set(key, f"compiled_{key}")

    for key in keys:
        assert cache.get(key) == f"compiled_{key}"
    assert len(cache) == len(set(keys))


@given(
    st.integers(min_value=1, max_value=8),
    st.lists(st.text(max_size=5), max_size=60),
)
def test_bound_is_never_exceeded(max_size, keys):
    """Property test: a bounded cache never holds more than max_size entries."""
    cache = TemplateCache[str](max_size=max_size)

    for key in keys:
        cache.set(key, key)
        assert len(cache) <= max_size
