"""Compiled template cache with optional LRU bound and statistics.

Keys are the full template text. Entries never expire: a template's text is
immutable once cached, so a hit is always equivalent to recompiling now.
"""

from collections import OrderedDict
from dataclasses import asdict, dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time snapshot of cache counters."""

    size: int = 0
    max_size: int | None = None
    hits: int = 0
    misses: int = 0
    stores: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Hits over lookups, 0.0 before the first lookup."""
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "hit_rate": self.hit_rate}


class TemplateCache(Generic[T]):
    """
    Compiled templates keyed by their source text.

    Unbounded by default. With ``max_size`` set, the least recently used
    entry is evicted once the bound is exceeded. Storing a source that is
    already cached replaces the entry (last write wins), which is what two
    concurrent first renders of the same text end up doing.

    Examples:
        >>> cache = TemplateCache[str]()
        >>> cache.set("<p>{{ x }}</p>", "compiled")
        >>> cache.get("<p>{{ x }}</p>")
        'compiled'
        >>> cache.stats.hit_rate
        1.0
    """

    def __init__(self, max_size: int | None = None):
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self._entries: OrderedDict[str, T] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._stores = 0
        self._evictions = 0

    def get(self, source: str) -> T | None:
        """Return the compiled template for ``source``, or None (counts a miss)."""
        try:
            value = self._entries[source]
        except KeyError:
            self._misses += 1
            return None

        self._entries.move_to_end(source)
        self._hits += 1
        return value

    def set(self, source: str, value: T) -> None:
        """Store ``value`` for ``source``, evicting the LRU entry if over the bound."""
        self._entries[source] = value
        self._entries.move_to_end(source)
        self._stores += 1

        if self.max_size is not None and len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
            self._evictions += 1

    def clear(self) -> None:
        """Drop every entry; counters are kept."""
        self._entries.clear()

    @property
    def stats(self) -> CacheStats:
        return CacheStats(
            size=len(self._entries),
            max_size=self.max_size,
            hits=self._hits,
            misses=self._misses,
            stores=self._stores,
            evictions=self._evictions,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source: str) -> bool:
        """Membership check; does not touch LRU order or counters."""
        return source in self._entries


__all__ = ["TemplateCache", "CacheStats"]
