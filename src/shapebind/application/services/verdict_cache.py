"""Process-wide verdict cache.

Shapes and implementations are static for the life of the process, so a
verdict computed once stays valid: entries are populated lazily and never
evicted. A lock guards writes so concurrent binds of different pairs are safe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class VerdictCache:
    """Memo of validation results keyed by (operation, type identities, config).

    Values are whatever the producer returns (ShapeInfo, match tuples or
    failures); the cache never inspects them.

    Attributes:
        _entries: Key -> cached result
        _lock: Guards _entries
        _hits: Lookups answered from cache
        _misses: Lookups that ran the producer
    """

    _entries: dict[Hashable, object] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)
    _hits: int = 0
    _misses: int = 0

    def get_or_compute[T](
        self,
        key: Hashable,
        producer: Callable[[], T],
        *,
        keep: Callable[[T], bool] | None = None,
    ) -> T:
        """Return cached result for key, computing it on first use.

        The producer runs outside the lock; if two threads race on the same
        key, both compute the same pure result and the first stored wins.

        Args:
            key: Hashable cache key
            producer: Pure function computing the result
            keep: Predicate deciding whether a fresh result is stored
                (default: always)

        Returns:
            Cached or fresh result
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                logger.debug("verdict cache hit: %r", key)
                return self._entries[key]  # type: ignore[return-value]

        value = producer()

        with self._lock:
            self._misses += 1
            if keep is not None and not keep(value):
                logger.debug("verdict cache skip: %r", key)
                return value
            stored = self._entries.setdefault(key, value)
        logger.debug("verdict cache miss: %r", key)
        return stored  # type: ignore[return-value]

    def clear(self) -> None:
        """Clear entire cache and counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    @property
    def size(self) -> int:
        """Number of cached entries."""
        return len(self._entries)

    @property
    def hits(self) -> int:
        """Lookups answered from cache."""
        return self._hits

    @property
    def misses(self) -> int:
        """Lookups that computed a fresh result."""
        return self._misses


DEFAULT_CACHE = VerdictCache()
