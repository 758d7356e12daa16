"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/memory.py.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

from .errors import CacheConfigError
from .types import CacheEntry, CacheProvider, CacheStats, now_ms

logger = logging.getLogger("fmp_sdk.cache.memory")


class MemoryCache(CacheProvider):
    """
    Process-local LRU cache with per-entry TTL.

    Entries live in an ``OrderedDict`` ordered from least- to most-recently
    used. Expired entries are evicted lazily when touched by ``get``/``has``
    or eagerly by ``prune()``. Operations never await, so the async surface
    exists only to match networked providers.

    Args:
        max_size: Maximum number of stored entries. Must be positive.
    """

    backend_id = "memory"

    def __init__(self, max_size: int = 1000) -> None:
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
            raise CacheConfigError(
                f"max_size must be a positive integer, got {max_size!r}"
            )
        self._max_size = max_size
        self._rows: OrderedDict[str, CacheEntry] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def size(self) -> int:
        """Entries physically stored, including expired ones not yet evicted."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def _live_entry(self, key: str) -> CacheEntry | None:
        """Return the live entry for `key`, dropping it if it has expired."""
        row = self._rows.get(key)
        if row is None:
            return None
        if row.is_expired(now_ms()):
            del self._rows[key]
            return None
        return row

    async def get(self, key: str, default: Any = None) -> Any:
        row = self._live_entry(key)
        if row is None:
            self._misses += 1
            return default
        self._rows.move_to_end(key)
        self._hits += 1
        return row.value

    async def set(self, key: str, value: Any, ttl_ms: int) -> None:
        if ttl_ms <= 0:
            self._rows.pop(key, None)
            return

        if key in self._rows:
            self._rows.move_to_end(key)
        elif len(self._rows) >= self._max_size:
            evicted, _ = self._rows.popitem(last=False)
            self._evictions += 1
            logger.debug("Evicted least-recently-used cache key %s", evicted)

        self._rows[key] = CacheEntry(value=value, created_at_ms=now_ms(), ttl_ms=ttl_ms)

    async def delete(self, key: str) -> bool:
        return self._rows.pop(key, None) is not None

    async def has(self, key: str) -> bool:
        return self._live_entry(key) is not None

    async def clear(self) -> None:
        self._rows.clear()

    def prune(self) -> int:
        """
        Remove every entry expired at call time.

        Returns:
            Number of entries removed.
        """
        current = now_ms()
        expired = [key for key, row in self._rows.items() if row.is_expired(current)]
        for key in expired:
            del self._rows[key]
        if expired:
            logger.debug("Pruned %d expired cache entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        return CacheStats(
            size=len(self._rows),
            max_size=self._max_size,
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
        )

    def reset_stats(self) -> None:
        self._hits = 0
        self._misses = 0
        self._evictions = 0
