"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/types.py.

Shared contract and value types for response cache providers.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable


class _Missing:
    """Sentinel type marking an absent cache entry."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final[Any] = _Missing()


def now_ms() -> int:
    """Return current wall-clock epoch time in integer milliseconds."""
    return int(time.time() * 1000)


class CacheTTL:
    """TTL presets in milliseconds for different data freshness needs."""

    NONE: Final[int] = 0
    SHORT: Final[int] = 60 * 1000
    MEDIUM: Final[int] = 5 * 60 * 1000
    LONG: Final[int] = 60 * 60 * 1000
    DAY: Final[int] = 24 * 60 * 60 * 1000


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One cached value with creation time and time-to-live."""

    value: Any
    created_at_ms: int
    ttl_ms: int

    @property
    def expires_at_ms(self) -> int:
        return self.created_at_ms + self.ttl_ms

    def is_expired(self, at_ms: int | None = None) -> bool:
        """An entry stops being live the moment `created_at + ttl` is reached."""
        current = now_ms() if at_ms is None else at_ms
        return current >= self.expires_at_ms


@dataclass(slots=True)
class CacheStats:
    """Point-in-time counters reported by the in-process store."""

    size: int
    max_size: int
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups


@runtime_checkable
class CacheProvider(Protocol):
    """
    Capability set every cache backend implements.

    All operations are awaitable so in-process and networked backends are
    interchangeable. `get` returns `default` when no live entry exists;
    pass `MISSING` to tell a cached `None` apart from a miss.
    """

    backend_id: str

    async def get(self, key: str, default: Any = None) -> Any: ...

    async def set(self, key: str, value: Any, ttl_ms: int) -> None: ...

    async def delete(self, key: str) -> bool: ...

    async def has(self, key: str) -> bool: ...

    async def clear(self) -> None: ...
