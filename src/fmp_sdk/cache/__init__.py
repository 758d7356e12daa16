"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Response cache package for the FMP client.

Provides a ``CacheProvider`` contract with an in-process LRU/TTL store, a
Redis adapter and a no-op provider. Callers choose cache keys and TTLs;
providers only store.

Quick start::

    from fmp_sdk.cache import MISSING, CacheTTL, MemoryCache

    cache = MemoryCache(max_size=500)
    await cache.set("profile?symbol=AAPL", payload, CacheTTL.DAY)
    hit = await cache.get("profile?symbol=AAPL", MISSING)
    if hit is MISSING:
        ...
"""

from .errors import CacheConfigError, CacheError, CacheRegistryError
from .factory import create_cache_from_env
from .memory import MemoryCache
from .null import NullCache
from .registry import (
    create_cache,
    list_cache_providers,
    register_cache_provider,
    unregister_cache_provider,
)
from .settings import CacheSettings
from .types import (
    MISSING,
    CacheEntry,
    CacheProvider,
    CacheStats,
    CacheTTL,
    now_ms,
)

__all__ = [
    "MISSING",
    "CacheEntry",
    "CacheProvider",
    "CacheStats",
    "CacheTTL",
    "now_ms",
    "CacheError",
    "CacheConfigError",
    "CacheRegistryError",
    "MemoryCache",
    "NullCache",
    "CacheSettings",
    "create_cache_from_env",
    "register_cache_provider",
    "unregister_cache_provider",
    "create_cache",
    "list_cache_providers",
]


# Lazy import for Redis provider
def __getattr__(name: str):
    """Lazily expose the Redis provider, which pulls in pydantic."""
    if name in ("RedisCacheProvider", "CacheEnvelope", "RedisClientLike"):
        from . import redis as _redis

        return getattr(_redis, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
