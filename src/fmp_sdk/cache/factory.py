"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers for selecting cache providers from environment variables.
"""

from __future__ import annotations

import logging
from typing import Any

from .memory import MemoryCache
from .null import NullCache
from .settings import CacheSettings
from .types import CacheProvider

logger = logging.getLogger("fmp_sdk.cache.factory")


def create_cache_from_env(
    *,
    redis_client: Any | None = None,
    settings: CacheSettings | None = None,
) -> CacheProvider:
    """
    Create a cache provider from `FMP_CACHE_*` environment variables.

    Backends:
    - `memory` (default)
    - `redis`
    - `null`

    Caching is off unless `FMP_CACHE_ENABLED` is truthy; a disabled cache
    resolves to `NullCache`.

    Redis resolution:
    - Uses the provided `redis_client` when supplied.
    - Otherwise builds a client from `FMP_CACHE_REDIS_URL` (or `FMP_REDIS_URL`).
    - If no URL is set, falls back to host/port/db/password variables.
    """
    cfg = settings if settings is not None else CacheSettings.from_env()
    if not cfg.enabled:
        return NullCache()

    backend = cfg.backend.strip().lower()

    if backend in ("mem", "memory", "inmemory", "in_memory"):
        return MemoryCache(max_size=cfg.max_size)

    if backend in ("null", "none"):
        return NullCache()

    if backend in ("redis",):
        from .redis import RedisCacheProvider

        client = redis_client
        if client is None:
            try:
                import redis.asyncio as redis
            except ModuleNotFoundError as exc:  # pragma: no cover
                raise RuntimeError(
                    "Redis cache backend requires `redis` to be installed."
                ) from exc

            client = redis.Redis.from_url(cfg.resolved_redis_url())
            logger.debug("Created Redis client for response cache")

        return RedisCacheProvider(client, key_prefix=cfg.key_prefix)

    raise ValueError(f"Unknown FMP_CACHE_BACKEND: {backend}")
