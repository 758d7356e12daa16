"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Response cache settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import CacheConfigError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


def _env_int(*names: str, default: int) -> int:
    raw = _env_first(*names)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise CacheConfigError(f"{names[0]} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class CacheSettings:
    """Explicit settings used to build the response cache provider."""

    enabled: bool = False
    backend: str = "memory"
    max_size: int = 1000
    key_prefix: str = "fmp:"

    redis_url: str | None = None
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str | None = None

    @staticmethod
    def from_env() -> "CacheSettings":
        """Load settings from `FMP_CACHE_*` environment variables."""
        enabled = _env_first("FMP_CACHE_ENABLED", default="false") or "false"
        # Prefix may legitimately be empty, so it bypasses _env_first.
        prefix = os.getenv("FMP_CACHE_KEY_PREFIX")
        return CacheSettings(
            enabled=enabled.lower() in _TRUTHY,
            backend=(_env_first("FMP_CACHE_BACKEND", default="memory") or "memory").lower(),
            max_size=_env_int("FMP_CACHE_MAX_SIZE", default=1000),
            key_prefix="fmp:" if prefix is None else prefix,
            redis_url=_env_first("FMP_CACHE_REDIS_URL", "FMP_REDIS_URL"),
            redis_host=_env_first("FMP_CACHE_REDIS_HOST", "FMP_REDIS_HOST", default="localhost")
            or "localhost",
            redis_port=_env_int("FMP_CACHE_REDIS_PORT", "FMP_REDIS_PORT", default=6379),
            redis_db=_env_int("FMP_CACHE_REDIS_DB", "FMP_REDIS_DB", default=0),
            redis_password=_env_first("FMP_CACHE_REDIS_PASSWORD", "FMP_REDIS_PASSWORD"),
        )

    def resolved_redis_url(self) -> str:
        """Redis URL from `redis_url`, or assembled from host/port/db/password."""
        if self.redis_url:
            return self.redis_url
        if self.redis_password:
            return f"redis://:{self.redis_password}@{self.redis_host}:{self.redis_port}/{self.redis_db}"
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"
