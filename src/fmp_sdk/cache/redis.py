"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/redis.py.

Redis-compatible cache provider.

Works with ``redis.asyncio.Redis`` and any client exposing the same
``get``/``set``/``delete`` coroutines. Entries are stored as a JSON envelope
``{"v": value, "c": created_at_ms, "t": ttl_ms}`` and written with a native
``PX`` expiry, so expiration holds even on stores that ignore ``PX``.

Every remote call is best-effort: failures are logged and degrade to a miss,
``False`` or a no-op. Cache unavailability never reaches the caller.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

from .errors import CacheConfigError
from .types import MISSING, CacheProvider, now_ms

logger = logging.getLogger("fmp_sdk.cache.redis")

DEFAULT_KEY_PREFIX = "fmp:"

_T = TypeVar("_T")
_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


class RedisClientLike(Protocol):
    """
    Minimal async Redis client surface used by `RedisCacheProvider`.

    ``keys(pattern)`` or ``scan_iter(match=...)`` is optional and only
    needed for ``clear()``.
    """

    async def get(self, name: str) -> str | bytes | None: ...

    async def set(self, name: str, value: str, *, px: int | None = None) -> Any: ...

    async def delete(self, *names: str | bytes) -> int: ...


class CacheEnvelope(BaseModel):
    """Wire representation of one cached entry."""

    model_config = ConfigDict(frozen=True)

    v: Any
    c: int
    t: int

    def is_expired(self, at_ms: int) -> bool:
        return at_ms >= self.c + self.t


def best_effort(
    default: Any,
) -> Callable[[Callable[..., Awaitable[_T]]], Callable[..., Awaitable[_T]]]:
    """
    Wrap one provider coroutine so any failure returns `default`.

    Only ``Exception`` subclasses are absorbed; cancellation still propagates.
    """

    def decorator(fn: Callable[..., Awaitable[_T]]) -> Callable[..., Awaitable[_T]]:
        @functools.wraps(fn)
        async def wrapper(self: "RedisCacheProvider", *args: Any, **kwargs: Any) -> _T:
            try:
                return await fn(self, *args, **kwargs)
            except Exception as exc:
                logger.warning(
                    "Redis cache %s failed (prefix=%s): %s",
                    fn.__name__.lstrip("_"),
                    self.key_prefix,
                    exc,
                )
                return default

        return wrapper

    return decorator


def _glob_escape(text: str) -> str:
    """Escape Redis glob metacharacters so `text` matches literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", text)


def _as_text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class RedisCacheProvider(CacheProvider):
    """
    Redis-backed cache provider for multi-process deployments.

    The client is shared by reference and never closed here. Several
    providers may share one client as long as their prefixes differ.

    Args:
        client: ``redis.asyncio.Redis`` instance or compatible client.
        key_prefix: Namespace prepended to every physical key.
    """

    backend_id = "redis"

    def __init__(self, client: RedisClientLike, *, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        if client is None:
            raise CacheConfigError("RedisCacheProvider requires a client")
        self._redis = client
        self._key_prefix = key_prefix

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    def physical_key(self, key: str) -> str:
        """Remote key that stores logical `key`."""
        return f"{self._key_prefix}{key}"

    @best_effort(MISSING)
    async def _load(self, key: str) -> Any:
        """Return the live envelope value for `key`, or `MISSING`."""
        physical = self.physical_key(key)
        raw = await self._redis.get(physical)
        if raw is None:
            return MISSING
        envelope = CacheEnvelope.model_validate_json(raw)
        if envelope.is_expired(now_ms()):
            await self._discard(physical)
            return MISSING
        return envelope.v

    @best_effort(None)
    async def _discard(self, physical: str) -> None:
        await self._redis.delete(physical)

    async def get(self, key: str, default: Any = None) -> Any:
        value = await self._load(key)
        if value is MISSING:
            return default
        return value

    @best_effort(None)
    async def set(self, key: str, value: Any, ttl_ms: int) -> None:
        physical = self.physical_key(key)
        if ttl_ms <= 0:
            await self._redis.delete(physical)
            return
        payload = CacheEnvelope(v=value, c=now_ms(), t=ttl_ms).model_dump_json()
        await self._redis.set(physical, payload, px=ttl_ms)

    @best_effort(False)
    async def delete(self, key: str) -> bool:
        removed = await self._redis.delete(self.physical_key(key))
        return int(removed or 0) > 0

    async def has(self, key: str) -> bool:
        # Same envelope liveness check as get(), not bare EXISTS.
        return await self._load(key) is not MISSING

    @best_effort(None)
    async def clear(self) -> None:
        pattern = f"{_glob_escape(self._key_prefix)}*"
        scan_iter = getattr(self._redis, "scan_iter", None)
        keys_fn = getattr(self._redis, "keys", None)
        if callable(scan_iter):
            found = [name async for name in scan_iter(match=pattern)]
        elif callable(keys_fn):
            found = list(await keys_fn(pattern))
        else:
            logger.debug("Redis client cannot enumerate keys; clear() skipped")
            return

        owned = [name for name in found if _as_text(name).startswith(self._key_prefix)]
        if owned:
            await self._redis.delete(*owned)
