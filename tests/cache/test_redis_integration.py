from __future__ import annotations

import asyncio
import os
import uuid

import pytest

from fmp_sdk.cache import MISSING, RedisCacheProvider


def _redis_url() -> str | None:
    return os.getenv("FMP_TEST_REDIS_URL")


@pytest.mark.skipif(_redis_url() is None, reason="FMP_TEST_REDIS_URL is not set")
@pytest.mark.asyncio
async def test_round_trip_expiry_and_clear_with_real_redis():
    redis = pytest.importorskip("redis.asyncio")
    client = redis.Redis.from_url(_redis_url())
    prefix = f"itest:fmp:{uuid.uuid4().hex}:"
    cache = RedisCacheProvider(client, key_prefix=prefix)
    neighbour = f"itest:other:{uuid.uuid4().hex}"
    await client.set(neighbour, "keep")

    await cache.set("profile", {"symbol": "AAPL"}, 60_000)
    await cache.set("null", None, 60_000)
    assert await cache.get("profile") == {"symbol": "AAPL"}
    assert await cache.get("null", MISSING) is None
    assert 0 < await client.pttl(f"{prefix}profile") <= 60_000

    await cache.set("short", 1, 50)
    await asyncio.sleep(0.2)
    assert await cache.has("short") is False

    await cache.clear()
    assert await cache.has("profile") is False
    assert await client.get(neighbour) == b"keep"

    await client.delete(neighbour)
    await client.aclose()
