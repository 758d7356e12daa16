#!/usr/bin/env python3
"""
Cache benchmark utility for hit-rate/latency characterization.

Usage examples:
  PYTHONPATH=src python scripts/cache_benchmark.py --backend memory
  PYTHONPATH=src python scripts/cache_benchmark.py --backend redis --redis-url redis://localhost:6379/0
"""

from __future__ import annotations

import argparse
import asyncio
import random
import statistics
import time
import uuid

from fmp_sdk.cache import MISSING, CacheProvider, MemoryCache, RedisCacheProvider


async def run_benchmark(
    *,
    backend: str,
    num_ops: int,
    key_space: int,
    max_size: int,
    ttl_ms: int,
    redis_url: str | None,
) -> None:
    client = None
    cache: CacheProvider
    if backend == "memory":
        cache = MemoryCache(max_size=max_size)
    elif backend == "redis":
        if not redis_url:
            raise ValueError("--redis-url is required for redis backend")
        import redis.asyncio as redis

        client = redis.Redis.from_url(redis_url)
        cache = RedisCacheProvider(client, key_prefix=f"bench:{uuid.uuid4().hex}:")
    else:
        raise ValueError(f"Unsupported backend: {backend}")

    payload = [{"symbol": "AAPL", "price": 150.25, "volume": 1_000_000}]
    latencies: list[float] = []
    hits = 0

    started = time.perf_counter()
    for _ in range(num_ops):
        key = f"quote?symbol=S{random.randrange(key_space)}"
        op_started = time.perf_counter()
        value = await cache.get(key, MISSING)
        if value is MISSING:
            await cache.set(key, payload, ttl_ms)
        else:
            hits += 1
        latencies.append(time.perf_counter() - op_started)
    elapsed = time.perf_counter() - started

    await cache.clear()
    if client is not None:
        await client.aclose()

    throughput = num_ops / elapsed if elapsed > 0 else 0.0
    p50 = statistics.median(latencies) if latencies else 0.0
    p95 = sorted(latencies)[int(0.95 * (len(latencies) - 1))] if latencies else 0.0

    print(f"backend={backend}")
    print(f"ops={num_ops}")
    print(f"key_space={key_space}")
    print(f"hit_rate={hits / num_ops if num_ops else 0.0:.3f}")
    print(f"elapsed_s={elapsed:.3f}")
    print(f"throughput_ops={throughput:.2f}")
    print(f"op_p50_us={p50 * 1_000_000:.2f}")
    print(f"op_p95_us={p95 * 1_000_000:.2f}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cache benchmark utility")
    parser.add_argument("--backend", choices=("memory", "redis"), default="memory")
    parser.add_argument("--num-ops", type=int, default=10_000)
    parser.add_argument("--key-space", type=int, default=2_000)
    parser.add_argument("--max-size", type=int, default=1_000)
    parser.add_argument("--ttl-ms", type=int, default=60_000)
    parser.add_argument("--redis-url", type=str, default=None)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    asyncio.run(
        run_benchmark(
            backend=args.backend,
            num_ops=args.num_ops,
            key_space=args.key_space,
            max_size=args.max_size,
            ttl_ms=args.ttl_ms,
            redis_url=args.redis_url,
        )
    )


if __name__ == "__main__":
    main()
