"""
read_through_cache.py — Caching API responses in front of a fetch call.

The caller owns cache keys and TTLs; the provider only stores. Swap
`MemoryCache` for `RedisCacheProvider(client)` without touching the rest.

Usage:
    FMP_CACHE_ENABLED=1 python examples/read_through_cache.py
    FMP_CACHE_ENABLED=1 FMP_CACHE_BACKEND=redis python examples/read_through_cache.py
"""

from fmp_sdk.cache import MISSING, CacheProvider, CacheTTL, create_cache_from_env


async def fetch_profile(symbol: str) -> list[dict]:
    print(f"  -> fetching profile for {symbol}")
    return [{"symbol": symbol, "companyName": "Apple Inc.", "price": None}]


async def get_profile(cache: CacheProvider, symbol: str) -> list[dict]:
    key = f"profile?symbol={symbol}"
    cached = await cache.get(key, MISSING)
    if cached is not MISSING:
        return cached
    fresh = await fetch_profile(symbol)
    await cache.set(key, fresh, CacheTTL.DAY)
    return fresh


async def main() -> None:
    cache = create_cache_from_env()
    print(f"backend={cache.backend_id}")
    for _ in range(2):
        print(await get_profile(cache, "AAPL"))
    await cache.clear()


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
