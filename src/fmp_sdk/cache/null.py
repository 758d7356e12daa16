"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/null.py.
"""

from __future__ import annotations

from typing import Any

from .types import CacheProvider


class NullCache(CacheProvider):
    """Provider that stores nothing; used when response caching is disabled."""

    backend_id = "null"

    async def get(self, key: str, default: Any = None) -> Any:
        return default

    async def set(self, key: str, value: Any, ttl_ms: int) -> None:
        return None

    async def delete(self, key: str) -> bool:
        return False

    async def has(self, key: str) -> bool:
        return False

    async def clear(self) -> None:
        return None
