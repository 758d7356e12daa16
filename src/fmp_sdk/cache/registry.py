"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/registry.py.
"""

from __future__ import annotations

from threading import Lock

from .errors import CacheRegistryError
from .memory import MemoryCache
from .types import CacheProvider

_REGISTRY: dict[str, CacheProvider] = {}
_LOCK = Lock()


def _normalize(backend_id: str) -> str:
    return backend_id.strip().lower()


def register_cache_provider(
    provider: CacheProvider,
    *,
    overwrite: bool = False,
) -> None:
    """Register one provider instance by `backend_id`."""
    key = _normalize(provider.backend_id)
    if not key:
        raise CacheRegistryError("Cache provider id must be non-empty")

    with _LOCK:
        if key in _REGISTRY and not overwrite:
            raise CacheRegistryError(f"Cache provider already registered: {key}")
        _REGISTRY[key] = provider


def unregister_cache_provider(backend_id: str) -> bool:
    """Remove a registered provider. Returns whether one was registered."""
    with _LOCK:
        return _REGISTRY.pop(_normalize(backend_id), None) is not None


def create_cache(backend: str | CacheProvider | None = None) -> CacheProvider:
    """Resolve a cache provider from id/instance/default."""
    if backend is None:
        with _LOCK:
            existing = _REGISTRY.get(MemoryCache.backend_id)
            if existing is None:
                existing = MemoryCache()
                _REGISTRY[MemoryCache.backend_id] = existing
        return existing

    if not isinstance(backend, str):
        return backend

    key = _normalize(backend)
    with _LOCK:
        resolved = _REGISTRY.get(key)
    if resolved is None:
        raise CacheRegistryError(f"Unknown cache provider '{backend}'")
    return resolved


def list_cache_providers() -> list[str]:
    """List registered provider ids."""
    with _LOCK:
        return sorted(_REGISTRY.keys())
