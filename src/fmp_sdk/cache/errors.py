"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/errors.py.
"""

from __future__ import annotations


class CacheError(RuntimeError):
    """Base class for errors raised by the cache package."""


class CacheConfigError(CacheError, ValueError):
    """Raised when a cache provider is constructed with invalid arguments."""


class CacheRegistryError(CacheError):
    """Raised when cache provider resolution fails."""
