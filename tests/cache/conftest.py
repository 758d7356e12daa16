from __future__ import annotations

import re

import pytest


class FakeClock:
    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeRedis:
    """Dict-backed stand-in for ``redis.asyncio.Redis``."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.set_calls: list[tuple[str, str, int | None]] = []
        self.delete_calls: list[tuple[str, ...]] = []

    async def get(self, name):
        return self.store.get(name)

    async def set(self, name, value, *, px=None):
        self.set_calls.append((name, value, px))
        self.store[name] = value
        return True

    async def delete(self, *names):
        self.delete_calls.append(tuple(names))
        removed = 0
        for name in names:
            if isinstance(name, bytes):
                name = name.decode("utf-8")
            if self.store.pop(name, None) is not None:
                removed += 1
        return removed

    async def keys(self, pattern):
        assert pattern.endswith("*")
        prefix = re.sub(r"\\(.)", r"\1", pattern[:-1])
        return [name for name in self.store if name.startswith(prefix)]


class FakeScanRedis(FakeRedis):
    """Fake exposing ``scan_iter`` and returning bytes keys."""

    async def keys(self, pattern):  # pragma: no cover - scan_iter is preferred
        raise AssertionError("keys() should not be used when scan_iter exists")

    async def scan_iter(self, match=None):
        prefix = re.sub(r"\\(.)", r"\1", (match or "*")[:-1])
        for name in list(self.store):
            if name.startswith(prefix):
                yield name.encode("utf-8")


class FakeRedisNoEnumeration(FakeRedis):
    keys = None


class FailingRedis:
    """Client whose every call fails like a dropped connection."""

    async def get(self, name):
        raise ConnectionError("redis down")

    async def set(self, name, value, *, px=None):
        raise ConnectionError("redis down")

    async def delete(self, *names):
        raise ConnectionError("redis down")

    async def keys(self, pattern):
        raise ConnectionError("redis down")


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr("fmp_sdk.cache.memory.now_ms", fake)
    monkeypatch.setattr("fmp_sdk.cache.redis.now_ms", fake)
    return fake


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def scan_redis() -> FakeScanRedis:
    return FakeScanRedis()


@pytest.fixture
def no_enum_redis() -> FakeRedisNoEnumeration:
    return FakeRedisNoEnumeration()


@pytest.fixture
def failing_redis() -> FailingRedis:
    return FailingRedis()
