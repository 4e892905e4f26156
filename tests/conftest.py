"""
Shared pytest fixtures for the aeronave gateway tests.
"""
from __future__ import annotations

import re
from fnmatch import fnmatchcase

import pytest

from aeronave_gateway.aeronave_store import AeronaveStore
from aeronave_gateway.aeronave_controller import AeronaveController


class InMemoryRedis:
    """Dict-backed stand-in for the subset of redis.asyncio.Redis used by AeronaveStore"""

    def __init__(self):
        self.data: dict[str, str] = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, nx=False, xx=False):
        if nx and key in self.data:
            return None
        if xx and key not in self.data:
            return None
        self.data[key] = value
        return True

    async def getdel(self, key):
        return self.data.pop(key, None)

    async def mget(self, keys):
        return [self.data.get(k) for k in keys]

    async def scan_iter(self, match=None):
        # Redis escapes glob metacharacters with a backslash, fnmatch uses [c]
        pattern = None if match is None else re.sub(
            r"\\(.)", lambda m: f"[{m.group(1)}]" if m.group(1) in "*?[" else m.group(1), match
        )
        for key in list(self.data):
            if pattern is None or fnmatchcase(key, pattern):
                yield key

    async def ping(self):
        return True

    async def aclose(self):
        return None


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def aeronave_store(fake_redis):
    return AeronaveStore(fake_redis, "test")


@pytest.fixture
def aeronave_controller(aeronave_store):
    return AeronaveController(aeronave_store)


@pytest.fixture
def graphql_context(aeronave_store, aeronave_controller):
    return {
        "request": None,
        "aeronave_store": aeronave_store,
        "aeronave_controller": aeronave_controller,
    }
