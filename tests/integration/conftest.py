"""Pytest configuration for integration tests.

These tests need a reachable Redis server. They are skipped when none
answers at REDIS_TEST_HOST:REDIS_TEST_PORT (default localhost:6379).
"""

import os
import uuid

import pytest
import pytest_asyncio

from pkg.redis.redis import RedisCache
from pkg.redis.type import RedisConfig, RedisConnectionError


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring external services"
    )


@pytest.fixture(scope="session")
def redis_test_config():
    """Provide Redis connection settings for tests."""
    return RedisConfig(
        host=os.environ.get("REDIS_TEST_HOST", "localhost"),
        port=int(os.environ.get("REDIS_TEST_PORT", "6379")),
        db=int(os.environ.get("REDIS_TEST_DB", "15")),
        username=os.environ.get("REDIS_TEST_USERNAME") or None,
        password=os.environ.get("REDIS_TEST_PASSWORD") or None,
    )


@pytest_asyncio.fixture
async def cache(redis_test_config):
    """Connected RedisCache; skips the test when Redis is unreachable."""
    try:
        cache = await RedisCache.create(redis_test_config)
    except RedisConnectionError as e:
        pytest.skip(f"Redis not available: {e}")
    yield cache
    await cache.close()


@pytest_asyncio.fixture
async def key_prefix(cache):
    """Unique key namespace per test, wiped on teardown."""
    prefix = f"rediscache-test:{uuid.uuid4().hex}:"
    yield prefix
    await cache.delete_wildcard(f"{prefix}*")
