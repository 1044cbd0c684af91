from __future__ import annotations

from typing import Any, Optional

import redis.asyncio as aioredis
from loguru import logger
from redis.asyncio import ConnectionPool
from redis.exceptions import RedisError

from .constant import *
from .digest import hash_key, hash_object
from .interface import ICache
from .type import (
    RedisConfig,
    RedisConnectionError,
    RedisKeyNotFoundError,
)


def _build_client(config: RedisConfig, with_credentials: bool) -> aioredis.Redis:
    """Create a Redis client backed by its own connection pool.

    Args:
        config: RedisConfig instance
        with_credentials: Pass username/password from config when True

    Returns:
        Unconnected redis.asyncio.Redis client
    """
    pool_kwargs = {
        "host": config.host,
        "port": config.port,
        "db": config.db,
        "encoding": config.encoding,
        "decode_responses": config.decode_responses,
        "max_connections": config.max_connections,
        "socket_timeout": config.socket_timeout,
        "socket_connect_timeout": config.socket_connect_timeout,
        "socket_keepalive": config.socket_keepalive,
        "health_check_interval": config.health_check_interval,
    }

    if with_credentials:
        pool_kwargs["username"] = config.username
        pool_kwargs["password"] = config.password

    if config.ssl:
        pool_kwargs["connection_class"] = aioredis.SSLConnection
        pool_kwargs["ssl_cert_reqs"] = "required"

    return aioredis.Redis(connection_pool=ConnectionPool(**pool_kwargs))


class RedisCache(ICache):
    """Thin async facade over a single Redis client.

    Values are plain strings; expiration, eviction and pattern matching are
    left to the server. Every failure surfaces as RedisConnectionError except
    a missing key on get, which raises RedisKeyNotFoundError. Nothing is
    retried here.

    Example:
        >>> cache = await RedisCache.create(RedisConfig(host="localhost"))
        >>> await cache.set("user:123", "John", ttl=3600)
        >>> await cache.get("user:123")
        'John'
        >>> await cache.delete_wildcard("user:*")
        >>> await cache.close()
    """

    def __init__(self, client: aioredis.Redis, config: Optional[RedisConfig] = None):
        """Wrap an existing Redis client without probing it.

        Use RedisCache.create to build a client from config and verify it.

        Args:
            client: redis.asyncio.Redis instance owned by this cache
            config: RedisConfig the client was built from (optional)
        """
        self.client = client
        self.config = config or RedisConfig()
        self._closed = False

    @classmethod
    async def create(cls, config: RedisConfig) -> "RedisCache":
        """Connect to Redis and return a ready cache.

        Pings without credentials first. If that fails and the config holds
        a username or password, a second client is built with them and
        pinged once more.

        Args:
            config: RedisConfig instance

        Returns:
            RedisCache bound to a client that answered PING

        Raises:
            RedisConnectionError: If no attempt succeeds
        """
        client = _build_client(config, with_credentials=False)
        try:
            await client.ping()
            logger.info(f"Redis client connected to {config.address}")
            return cls(client, config)
        except RedisError as e:
            await client.aclose(close_connection_pool=True)
            if not config.has_credentials:
                logger.error(ERROR_CONNECT_FAILED.format(address=config.address, error=e))
                raise RedisConnectionError(
                    ERROR_CONNECT_FAILED.format(address=config.address, error=e)
                ) from e
            logger.warning(
                f"Unauthenticated connection to {config.address} failed: {e}; "
                "retrying with credentials"
            )

        client = _build_client(config, with_credentials=True)
        try:
            await client.ping()
        except RedisError as e:
            await client.aclose(close_connection_pool=True)
            logger.error(ERROR_CONNECT_FAILED.format(address=config.address, error=e))
            raise RedisConnectionError(
                ERROR_CONNECT_FAILED.format(address=config.address, error=e)
            ) from e

        logger.info(f"Redis client connected to {config.address} with credentials")
        return cls(client, config)

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store value under key.

        Args:
            key: Cache key
            value: String value
            ttl: Time-to-live in seconds; ttl <= 0 stores without expiration

        Raises:
            RedisConnectionError: On transport or server failure
        """
        try:
            if ttl > NO_EXPIRATION:
                await self.client.set(key, value, ex=ttl)
            else:
                await self.client.set(key, value)
        except RedisError as e:
            logger.error(ERROR_SET_FAILED.format(key=key, error=e))
            raise RedisConnectionError(ERROR_SET_FAILED.format(key=key, error=e)) from e

    async def get(self, key: str) -> str:
        """Get value by key.

        Args:
            key: Cache key

        Returns:
            The stored string, unchanged

        Raises:
            RedisKeyNotFoundError: If key is absent or expired
            RedisConnectionError: On transport or server failure
        """
        try:
            value = await self.client.get(key)
        except RedisError as e:
            logger.error(ERROR_GET_FAILED.format(key=key, error=e))
            raise RedisConnectionError(ERROR_GET_FAILED.format(key=key, error=e)) from e

        if value is None:
            raise RedisKeyNotFoundError(key)
        if isinstance(value, bytes):
            return value.decode(self.config.encoding)
        return value

    async def delete(self, *keys: str) -> None:
        """Delete keys. Missing keys are ignored; no keys means no round-trip.

        Raises:
            RedisConnectionError: On transport or server failure
        """
        if not keys:
            return

        try:
            await self.client.delete(*keys)
        except RedisError as e:
            logger.error(ERROR_DELETE_FAILED.format(keys=list(keys), error=e))
            raise RedisConnectionError(
                ERROR_DELETE_FAILED.format(keys=list(keys), error=e)
            ) from e

    async def delete_wildcard(self, pattern: str) -> None:
        """Delete all keys that match the wildcard pattern.

        Patterns examples:
        - "prefix:*"
        - "*:suffix"
        - "*" (deletes all keys)

        Keys are listed with KEYS and then deleted one by one. This is not
        atomic: a key written after the listing may survive, and deletes that
        already ran stay applied if a later one fails.

        Raises:
            RedisConnectionError: On transport or server failure
        """
        try:
            keys = await self.client.keys(pattern)
        except RedisError as e:
            logger.error(ERROR_KEYS_FAILED.format(pattern=pattern, error=e))
            raise RedisConnectionError(
                ERROR_KEYS_FAILED.format(pattern=pattern, error=e)
            ) from e

        for key in keys:
            await self.delete(key)

        logger.debug(f"Deleted {len(keys)} keys matching '{pattern}'")

    async def ping(self) -> None:
        """Round-trip liveness probe.

        Raises:
            RedisConnectionError: If Redis is unreachable
        """
        try:
            await self.client.ping()
        except RedisError as e:
            logger.error(ERROR_PING_FAILED.format(error=e))
            raise RedisConnectionError(ERROR_PING_FAILED.format(error=e)) from e

    def hash(self, key: str) -> str:
        """Hash a key; see pkg.redis.digest.hash_key."""
        return hash_key(key)

    def hash_object(self, obj: Any) -> str:
        """Hash an object; see pkg.redis.digest.hash_object."""
        return hash_object(obj)

    async def close(self) -> None:
        """Close Redis client and its connection pool."""
        if self._closed:
            return
        self._closed = True
        await self.client.aclose(close_connection_pool=True)
        logger.info("Redis connection closed")


__all__ = [
    "ICache",
    "RedisCache",
]
