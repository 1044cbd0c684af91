"""Interface for Redis cache operations."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICache(Protocol):
    """Protocol for cache operations.

    Implementations are safe for concurrent use.
    """

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store value under key, expiring after ttl seconds (ttl <= 0: never)."""
        ...

    async def get(self, key: str) -> str:
        """Get value by key; raises RedisKeyNotFoundError when absent."""
        ...

    async def delete(self, *keys: str) -> None:
        """Delete zero or more keys."""
        ...

    async def delete_wildcard(self, pattern: str) -> None:
        """Delete every key matching a glob pattern.

        Patterns examples:
        - "prefix:*"
        - "*:suffix"
        - "*" (deletes all keys)
        """
        ...

    async def ping(self) -> None:
        """Check Redis connectivity."""
        ...

    def hash(self, key: str) -> str:
        """Hash a string key."""
        ...

    def hash_object(self, obj: Any) -> str:
        """Hash the canonical JSON form of an object."""
        ...

    async def close(self) -> None:
        """Close Redis connection."""
        ...


__all__ = ["ICache"]
