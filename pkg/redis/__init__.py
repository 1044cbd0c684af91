from .type import (
    RedisConfig,
    RedisCacheError,
    RedisConnectionError,
    RedisKeyNotFoundError,
)
from .interface import ICache
from .redis import RedisCache
from .digest import hash_key, hash_object

__all__ = [
    # Interfaces
    "ICache",
    # Implementations
    "RedisCache",
    # Hashing
    "hash_key",
    "hash_object",
    # Types
    "RedisConfig",
    # Errors
    "RedisCacheError",
    "RedisConnectionError",
    "RedisKeyNotFoundError",
]
