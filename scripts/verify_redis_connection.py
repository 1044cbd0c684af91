"""Verify Redis connectivity and a set/get/delete round-trip for rediscache."""
import asyncio
import sys
import uuid

from config.config import load_config
from pkg.logger.logger import Logger, LoggerConfig
from pkg.redis.redis import RedisCache
from pkg.redis.type import (
    RedisCacheError,
    RedisConfig as RedisPkgConfig,
    RedisKeyNotFoundError,
)

SMOKE_PREFIX = "rediscache:verify"
SMOKE_TTL = 30


async def verify() -> int:
    cfg = load_config()
    logger = Logger(LoggerConfig(level=cfg.logging.level, colorize=cfg.logging.colorize))

    run_id = uuid.uuid4().hex
    with logger.trace_context(trace_id=run_id[:16]):
        logger.info(f"Connecting to Redis at {cfg.redis.host}:{cfg.redis.port}")
        try:
            cache = await RedisCache.create(
                RedisPkgConfig(
                    host=cfg.redis.host,
                    port=cfg.redis.port,
                    db=cfg.redis.db,
                    username=cfg.redis.username,
                    password=cfg.redis.password,
                    ssl=cfg.redis.ssl,
                    max_connections=cfg.redis.max_connections,
                    socket_timeout=cfg.redis.socket_timeout,
                )
            )
        except RedisCacheError as e:
            logger.error(f"Connection failed: {e}")
            return 1

        key = f"{SMOKE_PREFIX}:{cache.hash(run_id)}"
        try:
            await cache.ping()
            logger.info("PING ok")

            await cache.set(key, run_id, SMOKE_TTL)
            if await cache.get(key) != run_id:
                logger.error(f"Round-trip mismatch for {key}")
                return 1
            logger.info("SET/GET round-trip ok")

            await cache.delete_wildcard(f"{SMOKE_PREFIX}:*")
            try:
                await cache.get(key)
            except RedisKeyNotFoundError:
                logger.info("Wildcard delete ok")
            else:
                logger.error(f"{key} survived wildcard delete")
                return 1
        except RedisCacheError as e:
            logger.error(f"Verification failed: {e}")
            return 1
        finally:
            await cache.close()

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(verify()))
