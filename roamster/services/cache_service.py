"""Redis cache service for live weather snapshots."""

import json
import logging
from typing import Any

import redis.asyncio as redis

from roamster.config import settings

logger = logging.getLogger(__name__)

# TTLs in seconds
TTL_WEATHER = settings.weather_cache_ttl_seconds


class CacheService:
    """Redis-backed cache with typed TTLs. Every failure reads as a miss."""

    def __init__(self):
        self._redis: redis.Redis | None = None

    async def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                self._redis = None
                return None
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception:
            return None

    async def set(self, key: str, value: Any, ttl: int = TTL_WEATHER) -> bool:
        """Set a value in cache with TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception:
            return False

    # Typed helpers

    def weather_key(self, destination: str) -> str:
        return f"weather:{destination.strip().lower()}"

    async def get_weather(self, destination: str) -> dict | None:
        return await self.get(self.weather_key(destination))

    async def set_weather(self, destination: str, data: dict):
        await self.set(self.weather_key(destination), data, TTL_WEATHER)

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
