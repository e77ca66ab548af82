import json
import logging
from typing import Optional

from redis import Redis, RedisError

from .config import REDIS_URL, CACHE_TTL_SECONDS, SEARCH_CACHE_ENABLED

logger = logging.getLogger(__name__)

KEY_PREFIX = "providers:search:"


def search_key(lat: float, lng: float, radius: float, specialty: Optional[str], insurance: Optional[str]) -> str:
    # lowercased only: matching is case-insensitive but whitespace-sensitive
    spec = (specialty or "").lower()
    return f"{KEY_PREFIX}{lat:.5f}:{lng:.5f}:{radius:.2f}:{spec}:{insurance or ''}"


class SearchCache:
    """Best-effort JSON cache for search responses; redis outages are logged, never raised."""

    def __init__(self, client: Redis, ttl: int = CACHE_TTL_SECONDS):
        self.client = client
        self.ttl = ttl

    def get(self, key: str) -> Optional[dict]:
        try:
            cached = self.client.get(key)
        except RedisError as e:
            logger.warning("search cache read failed: %s", e)
            return None
        return json.loads(cached) if cached else None

    def set(self, key: str, value: dict) -> None:
        try:
            self.client.setex(key, self.ttl, json.dumps(value))
        except RedisError as e:
            logger.warning("search cache write failed: %s", e)

    def invalidate(self) -> None:
        try:
            keys = list(self.client.scan_iter(match=KEY_PREFIX + "*"))
            if keys:
                self.client.delete(*keys)
        except RedisError as e:
            logger.warning("search cache invalidation failed: %s", e)


_cache: Optional[SearchCache] = None


def get_cache() -> Optional[SearchCache]:
    global _cache
    if not SEARCH_CACHE_ENABLED:
        return None
    if _cache is None:
        client = Redis.from_url(REDIS_URL, decode_responses=True, socket_connect_timeout=1, socket_timeout=1)
        _cache = SearchCache(client)
    return _cache
