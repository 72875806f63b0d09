"""Redis persistence."""

from apps.member.infrastructure.persistence_redis.client import get_token_redis
from apps.member.infrastructure.persistence_redis.refresh_token_store_redis import (
    RedisRefreshTokenStore,
)

__all__ = ["get_token_redis", "RedisRefreshTokenStore"]
