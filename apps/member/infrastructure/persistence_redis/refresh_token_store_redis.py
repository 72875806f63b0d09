"""Redis Refresh Token Store.

RefreshTokenStore 포트의 구현체입니다.
subject(회원 이메일)마다 현재 리프레시 토큰 JTI 하나를 저장합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import redis.asyncio as aioredis

REFRESH_TOKEN_KEY_PREFIX = "member:refresh:"

# 현재 JTI가 기대값과 같을 때만 교체 (compare-and-set)
ROTATE_SCRIPT = """
local key = KEYS[1]
local old_jti = ARGV[1]
local new_jti = ARGV[2]
local ttl = tonumber(ARGV[3])

if redis.call('GET', key) ~= old_jti then
    return 0
end

redis.call('SETEX', key, ttl, new_jti)
return 1
"""


class RedisRefreshTokenStore:
    """Redis 기반 리프레시 토큰 저장소.

    RefreshTokenStore 구현체.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis
        self._rotate_script: Any = None

    @staticmethod
    def _key(subject: str) -> str:
        return f"{REFRESH_TOKEN_KEY_PREFIX}{subject}"

    @staticmethod
    def _ttl(expires_at: int) -> int:
        return max(expires_at - int(time.time()), 1)

    async def save(self, subject: str, jti: str, expires_at: int) -> None:
        """현재 리프레시 토큰 저장 (기존 값 대체)."""
        await self._redis.setex(self._key(subject), self._ttl(expires_at), jti)

    async def rotate(
        self,
        subject: str,
        *,
        old_jti: str,
        new_jti: str,
        expires_at: int,
    ) -> bool:
        """현재 JTI가 old_jti일 때만 new_jti로 교체."""
        if self._rotate_script is None:
            self._rotate_script = self._redis.register_script(ROTATE_SCRIPT)

        result = await self._rotate_script(
            keys=[self._key(subject)],
            args=[old_jti, new_jti, self._ttl(expires_at)],
        )
        return int(result) == 1

    async def delete(self, subject: str) -> None:
        """리프레시 토큰 폐기."""
        await self._redis.delete(self._key(subject))
