"""RefreshTokenStore Port.

subject별 '현재' 리프레시 토큰을 관리합니다.
"""

from typing import Protocol


class RefreshTokenStore(Protocol):
    """리프레시 토큰 저장소 인터페이스.

    구현체:
        - RedisRefreshTokenStore (infrastructure/persistence_redis/)
    """

    async def save(self, subject: str, jti: str, expires_at: int) -> None:
        """subject의 현재 리프레시 토큰 JTI 저장 (기존 값 대체)."""
        ...

    async def rotate(
        self,
        subject: str,
        *,
        old_jti: str,
        new_jti: str,
        expires_at: int,
    ) -> bool:
        """현재 JTI가 old_jti일 때만 new_jti로 원자적으로 교체.

        Returns:
            교체에 성공하면 True, 이미 교체/폐기된 토큰이면 False
        """
        ...

    async def delete(self, subject: str) -> None:
        """subject의 리프레시 토큰 폐기."""
        ...
