"""TokenService - 세션 토큰 발급, 검증, 재발급 서비스.

"연주자" 역할: JWT 토큰 쌍 발급과 subject별 현재 리프레시 토큰 관리를 담당합니다.
UseCase(지휘자)가 이 서비스를 호출하여 토큰 관련 작업을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.member.domain.enums.token_type import TokenType
from apps.member.domain.exceptions.auth import TokenRevokedError

if TYPE_CHECKING:
    from apps.member.application.token.ports import (
        RefreshTokenStore,
        TokenIssuer,
        TokenPair,
    )
    from apps.member.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)


class TokenService:
    """세션 토큰 서비스.

    subject는 회원 이메일입니다. subject마다 '현재' 리프레시 토큰은 하나이며,
    재발급 시 원자적으로 교체되어 이전 리프레시 토큰은 다시 쓸 수 없습니다.

    Collaborators:
        - TokenIssuer: JWT 발급/검증
        - RefreshTokenStore: 현재 리프레시 토큰 JTI 저장/교체
    """

    def __init__(
        self,
        issuer: "TokenIssuer",
        refresh_token_store: "RefreshTokenStore",
    ) -> None:
        self._issuer = issuer
        self._refresh_token_store = refresh_token_store

    async def issue(self, subject: str) -> "TokenPair":
        """토큰 쌍을 발급하고 리프레시 토큰을 현재 토큰으로 기록합니다.

        Args:
            subject: 회원 이메일

        Returns:
            TokenPair: 발급된 토큰 쌍
        """
        token_pair = self._issuer.issue_pair(subject=subject)
        await self._refresh_token_store.save(
            subject,
            token_pair.refresh_jti,
            token_pair.refresh_expires_at,
        )
        logger.info(
            "Token pair issued",
            extra={
                "access_jti": token_pair.access_jti,
                "refresh_jti": token_pair.refresh_jti,
            },
        )
        return token_pair

    def decode_and_validate(
        self,
        token: str,
        expected_type: TokenType | None = None,
    ) -> "TokenPayload":
        """토큰을 디코딩하고 검증합니다.

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            TokenTypeMismatchError: 타입 불일치
        """
        payload = self._issuer.decode(token)

        if expected_type is not None:
            self._issuer.ensure_type(payload, expected_type)

        return payload

    def validate(self, access_token: str) -> str:
        """액세스 토큰을 검증하고 subject를 반환합니다.

        저장소를 조회하지 않습니다. 폐기는 리프레시 토큰에만 적용됩니다.
        """
        payload = self.decode_and_validate(access_token, expected_type=TokenType.ACCESS)
        return payload.subject

    async def reissue(self, refresh_token: str) -> tuple[str, "TokenPair"]:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        Args:
            refresh_token: 현재 리프레시 토큰

        Returns:
            (subject, 새 토큰 쌍)

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            TokenTypeMismatchError: 액세스 토큰을 보낸 경우
            TokenRevokedError: 이미 교체되었거나 폐기된 토큰
        """
        payload = self.decode_and_validate(refresh_token, expected_type=TokenType.REFRESH)

        token_pair = self._issuer.issue_pair(subject=payload.subject)
        rotated = await self._refresh_token_store.rotate(
            payload.subject,
            old_jti=payload.jti,
            new_jti=token_pair.refresh_jti,
            expires_at=token_pair.refresh_expires_at,
        )
        if not rotated:
            logger.warning(
                "Stale refresh token presented",
                extra={"refresh_jti": payload.jti},
            )
            raise TokenRevokedError("Refresh token has been superseded")

        logger.info(
            "Refresh token rotated",
            extra={"old_jti": payload.jti, "new_jti": token_pair.refresh_jti},
        )
        return payload.subject, token_pair

    async def revoke(self, subject: str) -> None:
        """subject의 현재 리프레시 토큰을 폐기합니다."""
        await self._refresh_token_store.delete(subject)
        logger.info("Refresh token revoked")
