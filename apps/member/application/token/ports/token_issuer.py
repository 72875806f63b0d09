"""TokenIssuer Port.

JWT 토큰 발급/검증을 위한 Gateway 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Protocol

from apps.member.domain.enums.token_type import TokenType
from apps.member.domain.value_objects.token_payload import TokenPayload


@dataclass(frozen=True, slots=True)
class TokenPair:
    """토큰 쌍."""

    access_token: str
    refresh_token: str
    access_jti: str
    refresh_jti: str
    access_expires_at: int
    refresh_expires_at: int


class TokenIssuer(Protocol):
    """토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue_pair(self, *, subject: str) -> TokenPair:
        """액세스/리프레시 토큰 쌍 발급.

        Args:
            subject: 토큰 subject (회원 이메일)
        """
        ...

    def decode(self, token: str) -> TokenPayload:
        """토큰 디코딩 및 검증.

        Raises:
            InvalidTokenError: 형식 오류, 서명 불일치
            TokenExpiredError: 만료된 토큰
        """
        ...

    def ensure_type(self, payload: TokenPayload, expected_type: TokenType) -> None:
        """토큰 타입 검증.

        Raises:
            TokenTypeMismatchError: 타입 불일치
        """
        ...
