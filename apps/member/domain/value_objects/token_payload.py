"""TokenPayload Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.member.domain.enums.token_type import TokenType


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """디코딩된 JWT 페이로드.

    subject는 회원 이메일입니다.
    """

    subject: str
    jti: str
    token_type: TokenType
    exp: int
    iat: int
