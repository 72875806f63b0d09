"""Token DTOs."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    """로그아웃 요청."""

    access_token: str


@dataclass(frozen=True, slots=True)
class ReissueTokensRequest:
    """토큰 재발급 요청."""

    refresh_token: str


@dataclass(frozen=True, slots=True)
class ReissueTokensResponse:
    """토큰 재발급 응답."""

    member_id: UUID
    access_token: str
    refresh_token: str
    access_expires_at: int
    refresh_expires_at: int
