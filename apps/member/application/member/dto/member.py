"""Member DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from apps.member.domain.entities.member import Member
from apps.member.domain.enums.role import Role
from apps.member.domain.enums.social_type import SocialType


@dataclass(frozen=True, slots=True)
class LoginRequest:
    """소셜 로그인 요청.

    credential: Kakao는 액세스 토큰, Apple/Google은 인가 코드
    """

    provider: str
    credential: str | None


@dataclass(frozen=True, slots=True)
class LoginResult:
    """소셜 로그인 결과."""

    member_id: UUID
    access_token: str
    refresh_token: str
    role: Role
    nickname: str
    profile_image: str | None
    social_id: str
    is_new_member: bool


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """회원 정보 조회 결과."""

    member_id: UUID
    nickname: str
    email: str
    profile_image: str | None
    role: Role
    social_type: SocialType

    @classmethod
    def from_member(cls, member: Member) -> "MemberInfo":
        return cls(
            member_id=member.id,
            nickname=member.nickname,
            email=member.email,
            profile_image=member.image_url,
            role=member.role,
            social_type=member.social_type,
        )
