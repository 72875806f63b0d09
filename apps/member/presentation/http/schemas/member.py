"""Member HTTP Schemas.

응답 필드는 camelCase로 직렬화합니다 (모바일 클라이언트 호환).
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.member.application.member.dto import LoginResult, MemberInfo
from apps.member.domain.enums.role import Role
from apps.member.domain.enums.social_type import SocialType


class CamelModel(BaseModel):
    """camelCase alias 기본 모델."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KakaoLoginRequest(CamelModel):
    """Kakao 로그인 요청 (헤더 대신 본문으로 보낼 때)."""

    access_token: str | None = Field(None, description="Kakao 액세스 토큰")


class AppleLoginRequest(CamelModel):
    """Apple 로그인 요청."""

    code: str = Field(..., min_length=1, description="Apple 인가 코드")


class GoogleLoginRequest(CamelModel):
    """Google 로그인 요청."""

    code: str = Field(..., min_length=1, description="Google 인가 코드")


class NicknameChangeRequest(CamelModel):
    """닉네임 변경 요청."""

    nickname: str = Field(..., min_length=2, max_length=20, description="새 닉네임")


class TokenResponse(CamelModel):
    """토큰 쌍."""

    access_token: str
    refresh_token: str


class LoginResponse(CamelModel):
    """로그인 응답."""

    tokens: TokenResponse
    role: Role
    nickname: str
    profile_image: str | None = None
    social_id: str
    is_new_member: bool = False

    @classmethod
    def from_result(cls, result: LoginResult) -> "LoginResponse":
        return cls(
            tokens=TokenResponse(
                access_token=result.access_token,
                refresh_token=result.refresh_token,
            ),
            role=result.role,
            nickname=result.nickname,
            profile_image=result.profile_image,
            social_id=result.social_id,
            is_new_member=result.is_new_member,
        )


class MemberInfoResponse(CamelModel):
    """회원 정보 응답."""

    id: UUID
    nickname: str
    email: str
    profile_image: str | None = None
    role: Role
    social_type: SocialType

    @classmethod
    def from_info(cls, info: MemberInfo) -> "MemberInfoResponse":
        return cls(
            id=info.member_id,
            nickname=info.nickname,
            email=info.email,
            profile_image=info.profile_image,
            role=info.role,
            social_type=info.social_type,
        )


class ErrorBody(BaseModel):
    """에러 본문."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """에러 응답."""

    error: ErrorBody
