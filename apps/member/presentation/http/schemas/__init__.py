"""HTTP Schemas."""

from apps.member.presentation.http.schemas.member import (
    AppleLoginRequest,
    ErrorBody,
    ErrorResponse,
    GoogleLoginRequest,
    KakaoLoginRequest,
    LoginResponse,
    MemberInfoResponse,
    NicknameChangeRequest,
    TokenResponse,
)

__all__ = [
    "KakaoLoginRequest",
    "AppleLoginRequest",
    "GoogleLoginRequest",
    "NicknameChangeRequest",
    "TokenResponse",
    "LoginResponse",
    "MemberInfoResponse",
    "ErrorBody",
    "ErrorResponse",
]
