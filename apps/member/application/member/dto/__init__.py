"""Member DTOs."""

from apps.member.application.member.dto.member import (
    LoginRequest,
    LoginResult,
    MemberInfo,
)

__all__ = ["LoginRequest", "LoginResult", "MemberInfo"]
