"""Security Infrastructure."""

from apps.member.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["JwtTokenService"]
