"""Token Services."""

from apps.member.application.token.services.token_service import TokenService

__all__ = ["TokenService"]
