"""Token exceptions."""

from apps.member.application.token.exceptions.auth import AuthenticationError

__all__ = ["AuthenticationError"]
