"""OAuth DTOs."""

from apps.member.application.oauth.dto.oauth import ExternalIdentity

__all__ = ["ExternalIdentity"]
