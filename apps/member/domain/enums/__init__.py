"""Domain Enums."""

from apps.member.domain.enums.role import Role
from apps.member.domain.enums.social_type import SocialType
from apps.member.domain.enums.token_type import TokenType

__all__ = ["Role", "SocialType", "TokenType"]
