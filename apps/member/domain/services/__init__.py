"""Domain Services."""

from apps.member.domain.services.nickname import (
    ADJECTIVES,
    NICKNAME_PATTERN,
    NOUNS,
    generate_random_nickname,
)

__all__ = ["ADJECTIVES", "NOUNS", "NICKNAME_PATTERN", "generate_random_nickname"]
