"""Domain Exceptions."""

from apps.member.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenRevokedError,
    TokenTypeMismatchError,
)
from apps.member.domain.exceptions.base import DomainError
from apps.member.domain.exceptions.member import (
    MemberAlreadyDeletedError,
    MemberNotFoundError,
    NicknameAlreadyExistsError,
)

__all__ = [
    "DomainError",
    "MemberNotFoundError",
    "MemberAlreadyDeletedError",
    "NicknameAlreadyExistsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenRevokedError",
    "TokenTypeMismatchError",
]
