"""Token Domain Exceptions."""

from apps.member.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """유효하지 않은 토큰 (형식 오류, 서명 불일치 등)."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(DomainError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class TokenTypeMismatchError(DomainError):
    """토큰 타입 불일치."""

    def __init__(self, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} token, got {actual}")


class TokenRevokedError(DomainError):
    """폐기되었거나 교체된 토큰."""

    def __init__(self, reason: str = "Token has been revoked") -> None:
        super().__init__(reason)
