"""Domain Value Objects."""

from apps.member.domain.value_objects.token_payload import TokenPayload

__all__ = ["TokenPayload"]
