"""Member Domain Exceptions."""

from __future__ import annotations

from uuid import UUID

from apps.member.domain.exceptions.base import DomainError


class MemberNotFoundError(DomainError):
    """회원을 찾을 수 없음."""

    def __init__(self, member_id: UUID | str | None = None) -> None:
        self.member_id = member_id
        if member_id is None:
            super().__init__("Member not found")
        else:
            super().__init__(f"Member not found: {member_id}")


class MemberAlreadyDeletedError(DomainError):
    """이미 탈퇴 처리된 회원."""

    def __init__(self, member_id: UUID | str) -> None:
        self.member_id = member_id
        super().__init__("Member is already deleted")


class NicknameAlreadyExistsError(DomainError):
    """이미 사용 중인 닉네임."""

    def __init__(self, nickname: str) -> None:
        self.nickname = nickname
        super().__init__(f"Nickname already in use: {nickname}")
