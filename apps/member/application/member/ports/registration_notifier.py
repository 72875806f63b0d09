"""RegistrationNotifier Port."""

from typing import Protocol
from uuid import UUID


class RegistrationNotifier(Protocol):
    """신규 가입 알림 (팀 채팅 웹훅 등).

    호출 측에서 실패를 무시하는 fire-and-forget 용도입니다.
    """

    async def notify_new_member(self, member_id: UUID) -> None:
        ...
