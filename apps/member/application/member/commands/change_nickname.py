"""ChangeNickname Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.member.application.member.dto import MemberInfo
from apps.member.application.member.exceptions import NicknameConflictError
from apps.member.domain.entities.member import change_nickname
from apps.member.domain.exceptions.member import (
    MemberNotFoundError,
    NicknameAlreadyExistsError,
)

if TYPE_CHECKING:
    from apps.member.application.common.ports import TransactionManager
    from apps.member.application.member.ports import MemberGateway

logger = logging.getLogger(__name__)


class ChangeNicknameInteractor:
    """닉네임 변경 Interactor."""

    def __init__(
        self,
        member_gateway: "MemberGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._member_gateway = member_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, member_id: UUID, nickname: str) -> MemberInfo:
        """닉네임을 변경합니다.

        Raises:
            MemberNotFoundError: 회원 없음 또는 탈퇴 회원
            NicknameAlreadyExistsError: 다른 회원이 사용 중인 닉네임
        """
        async with self._transaction_manager.begin():
            member = await self._member_gateway.get_by_id(member_id)
            if member is None or member.deleted:
                raise MemberNotFoundError(member_id)

            if member.nickname == nickname:
                return MemberInfo.from_member(member)

            if await self._member_gateway.exists_by_nickname(nickname):
                raise NicknameAlreadyExistsError(nickname)

            try:
                saved = await self._member_gateway.save(change_nickname(member, nickname))
            except NicknameConflictError as e:
                raise NicknameAlreadyExistsError(nickname) from e

        logger.info("Nickname changed", extra={"member_id": str(member_id)})
        return MemberInfo.from_member(saved)
