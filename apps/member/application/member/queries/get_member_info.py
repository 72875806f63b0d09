"""GetMemberInfo Query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.member.application.member.dto import MemberInfo
from apps.member.domain.exceptions.member import MemberNotFoundError

if TYPE_CHECKING:
    from apps.member.application.member.ports import MemberGateway


class GetMemberInfoQuery:
    """회원 정보 조회 Query Service."""

    def __init__(self, member_gateway: "MemberGateway") -> None:
        self._member_gateway = member_gateway

    async def execute(self, member_id: UUID) -> MemberInfo:
        """회원 정보를 조회합니다.

        Raises:
            MemberNotFoundError: 회원 없음 또는 탈퇴 회원
        """
        member = await self._member_gateway.get_by_id(member_id)
        if member is None or member.deleted:
            raise MemberNotFoundError(member_id)
        return MemberInfo.from_member(member)
