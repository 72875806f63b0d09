"""MemberGateway Port.

회원 저장소 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.member.domain.entities.member import Member
from apps.member.domain.enums.social_type import SocialType


class MemberGateway(Protocol):
    """회원 저장소 Gateway.

    조회 결과가 없으면 None을 반환하고, 저장소 오류는 GatewayError로 구분합니다.

    구현체:
        - SqlaMemberGateway (infrastructure/persistence_postgres/)
    """

    async def get_by_id(self, member_id: UUID) -> Member | None:
        """ID로 회원 조회."""
        ...

    async def get_by_social_id(self, social_id: str, social_type: SocialType) -> Member | None:
        """프로바이더 계정으로 회원 조회 (탈퇴 회원 포함)."""
        ...

    async def get_by_email(self, email: str) -> Member | None:
        """이메일로 회원 조회."""
        ...

    async def exists_by_nickname(self, nickname: str) -> bool:
        """닉네임 사용 여부."""
        ...

    async def save(self, member: Member) -> Member:
        """회원 저장 (upsert).

        Returns:
            저장된 회원

        Raises:
            NicknameConflictError: 닉네임 유니크 제약 위반
            GatewayError: 그 밖의 저장 실패
        """
        ...
