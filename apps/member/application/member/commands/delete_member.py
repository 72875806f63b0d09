"""DeleteMember Command.

회원 탈퇴 Use Case입니다.

Architecture:
    - UseCase(지휘자): DeleteMemberInteractor
    - Services(연주자): UnlinkStrategyRegistry, TokenService
    - Ports(인프라): MemberGateway, ObjectStorage, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.member.domain.entities.member import anonymize
from apps.member.domain.exceptions.member import (
    MemberAlreadyDeletedError,
    MemberNotFoundError,
)

if TYPE_CHECKING:
    # Services (연주자)
    from apps.member.application.member.services import UnlinkStrategyRegistry
    from apps.member.application.token.services import TokenService

    # Ports (인프라)
    from apps.member.application.common.ports import TransactionManager
    from apps.member.application.member.ports import MemberGateway, ObjectStorage

logger = logging.getLogger(__name__)


class DeleteMemberInteractor:
    """회원 탈퇴 Interactor (지휘자).

    Workflow:
        1. 회원 조회 및 상태 확인
        2. 프로바이더 연결 해제 (UnlinkStrategyRegistry)
        3. 익명화 후 저장, 커밋
        4. 리프레시 토큰 폐기 및 프로필 이미지 삭제 (실패 무시)

    연결 해제가 실패하면 회원 상태는 변경되지 않습니다.
    연결 해제 성공 후 로컬 커밋이 실패하면 프로바이더 쪽만 해제된 상태가 남고,
    다음 로그인이 다시 연결합니다.
    """

    def __init__(
        self,
        # Services (연주자)
        unlink_strategies: "UnlinkStrategyRegistry",
        token_service: "TokenService",
        # Ports (인프라)
        member_gateway: "MemberGateway",
        object_storage: "ObjectStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        # Services
        self._unlink_strategies = unlink_strategies
        self._token_service = token_service
        # Ports
        self._member_gateway = member_gateway
        self._object_storage = object_storage
        self._transaction_manager = transaction_manager

    async def execute(self, member_id: UUID) -> None:
        """회원을 탈퇴 처리합니다.

        Args:
            member_id: 탈퇴할 회원 ID

        Raises:
            MemberNotFoundError: 회원 없음
            MemberAlreadyDeletedError: 이미 탈퇴한 회원
            MissingOAuthRefreshTokenError: Apple 리프레시 토큰 누락
            OAuthUnlinkError: 프로바이더 연결 해제 실패
        """
        async with self._transaction_manager.begin():
            member = await self._member_gateway.get_by_id(member_id)
            if member is None:
                raise MemberNotFoundError(member_id)
            if member.deleted:
                raise MemberAlreadyDeletedError(member_id)

            strategy = self._unlink_strategies.get(member.social_type)
            await strategy.unlink(member)

            # 저장 시 member 인스턴스에 익명화 값이 병합될 수 있음
            email = member.email
            image_url = member.image_url
            social_type = member.social_type
            await self._member_gateway.save(anonymize(member))

        logger.info(
            "Member deleted",
            extra={"member_id": str(member_id), "social_type": social_type.value},
        )

        # 커밋 이후 정리 작업
        await self._token_service.revoke(email)
        if image_url:
            try:
                await self._object_storage.delete(image_url)
            except Exception:
                logger.warning(
                    "Profile image cleanup failed",
                    extra={"member_id": str(member_id)},
                    exc_info=True,
                )
