"""UpdateProfileImage Command.

프로필 이미지 교체 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.member.application.member.dto import MemberInfo
from apps.member.domain.entities.member import change_image_url
from apps.member.domain.exceptions.member import MemberNotFoundError

if TYPE_CHECKING:
    from apps.member.application.common.ports import TransactionManager
    from apps.member.application.member.ports import (
        MemberGateway,
        ObjectStorage,
        UploadFile,
    )

logger = logging.getLogger(__name__)


class UpdateProfileImageInteractor:
    """프로필 이미지 교체 Interactor.

    Workflow:
        1. 회원 조회
        2. 새 이미지 업로드 (회원 이메일을 키 prefix로 사용)
        3. URL 저장, 커밋
        4. 기존 이미지 오브젝트 삭제 (실패 무시)

    빈 파일이면 image_url을 비우고 기존 이미지만 지웁니다.
    업로드나 저장이 실패하면 기존 이미지는 그대로 남습니다.

    Raises:
        MemberNotFoundError: 회원 없음 또는 탈퇴 회원
        StorageError: 업로드 실패
    """

    def __init__(
        self,
        member_gateway: "MemberGateway",
        object_storage: "ObjectStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._member_gateway = member_gateway
        self._object_storage = object_storage
        self._transaction_manager = transaction_manager

    async def execute(self, member_id: UUID, file: "UploadFile") -> MemberInfo:
        async with self._transaction_manager.begin():
            member = await self._member_gateway.get_by_id(member_id)
            if member is None or member.deleted:
                raise MemberNotFoundError(member_id)

            previous_url = member.image_url
            urls = await self._object_storage.upload(member.email, [file])
            image_url = urls[0] if urls else None

            saved = await self._member_gateway.save(change_image_url(member, image_url))

        logger.info(
            "Profile image updated",
            extra={"member_id": str(member_id), "has_image": image_url is not None},
        )

        # 커밋 이후 기존 오브젝트 정리
        if previous_url and previous_url != image_url:
            try:
                await self._object_storage.delete(previous_url)
            except Exception:
                logger.warning(
                    "Previous profile image cleanup failed",
                    extra={"member_id": str(member_id)},
                    exc_info=True,
                )
        return MemberInfo.from_member(saved)
