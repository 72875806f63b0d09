"""MemberReconciliationService - 외부 로그인과 로컬 회원 매핑.

"연주자" 역할: ExternalIdentity 하나를 정확히 하나의 Member로 매핑합니다.
기존 회원 재사용, 탈퇴 회원 복구, 신규 회원 생성 중 하나를 수행합니다.
트랜잭션 경계와 가입 알림은 UseCase(지휘자)가 담당합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from apps.member.application.member.exceptions import NicknameConflictError
from apps.member.application.oauth.exceptions import MissingProviderUserIdError
from apps.member.domain.entities.member import (
    Member,
    restore,
    sync_oauth_credentials,
)
from apps.member.domain.enums.social_type import SocialType
from apps.member.domain.services.nickname import generate_random_nickname

if TYPE_CHECKING:
    from apps.member.application.member.ports import MemberGateway
    from apps.member.application.oauth.dto import ExternalIdentity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """매핑 결과."""

    member: Member
    is_new: bool = False
    restored: bool = False


class MemberReconciliationService:
    """회원 매핑 서비스.

    Responsibilities:
        - (social_id, social_type)으로 기존 회원 조회
        - 탈퇴 회원 복구
        - Apple/Google 활성 회원의 이메일/리프레시 토큰 갱신
        - 중복 없는 랜덤 닉네임으로 신규 회원 생성

    Collaborators:
        - MemberGateway: 회원 조회/저장
    """

    def __init__(
        self,
        member_gateway: "MemberGateway",
        nickname_generator: Callable[[], str] = generate_random_nickname,
    ) -> None:
        self._member_gateway = member_gateway
        self._nickname_generator = nickname_generator

    async def resolve_or_create(
        self,
        identity: "ExternalIdentity",
        social_type: SocialType,
    ) -> ReconciliationResult:
        """외부 로그인 정보를 로컬 회원으로 매핑합니다.

        Args:
            identity: 프로바이더에서 받은 정규화된 사용자 정보
            social_type: 로그인한 프로바이더

        Returns:
            ReconciliationResult: 회원 및 신규/복구 여부

        Raises:
            MissingProviderUserIdError: 프로바이더 사용자 ID 누락
        """
        if not identity.provider_user_id:
            raise MissingProviderUserIdError(social_type.provider_name)

        existing = await self._member_gateway.get_by_social_id(
            identity.provider_user_id,
            social_type,
        )

        if existing is None:
            return await self._register(identity, social_type)

        if existing.deleted:
            return await self._restore(existing, identity, social_type)

        # Kakao는 기존 회원을 그대로 반환
        if social_type is SocialType.KAKAO:
            return ReconciliationResult(member=existing)

        synced = sync_oauth_credentials(
            existing,
            email=identity.email,
            oauth_refresh_token=identity.refresh_token,
        )
        if synced is existing:
            return ReconciliationResult(member=existing)

        saved = await self._member_gateway.save(synced)
        return ReconciliationResult(member=saved)

    async def generate_unique_random_nickname(self) -> str:
        """저장소에 없는 닉네임이 나올 때까지 반복 생성합니다.

        조합 공간(160,000)에 비해 회원 수가 충분히 작으면 반복은 거의 일어나지 않습니다.
        """
        while True:
            nickname = self._nickname_generator()
            if not await self._member_gateway.exists_by_nickname(nickname):
                return nickname
            logger.debug("Nickname collision, retrying", extra={"nickname": nickname})

    async def _restore(
        self,
        member: Member,
        identity: "ExternalIdentity",
        social_type: SocialType,
    ) -> ReconciliationResult:
        # TODO: Kakao 복구 시 닉네임/프로필 이미지 재동기화 여부 결정 후 반영
        if social_type is SocialType.KAKAO:
            restored = restore(member)
        else:
            restored = restore(
                member,
                email=identity.email,
                oauth_refresh_token=identity.refresh_token,
            )

        saved = await self._member_gateway.save(restored)
        logger.info(
            "Deleted member restored",
            extra={"member_id": str(saved.id), "social_type": social_type.value},
        )
        return ReconciliationResult(member=saved, restored=True)

    async def _register(
        self,
        identity: "ExternalIdentity",
        social_type: SocialType,
    ) -> ReconciliationResult:
        # Kakao 가입은 항상 대체 이메일 사용
        email = None if social_type is SocialType.KAKAO else identity.email

        while True:
            nickname = await self.generate_unique_random_nickname()
            member = Member.register(
                social_id=identity.provider_user_id,
                social_type=social_type,
                nickname=nickname,
                email=email,
                image_url=identity.avatar_url,
                oauth_refresh_token=identity.refresh_token,
            )
            try:
                saved = await self._member_gateway.save(member)
            except NicknameConflictError:
                logger.info(
                    "Nickname taken by concurrent registration, retrying",
                    extra={"nickname": nickname},
                )
                continue

            logger.info(
                "New member registered",
                extra={"member_id": str(saved.id), "social_type": social_type.value},
            )
            return ReconciliationResult(member=saved, is_new=True)
