"""Provider Unlink Strategies.

탈퇴 시 프로바이더별 앱 연결 해제 방식을 캡슐화합니다.
DeleteMemberInteractor는 social_type으로 전략을 선택만 합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Protocol

from apps.member.application.oauth.exceptions import (
    MissingOAuthRefreshTokenError,
    OAuthProviderError,
    OAuthUnlinkError,
    UnsupportedProviderError,
)
from apps.member.domain.enums.social_type import SocialType

if TYPE_CHECKING:
    from apps.member.application.oauth.ports import IdentityProviderGateway
    from apps.member.domain.entities.member import Member

logger = logging.getLogger(__name__)


class ProviderUnlinkStrategy(Protocol):
    """프로바이더 연결 해제 전략."""

    social_type: SocialType

    async def unlink(self, member: "Member") -> None:
        """연결 해제. 실패 시 예외로 탈퇴를 중단시킵니다."""
        ...


class KakaoUnlinkStrategy:
    """Kakao: social_id로 어드민 키 기반 연결 해제."""

    social_type = SocialType.KAKAO

    def __init__(self, provider_gateway: "IdentityProviderGateway") -> None:
        self._provider_gateway = provider_gateway

    async def unlink(self, member: "Member") -> None:
        provider = self.social_type.provider_name
        try:
            await self._provider_gateway.unlink(provider, member.social_id)
        except OAuthProviderError as e:
            logger.error(
                "Kakao unlink failed",
                extra={"member_id": str(member.id), "error": e.reason},
            )
            raise OAuthUnlinkError(provider) from e


class AppleUnlinkStrategy:
    """Apple: 저장된 리프레시 토큰 필수, 액세스 토큰 재발급 후 revoke."""

    social_type = SocialType.APPLE

    def __init__(self, provider_gateway: "IdentityProviderGateway") -> None:
        self._provider_gateway = provider_gateway

    async def unlink(self, member: "Member") -> None:
        provider = self.social_type.provider_name
        if not member.oauth_refresh_token:
            raise MissingOAuthRefreshTokenError(provider)

        try:
            access_token = await self._provider_gateway.refresh_access_token(
                provider, member.oauth_refresh_token
            )
            await self._provider_gateway.unlink(provider, access_token)
        except OAuthProviderError as e:
            logger.error(
                "Apple unlink failed",
                extra={"member_id": str(member.id), "error": e.reason},
            )
            raise OAuthUnlinkError(provider) from e


class GoogleUnlinkStrategy:
    """Google: 리프레시 토큰이 있으면 재발급 후 revoke, 없으면 건너뜀."""

    social_type = SocialType.GOOGLE

    def __init__(self, provider_gateway: "IdentityProviderGateway") -> None:
        self._provider_gateway = provider_gateway

    async def unlink(self, member: "Member") -> None:
        provider = self.social_type.provider_name
        if not member.oauth_refresh_token:
            logger.info(
                "Google refresh token missing, skipping provider unlink",
                extra={"member_id": str(member.id)},
            )
            return

        try:
            access_token = await self._provider_gateway.refresh_access_token(
                provider, member.oauth_refresh_token
            )
            await self._provider_gateway.unlink(provider, access_token)
        except OAuthProviderError as e:
            logger.error(
                "Google unlink failed",
                extra={"member_id": str(member.id), "error": e.reason},
            )
            raise OAuthUnlinkError(provider) from e


class UnlinkStrategyRegistry:
    """social_type별 연결 해제 전략 조회."""

    def __init__(self, strategies: Iterable[ProviderUnlinkStrategy]) -> None:
        self._strategies = {strategy.social_type: strategy for strategy in strategies}

    @classmethod
    def default(cls, provider_gateway: "IdentityProviderGateway") -> "UnlinkStrategyRegistry":
        return cls(
            [
                KakaoUnlinkStrategy(provider_gateway),
                AppleUnlinkStrategy(provider_gateway),
                GoogleUnlinkStrategy(provider_gateway),
            ]
        )

    def get(self, social_type: SocialType) -> ProviderUnlinkStrategy:
        try:
            return self._strategies[social_type]
        except KeyError:
            raise UnsupportedProviderError(social_type.value) from None
