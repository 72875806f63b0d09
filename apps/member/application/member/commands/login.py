"""Login Command.

소셜 로그인 Use Case입니다.

Architecture:
    - UseCase(지휘자): LoginInteractor
    - Services(연주자): MemberReconciliationService, TokenService
    - Ports(인프라): IdentityProviderGateway, RegistrationNotifier, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.member.application.member.dto import LoginRequest, LoginResult
from apps.member.application.oauth.exceptions import (
    MissingOAuthCredentialError,
    OAuthLoginError,
    OAuthProviderError,
    UnsupportedProviderError,
)
from apps.member.domain.enums.social_type import SocialType

if TYPE_CHECKING:
    # Services (연주자)
    from apps.member.application.member.services import MemberReconciliationService
    from apps.member.application.token.services import TokenService

    # Ports (인프라)
    from apps.member.application.common.ports import TransactionManager
    from apps.member.application.member.ports import RegistrationNotifier
    from apps.member.application.oauth.ports import IdentityProviderGateway

logger = logging.getLogger(__name__)


class LoginInteractor:
    """소셜 로그인 Interactor (지휘자).

    Workflow:
        1. 프로바이더 자격 증명 교환 (IdentityProviderGateway)
        2. 회원 조회/복구/생성 (MemberReconciliationService), 하나의 트랜잭션
        3. 신규 가입이면 커밋 이후 가입 알림 (RegistrationNotifier, 실패 무시)
        4. 세션 토큰 발급 (TokenService)

    Dependencies:
        Services (연주자):
            - reconciliation: 외부 계정과 로컬 회원 매핑
            - token_service: 토큰 발급

        Ports (인프라):
            - provider_gateway: OAuth 프로바이더 통신
            - notifier: 가입 알림
            - transaction_manager: 트랜잭션 제어
    """

    def __init__(
        self,
        # Services (연주자)
        reconciliation: "MemberReconciliationService",
        token_service: "TokenService",
        # Ports (인프라)
        provider_gateway: "IdentityProviderGateway",
        notifier: "RegistrationNotifier",
        transaction_manager: "TransactionManager",
    ) -> None:
        # Services
        self._reconciliation = reconciliation
        self._token_service = token_service
        # Ports
        self._provider_gateway = provider_gateway
        self._notifier = notifier
        self._transaction_manager = transaction_manager

    async def execute(self, request: LoginRequest) -> LoginResult:
        """소셜 로그인을 처리합니다.

        Args:
            request: 로그인 요청 DTO

        Returns:
            발급된 토큰과 회원 정보

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            MissingOAuthCredentialError: 자격 증명 누락
            OAuthLoginError: 프로바이더 연동 실패
            MissingProviderUserIdError: 프로바이더 사용자 ID 누락
        """
        try:
            social_type = SocialType.from_provider(request.provider)
        except ValueError:
            raise UnsupportedProviderError(request.provider) from None

        provider = social_type.provider_name
        if not request.credential:
            raise MissingOAuthCredentialError(provider)

        # 1. 자격 증명 교환
        try:
            identity = await self._provider_gateway.exchange(provider, request.credential)
        except OAuthProviderError as e:
            logger.warning(
                "OAuth exchange failed",
                extra={"provider": provider, "error": e.reason},
            )
            raise OAuthLoginError(provider) from e

        # 2. 회원 매핑 (트랜잭션)
        async with self._transaction_manager.begin():
            result = await self._reconciliation.resolve_or_create(identity, social_type)

        member = result.member

        # 3. 가입 알림 (커밋 이후, 실패 무시)
        if result.is_new:
            try:
                await self._notifier.notify_new_member(member.id)
            except Exception:
                logger.warning(
                    "Registration notification failed",
                    extra={"member_id": str(member.id)},
                    exc_info=True,
                )

        # 4. 토큰 발급
        token_pair = await self._token_service.issue(member.email)

        logger.info(
            "Member logged in",
            extra={
                "member_id": str(member.id),
                "provider": provider,
                "is_new": result.is_new,
                "restored": result.restored,
            },
        )

        return LoginResult(
            member_id=member.id,
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            role=member.role,
            nickname=member.nickname,
            profile_image=member.image_url,
            social_id=member.social_id,
            is_new_member=result.is_new,
        )
