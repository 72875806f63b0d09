"""ReissueTokens Command.

토큰 재발급 Use Case입니다.

Architecture:
    - UseCase(지휘자): ReissueTokensInteractor
    - Services(연주자): TokenService
    - Ports(인프라): MemberGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.member.application.token.dto import (
    ReissueTokensRequest,
    ReissueTokensResponse,
)
from apps.member.domain.exceptions.auth import TokenRevokedError

if TYPE_CHECKING:
    # Services (연주자)
    # Ports (인프라)
    from apps.member.application.member.ports import MemberGateway
    from apps.member.application.token.services import TokenService

logger = logging.getLogger(__name__)


class ReissueTokensInteractor:
    """토큰 재발급 Interactor (지휘자).

    Workflow:
        1. Refresh 토큰 검증 및 회전 (TokenService)
        2. 회원 조회 (MemberGateway)
        3. 탈퇴/미존재 회원이면 새 토큰을 폐기하고 거부

    Dependencies:
        Services (연주자):
            - token_service: 토큰 검증, 회전, 폐기

        Ports (인프라):
            - member_gateway: 회원 조회
    """

    def __init__(
        self,
        # Services (연주자)
        token_service: "TokenService",
        # Ports (인프라)
        member_gateway: "MemberGateway",
    ) -> None:
        self._token_service = token_service
        self._member_gateway = member_gateway

    async def execute(self, request: ReissueTokensRequest) -> ReissueTokensResponse:
        """토큰을 재발급합니다.

        Args:
            request: 토큰 재발급 요청 DTO

        Returns:
            새 토큰 쌍을 담은 응답 DTO

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            TokenRevokedError: 교체된 토큰, 또는 탈퇴/미존재 회원
        """
        # 1. 검증 + 회전 (Service에 위임)
        subject, token_pair = await self._token_service.reissue(request.refresh_token)

        # 2. 회원 조회
        member = await self._member_gateway.get_by_email(subject)
        if member is None or not member.is_active:
            await self._token_service.revoke(subject)
            raise TokenRevokedError("Member is no longer active")

        logger.info("Tokens reissued", extra={"member_id": str(member.id)})

        return ReissueTokensResponse(
            member_id=member.id,
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            access_expires_at=token_pair.access_expires_at,
            refresh_expires_at=token_pair.refresh_expires_at,
        )
