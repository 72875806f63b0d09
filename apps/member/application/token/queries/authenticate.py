"""AuthenticateMember Query.

액세스 토큰으로 현재 회원을 확인하는 Query Service입니다.

Architecture:
    - QueryService: AuthenticateMemberQuery
    - Services(연주자): TokenService
    - Ports(인프라): MemberGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.member.application.token.exceptions import AuthenticationError
from apps.member.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)

if TYPE_CHECKING:
    from apps.member.application.member.ports import MemberGateway
    from apps.member.application.token.services import TokenService
    from apps.member.domain.entities.member import Member

logger = logging.getLogger(__name__)


class AuthenticateMemberQuery:
    """회원 인증 Query Service.

    Dependencies:
        Services (연주자):
            - token_service: 액세스 토큰 검증

        Ports (인프라):
            - member_gateway: 이메일로 회원 조회
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

    async def execute(self, access_token: str) -> "Member":
        """액세스 토큰을 검증하고 활성 회원을 반환합니다.

        Raises:
            TokenExpiredError: 만료된 토큰
            AuthenticationError: 그 밖의 인증 실패
        """
        try:
            subject = self._token_service.validate(access_token)
        except TokenExpiredError:
            raise
        except (InvalidTokenError, TokenTypeMismatchError) as exc:
            raise AuthenticationError(exc.message) from exc

        member = await self._member_gateway.get_by_email(subject)
        if member is None or not member.is_active:
            logger.warning("Token subject does not resolve to an active member")
            raise AuthenticationError("Member not found or withdrawn")

        return member
