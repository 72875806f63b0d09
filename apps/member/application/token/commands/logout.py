"""Logout Command.

로그아웃 Use Case입니다.

Architecture:
    - UseCase(지휘자): LogoutInteractor
    - Services(연주자): TokenService
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.member.application.token.dto import LogoutRequest

if TYPE_CHECKING:
    from apps.member.application.token.services import TokenService

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor (지휘자).

    액세스 토큰의 subject에 대한 현재 리프레시 토큰을 폐기합니다.
    이미 발급된 액세스 토큰은 만료될 때까지 유효합니다.
    """

    def __init__(self, token_service: "TokenService") -> None:
        self._token_service = token_service

    async def execute(self, request: LogoutRequest) -> None:
        """로그아웃을 처리합니다.

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
        """
        subject = self._token_service.validate(request.access_token)
        await self._token_service.revoke(subject)
        logger.info("Member logged out")
