"""Slack Registration Notifier.

RegistrationNotifier 포트의 구현체입니다.
알림 실패는 로그만 남기고 삼킵니다.
"""

from __future__ import annotations

import logging
from uuid import UUID

import httpx

logger = logging.getLogger(__name__)


class SlackRegistrationNotifier:
    """Slack Incoming Webhook으로 신규 가입을 알립니다.

    webhook_url이 비어 있으면 아무것도 보내지 않습니다.
    """

    def __init__(
        self,
        webhook_url: str | None,
        *,
        timeout_seconds: float = 3.0,
        environment: str = "local",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._timeout = timeout_seconds
        self._environment = environment
        self._transport = transport

    async def notify_new_member(self, member_id: UUID) -> None:
        if not self._webhook_url:
            return

        text = f"[{self._environment}] 새로운 회원이 가입했습니다. (member_id={member_id})"
        payload = {"text": text}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self._webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                "Slack notification failed",
                extra={"member_id": str(member_id), "error": str(e)},
            )
