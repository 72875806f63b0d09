"""SlackRegistrationNotifier Tests."""

from __future__ import annotations

import json
from uuid import uuid4

import httpx
import pytest

from apps.member.infrastructure.notification import SlackRegistrationNotifier


class TestSlackRegistrationNotifier:
    """SlackRegistrationNotifier 테스트."""

    @pytest.mark.asyncio
    async def test_posts_member_id(self) -> None:
        member_id = uuid4()
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text="ok")

        notifier = SlackRegistrationNotifier(
            "https://hooks.slack.com/services/T/B/X",
            environment="dev",
            transport=httpx.MockTransport(handler),
        )

        await notifier.notify_new_member(member_id)

        assert len(captured) == 1
        body = json.loads(captured[0].content)
        assert str(member_id) in body["text"]
        assert body["text"].startswith("[dev]")

    @pytest.mark.asyncio
    async def test_without_webhook_url_sends_nothing(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("should not be called")

        notifier = SlackRegistrationNotifier(None, transport=httpx.MockTransport(handler))

        await notifier.notify_new_member(uuid4())

    @pytest.mark.asyncio
    async def test_webhook_failure_is_swallowed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="invalid_payload")

        notifier = SlackRegistrationNotifier(
            "https://hooks.slack.com/services/T/B/X",
            transport=httpx.MockTransport(handler),
        )

        await notifier.notify_new_member(uuid4())
