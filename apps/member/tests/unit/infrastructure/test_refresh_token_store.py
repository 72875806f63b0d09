"""RedisRefreshTokenStore Tests."""

from __future__ import annotations

import time
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.member.infrastructure.persistence_redis import RedisRefreshTokenStore
from apps.member.infrastructure.persistence_redis.refresh_token_store_redis import (
    ROTATE_SCRIPT,
)


class TestRedisRefreshTokenStore:
    """RedisRefreshTokenStore 테스트."""

    @pytest.fixture
    def mock_script(self) -> AsyncMock:
        return AsyncMock(return_value=1)

    @pytest.fixture
    def mock_redis(self, mock_script: AsyncMock) -> MagicMock:
        redis = MagicMock()
        redis.setex = AsyncMock()
        redis.delete = AsyncMock()
        redis.register_script = MagicMock(return_value=mock_script)
        return redis

    @pytest.fixture
    def store(self, mock_redis: MagicMock) -> RedisRefreshTokenStore:
        return RedisRefreshTokenStore(mock_redis)

    @pytest.mark.asyncio
    async def test_save_sets_ttl_until_expiry(
        self,
        store: RedisRefreshTokenStore,
        mock_redis: MagicMock,
    ) -> None:
        expires_at = int(time.time()) + 3600

        await store.save("me@example.com", "jti-1", expires_at)

        key, ttl, value = mock_redis.setex.await_args.args
        assert key == "member:refresh:me@example.com"
        assert 3590 <= ttl <= 3600
        assert value == "jti-1"

    @pytest.mark.asyncio
    async def test_save_with_past_expiry_uses_minimum_ttl(
        self,
        store: RedisRefreshTokenStore,
        mock_redis: MagicMock,
    ) -> None:
        await store.save("me@example.com", "jti-1", int(time.time()) - 10)

        assert mock_redis.setex.await_args.args[1] == 1

    @pytest.mark.asyncio
    async def test_rotate_runs_compare_and_set_script(
        self,
        store: RedisRefreshTokenStore,
        mock_redis: MagicMock,
        mock_script: AsyncMock,
    ) -> None:
        rotated = await store.rotate(
            "me@example.com",
            old_jti="jti-1",
            new_jti="jti-2",
            expires_at=int(time.time()) + 60,
        )

        assert rotated is True
        mock_redis.register_script.assert_called_once_with(ROTATE_SCRIPT)
        kwargs = mock_script.await_args.kwargs
        assert kwargs["keys"] == ["member:refresh:me@example.com"]
        assert kwargs["args"][:2] == ["jti-1", "jti-2"]

    @pytest.mark.asyncio
    async def test_rotate_mismatch(
        self,
        store: RedisRefreshTokenStore,
        mock_script: AsyncMock,
    ) -> None:
        mock_script.return_value = 0

        rotated = await store.rotate(
            "me@example.com",
            old_jti="stale",
            new_jti="jti-2",
            expires_at=int(time.time()) + 60,
        )

        assert rotated is False

    @pytest.mark.asyncio
    async def test_script_registered_once(
        self,
        store: RedisRefreshTokenStore,
        mock_redis: MagicMock,
    ) -> None:
        for _ in range(3):
            await store.rotate("s", old_jti="a", new_jti="b", expires_at=int(time.time()) + 60)

        assert mock_redis.register_script.call_count == 1

    @pytest.mark.asyncio
    async def test_delete(self, store: RedisRefreshTokenStore, mock_redis: MagicMock) -> None:
        await store.delete("me@example.com")

        mock_redis.delete.assert_awaited_once_with("member:refresh:me@example.com")
