"""Member HTTP API Tests.

의존성을 in-memory 구현으로 바꾼 FastAPI TestClient로 엔드포인트를 검증합니다.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apps.member.application.member.commands import (
    ChangeNicknameInteractor,
    DeleteMemberInteractor,
    LoginInteractor,
    UpdateProfileImageInteractor,
)
from apps.member.application.member.queries import GetMemberInfoQuery
from apps.member.application.member.services import (
    MemberReconciliationService,
    UnlinkStrategyRegistry,
)
from apps.member.application.oauth.dto import ExternalIdentity
from apps.member.application.oauth.exceptions import OAuthProviderError
from apps.member.application.token.commands import LogoutInteractor, ReissueTokensInteractor
from apps.member.application.token.queries import AuthenticateMemberQuery
from apps.member.application.token.services import TokenService
from apps.member.domain.enums.social_type import SocialType
from apps.member.infrastructure.security import JwtTokenService
from apps.member.main import create_app
from apps.member.setup import dependencies as deps
from apps.member.tests.unit.factories import (
    FakeTransactionManager,
    InMemoryMemberGateway,
    InMemoryRefreshTokenStore,
    create_member,
)

PREFIX = "/api/v2/member"


class _Context:
    """테스트 하나에서 공유하는 in-memory 의존성."""

    def __init__(self, provider_gateway: AsyncMock, object_storage: AsyncMock) -> None:
        self.member_gateway = InMemoryMemberGateway()
        self.refresh_token_store = InMemoryRefreshTokenStore()
        self.transaction_manager = FakeTransactionManager()
        self.provider_gateway = provider_gateway
        self.object_storage = object_storage
        self.token_service = TokenService(
            issuer=JwtTokenService(secret_key="test-secret"),
            refresh_token_store=self.refresh_token_store,
        )
        self.notifier = AsyncMock()

    async def login_tokens(self, email: str) -> tuple[str, str]:
        pair = await self.token_service.issue(email)
        return pair.access_token, pair.refresh_token


@pytest.fixture
def ctx(mock_provider_gateway: AsyncMock, mock_object_storage: AsyncMock) -> _Context:
    return _Context(mock_provider_gateway, mock_object_storage)


@pytest.fixture
def client(ctx: _Context) -> TestClient:
    app = create_app()
    overrides = {
        deps.get_login_interactor: lambda: LoginInteractor(
            reconciliation=MemberReconciliationService(ctx.member_gateway),
            token_service=ctx.token_service,
            provider_gateway=ctx.provider_gateway,
            notifier=ctx.notifier,
            transaction_manager=ctx.transaction_manager,
        ),
        deps.get_reissue_tokens_interactor: lambda: ReissueTokensInteractor(
            ctx.token_service, ctx.member_gateway
        ),
        deps.get_logout_interactor: lambda: LogoutInteractor(ctx.token_service),
        deps.get_authenticate_member_query: lambda: AuthenticateMemberQuery(
            ctx.token_service, ctx.member_gateway
        ),
        deps.get_member_info_query: lambda: GetMemberInfoQuery(ctx.member_gateway),
        deps.get_change_nickname_interactor: lambda: ChangeNicknameInteractor(
            ctx.member_gateway, ctx.transaction_manager
        ),
        deps.get_delete_member_interactor: lambda: DeleteMemberInteractor(
            unlink_strategies=UnlinkStrategyRegistry.default(ctx.provider_gateway),
            token_service=ctx.token_service,
            member_gateway=ctx.member_gateway,
            object_storage=ctx.object_storage,
            transaction_manager=ctx.transaction_manager,
        ),
        deps.get_update_profile_image_interactor: lambda: UpdateProfileImageInteractor(
            ctx.member_gateway, ctx.object_storage, ctx.transaction_manager
        ),
    }
    app.dependency_overrides.update(overrides)
    return TestClient(app, raise_server_exceptions=False)


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestLoginEndpoints:
    """로그인 엔드포인트 테스트."""

    def test_kakao_login_with_header(self, client: TestClient, ctx: _Context) -> None:
        ctx.provider_gateway.exchange.return_value = ExternalIdentity(provider_user_id="k-1")

        response = client.post(f"{PREFIX}/login", headers={"accessToken": "kakao-at"})

        assert response.status_code == 200
        body = response.json()
        assert body["isNewMember"] is True
        assert body["socialId"] == "k-1"
        assert body["role"] == "USER"
        assert body["tokens"]["accessToken"]
        assert body["tokens"]["refreshToken"]
        ctx.provider_gateway.exchange.assert_awaited_once_with("kakao", "kakao-at")

    def test_kakao_login_with_body(self, client: TestClient, ctx: _Context) -> None:
        ctx.provider_gateway.exchange.return_value = ExternalIdentity(provider_user_id="k-2")

        response = client.post(f"{PREFIX}/login", json={"accessToken": "kakao-at"})

        assert response.status_code == 200
        ctx.provider_gateway.exchange.assert_awaited_once_with("kakao", "kakao-at")

    def test_kakao_login_without_token(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/login")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_OAUTH_CREDENTIAL"

    def test_provider_failure(self, client: TestClient, ctx: _Context) -> None:
        ctx.provider_gateway.exchange.side_effect = OAuthProviderError("kakao", "API error: 401")

        response = client.post(f"{PREFIX}/login", headers={"accessToken": "expired"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "OAUTH_LOGIN_FAILED"

    def test_apple_login(self, client: TestClient, ctx: _Context) -> None:
        ctx.provider_gateway.exchange.return_value = ExternalIdentity(
            provider_user_id="a-1",
            email="a@icloud.com",
            refresh_token="apple-rt",
        )

        response = client.post(f"{PREFIX}/apple-login", json={"code": "apple-code"})

        assert response.status_code == 200
        ctx.provider_gateway.exchange.assert_awaited_once_with("apple", "apple-code")

    def test_google_login_requires_code(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/google-login", json={})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestTokenEndpoints:
    """토큰 엔드포인트 테스트."""

    @pytest.mark.asyncio
    async def test_reissue_rotates(self, client: TestClient, ctx: _Context) -> None:
        ctx.member_gateway.add(create_member(email="me@example.com"))
        _, refresh_token = await ctx.login_tokens("me@example.com")

        first = client.post(
            f"{PREFIX}/token-reissue",
            headers={"Authorization-Refresh": f"Bearer {refresh_token}"},
        )
        replay = client.post(
            f"{PREFIX}/token-reissue",
            headers={"Authorization-Refresh": f"Bearer {refresh_token}"},
        )

        assert first.status_code == 200
        assert first.json()["refreshToken"] != refresh_token
        assert replay.status_code == 401
        assert replay.json()["error"]["code"] == "TOKEN_REVOKED"

    def test_reissue_without_header(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/token-reissue")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_logout(self, client: TestClient, ctx: _Context) -> None:
        ctx.member_gateway.add(create_member(email="me@example.com"))
        access_token, _ = await ctx.login_tokens("me@example.com")

        response = client.post(f"{PREFIX}/logout", headers=_bearer(access_token))

        assert response.status_code == 204
        assert ctx.refresh_token_store.current == {}


class TestAccountEndpoints:
    """회원 정보 엔드포인트 테스트."""

    @pytest.mark.asyncio
    async def test_user_info(self, client: TestClient, ctx: _Context) -> None:
        member = ctx.member_gateway.add(
            create_member(email="me@example.com", nickname="빠른여우#01")
        )
        access_token, _ = await ctx.login_tokens("me@example.com")

        response = client.get(f"{PREFIX}/user-info", headers=_bearer(access_token))

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(member.id)
        assert body["nickname"] == "빠른여우#01"
        assert body["socialType"] == "KAKAO"

    def test_user_info_without_token(self, client: TestClient) -> None:
        response = client.get(f"{PREFIX}/user-info")

        assert response.status_code == 401

    def test_user_info_with_bad_token(self, client: TestClient) -> None:
        response = client.get(f"{PREFIX}/user-info", headers=_bearer("garbage"))

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_FAILED"

    @pytest.mark.asyncio
    async def test_change_nickname_conflict(self, client: TestClient, ctx: _Context) -> None:
        ctx.member_gateway.add(create_member(social_id="a", nickname="빠른여우#01"))
        ctx.member_gateway.add(
            create_member(social_id="b", email="me@example.com", nickname="느린곰#02")
        )
        access_token, _ = await ctx.login_tokens("me@example.com")

        response = client.patch(
            f"{PREFIX}/nickname",
            headers=_bearer(access_token),
            json={"nickname": "빠른여우#01"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "NICKNAME_ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_profile_image_upload(self, client: TestClient, ctx: _Context) -> None:
        ctx.member_gateway.add(create_member(email="me@example.com"))
        ctx.object_storage.upload.return_value = ["https://cdn.example.com/profile/me/x.png"]
        access_token, _ = await ctx.login_tokens("me@example.com")

        response = client.put(
            f"{PREFIX}/profile-image",
            headers=_bearer(access_token),
            files={"image": ("x.png", b"png-bytes", "image/png")},
        )

        assert response.status_code == 200
        assert response.json()["profileImage"] == "https://cdn.example.com/profile/me/x.png"
        uploaded = ctx.object_storage.upload.await_args.args[1][0]
        assert uploaded.content == b"png-bytes"

    @pytest.mark.asyncio
    async def test_withdraw_then_token_is_rejected(
        self,
        client: TestClient,
        ctx: _Context,
    ) -> None:
        member = ctx.member_gateway.add(create_member(email="me@example.com"))
        access_token, refresh_token = await ctx.login_tokens("me@example.com")

        response = client.delete(f"{PREFIX}/withdraw", headers=_bearer(access_token))
        after = client.get(f"{PREFIX}/user-info", headers=_bearer(access_token))
        reissue = client.post(
            f"{PREFIX}/token-reissue",
            headers={"Authorization-Refresh": f"Bearer {refresh_token}"},
        )

        assert response.status_code == 204
        assert ctx.member_gateway.members[member.id].deleted is True
        assert after.status_code == 401
        assert reissue.status_code == 401

    @pytest.mark.asyncio
    async def test_withdraw_apple_without_refresh_token(
        self,
        client: TestClient,
        ctx: _Context,
    ) -> None:
        member = ctx.member_gateway.add(
            create_member(
                email="me@example.com",
                social_type=SocialType.APPLE,
                oauth_refresh_token=None,
            )
        )
        access_token, _ = await ctx.login_tokens("me@example.com")

        response = client.delete(f"{PREFIX}/withdraw", headers=_bearer(access_token))

        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "MISSING_OAUTH_REFRESH_TOKEN",
            "message": "Internal server error",
        }
        assert ctx.member_gateway.members[member.id].deleted is False


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
