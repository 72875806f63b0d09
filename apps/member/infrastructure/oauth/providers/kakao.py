"""Kakao OAuth Provider.

Kakao 로그인은 클라이언트 SDK가 받은 액세스 토큰을 그대로 전달받습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.member.application.oauth.dto import ExternalIdentity
from apps.member.infrastructure.oauth.providers.base import OAuthProvider

if TYPE_CHECKING:
    import httpx

KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"
KAKAO_UNLINK_URL = "https://kapi.kakao.com/v1/user/unlink"


class KakaoOAuthProvider(OAuthProvider):
    """Kakao OAuth 프로바이더."""

    name = "kakao"

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
        admin_key: str,
    ) -> None:
        super().__init__(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
        )
        self.admin_key = admin_key

    async def exchange(
        self,
        *,
        client: "httpx.AsyncClient",
        credential: str,
    ) -> ExternalIdentity:
        headers = {"Authorization": f"Bearer {credential}"}
        response = await client.get(KAKAO_PROFILE_URL, headers=headers)
        response.raise_for_status()
        payload = response.json()

        kakao_account = payload.get("kakao_account") or {}
        profile = kakao_account.get("profile") or {}
        user_id = payload.get("id")

        return ExternalIdentity(
            provider_user_id=str(user_id) if user_id is not None else None,
            email=kakao_account.get("email"),
            display_name=profile.get("nickname"),
            avatar_url=profile.get("profile_image_url"),
        )

    async def refresh_access_token(
        self,
        *,
        client: "httpx.AsyncClient",
        refresh_token: str,
    ) -> str:
        data = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "refresh_token": refresh_token,
        }
        if self.client_secret:
            data["client_secret"] = self.client_secret
        response = await client.post(KAKAO_TOKEN_URL, data=data)
        response.raise_for_status()
        return self._require(response.json(), "access_token")

    async def unlink(
        self,
        *,
        client: "httpx.AsyncClient",
        target: str,
    ) -> None:
        # 어드민 키 방식: 사용자 토큰 없이 social_id로 해제
        headers = {"Authorization": f"KakaoAK {self.admin_key}"}
        data = {"target_id_type": "user_id", "target_id": target}
        response = await client.post(KAKAO_UNLINK_URL, headers=headers, data=data)
        response.raise_for_status()
