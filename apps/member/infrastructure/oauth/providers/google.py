"""Google OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.member.application.oauth.dto import ExternalIdentity
from apps.member.infrastructure.oauth.providers.base import OAuthProvider

if TYPE_CHECKING:
    import httpx

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
GOOGLE_REVOKE_URL = "https://oauth2.googleapis.com/revoke"


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 프로바이더."""

    name = "google"

    async def exchange(
        self,
        *,
        client: "httpx.AsyncClient",
        credential: str,
    ) -> ExternalIdentity:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": credential,
        }
        response = await client.post(GOOGLE_TOKEN_URL, data=data)
        response.raise_for_status()
        tokens = response.json()
        access_token = self._require(tokens, "access_token")

        headers = {"Authorization": f"Bearer {access_token}"}
        response = await client.get(GOOGLE_PROFILE_URL, headers=headers)
        response.raise_for_status()
        profile = response.json()

        return ExternalIdentity(
            provider_user_id=profile.get("sub"),
            email=profile.get("email"),
            display_name=profile.get("name"),
            avatar_url=profile.get("picture"),
            # 최초 동의 시에만 내려옴
            refresh_token=tokens.get("refresh_token"),
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
            "client_secret": self.client_secret,
            "refresh_token": refresh_token,
        }
        response = await client.post(GOOGLE_TOKEN_URL, data=data)
        response.raise_for_status()
        return self._require(response.json(), "access_token")

    async def unlink(
        self,
        *,
        client: "httpx.AsyncClient",
        target: str,
    ) -> None:
        response = await client.post(GOOGLE_REVOKE_URL, data={"token": target})
        response.raise_for_status()
