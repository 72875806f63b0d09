"""Apple OAuth Provider.

Sign in with Apple은 client_secret으로 ES256 서명 JWT를 요구하고,
사용자 정보는 토큰 응답의 id_token(RS256)에만 담겨 있습니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt

from apps.member.application.oauth.dto import ExternalIdentity
from apps.member.application.oauth.exceptions import OAuthProviderError
from apps.member.infrastructure.oauth.providers.base import OAuthProvider

if TYPE_CHECKING:
    import httpx

APPLE_ISSUER = "https://appleid.apple.com"
APPLE_TOKEN_URL = f"{APPLE_ISSUER}/auth/token"
APPLE_KEYS_URL = f"{APPLE_ISSUER}/auth/keys"
APPLE_REVOKE_URL = f"{APPLE_ISSUER}/auth/revoke"

# Apple 허용 최대치는 6개월
CLIENT_SECRET_TTL_SECONDS = 60 * 60 * 24 * 180


class AppleOAuthProvider(OAuthProvider):
    """Apple OAuth 프로바이더."""

    name = "apple"

    def __init__(
        self,
        *,
        client_id: str,
        redirect_uri: str | None,
        team_id: str,
        key_id: str,
        private_key: str,
    ) -> None:
        super().__init__(client_id=client_id, client_secret=None, redirect_uri=redirect_uri)
        self.team_id = team_id
        self.key_id = key_id
        self.private_key = private_key

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def build_client_secret(self) -> str:
        """ES256 client_secret JWT 생성."""
        now = self._now_timestamp()
        claims = {
            "iss": self.team_id,
            "iat": now,
            "exp": now + CLIENT_SECRET_TTL_SECONDS,
            "aud": APPLE_ISSUER,
            "sub": self.client_id,
        }
        return jwt.encode(
            claims,
            self.private_key,
            algorithm="ES256",
            headers={"kid": self.key_id},
        )

    def _client_form(self) -> dict[str, str]:
        return {
            "client_id": self.client_id,
            "client_secret": self.build_client_secret(),
        }

    async def exchange(
        self,
        *,
        client: "httpx.AsyncClient",
        credential: str,
    ) -> ExternalIdentity:
        data = {
            **self._client_form(),
            "grant_type": "authorization_code",
            "code": credential,
        }
        if self.redirect_uri:
            data["redirect_uri"] = self.redirect_uri
        response = await client.post(APPLE_TOKEN_URL, data=data)
        response.raise_for_status()
        tokens = response.json()

        id_token = self._require(tokens, "id_token")
        claims = await self._verify_id_token(
            client,
            id_token,
            access_token=tokens.get("access_token"),
        )

        return ExternalIdentity(
            provider_user_id=claims.get("sub"),
            email=claims.get("email"),
            refresh_token=tokens.get("refresh_token"),
        )

    async def _verify_id_token(
        self,
        client: "httpx.AsyncClient",
        id_token: str,
        *,
        access_token: str | None,
    ) -> dict[str, Any]:
        """Apple 공개키(JWKS)로 id_token 서명과 클레임 검증."""
        try:
            header = jwt.get_unverified_header(id_token)
        except JWTError as e:
            raise OAuthProviderError(self.name, f"Malformed id_token: {e}") from e

        response = await client.get(APPLE_KEYS_URL)
        response.raise_for_status()
        keys = response.json().get("keys") or []
        key = next((k for k in keys if k.get("kid") == header.get("kid")), None)
        if key is None:
            raise OAuthProviderError(self.name, "No matching Apple public key for id_token")

        try:
            return jwt.decode(
                id_token,
                key,
                algorithms=["RS256"],
                audience=self.client_id,
                issuer=APPLE_ISSUER,
                access_token=access_token,
            )
        except JWTError as e:
            raise OAuthProviderError(self.name, f"id_token verification failed: {e}") from e

    async def refresh_access_token(
        self,
        *,
        client: "httpx.AsyncClient",
        refresh_token: str,
    ) -> str:
        data = {
            **self._client_form(),
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }
        response = await client.post(APPLE_TOKEN_URL, data=data)
        response.raise_for_status()
        return self._require(response.json(), "access_token")

    async def unlink(
        self,
        *,
        client: "httpx.AsyncClient",
        target: str,
    ) -> None:
        data = {
            **self._client_form(),
            "token": target,
            "token_type_hint": "access_token",
        }
        response = await client.post(APPLE_REVOKE_URL, data=data)
        response.raise_for_status()
