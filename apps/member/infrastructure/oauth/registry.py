"""OAuth Provider Registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from apps.member.application.oauth.exceptions import UnsupportedProviderError
from apps.member.infrastructure.oauth.providers import (
    AppleOAuthProvider,
    GoogleOAuthProvider,
    KakaoOAuthProvider,
    OAuthProvider,
)

if TYPE_CHECKING:
    from apps.member.setup.config import Settings


class ProviderRegistry:
    """프로바이더 이름으로 구현체를 조회합니다."""

    def __init__(self, providers: Mapping[str, OAuthProvider]) -> None:
        self.providers = dict(providers)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ProviderRegistry":
        return cls(
            {
                "kakao": KakaoOAuthProvider(
                    client_id=settings.kakao_client_id,
                    client_secret=settings.kakao_client_secret,
                    redirect_uri=settings.kakao_redirect_uri,
                    admin_key=settings.kakao_admin_key,
                ),
                "apple": AppleOAuthProvider(
                    client_id=settings.apple_client_id,
                    redirect_uri=settings.apple_redirect_uri,
                    team_id=settings.apple_team_id,
                    key_id=settings.apple_key_id,
                    private_key=settings.apple_private_key,
                ),
                "google": GoogleOAuthProvider(
                    client_id=settings.google_client_id,
                    client_secret=settings.google_client_secret,
                    redirect_uri=settings.google_redirect_uri,
                ),
            }
        )

    def get(self, provider: str) -> OAuthProvider:
        key = provider.lower()
        if key not in self.providers:
            raise UnsupportedProviderError(provider)
        return self.providers[key]
