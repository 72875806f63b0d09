"""OAuth Provider Implementations."""

from apps.member.infrastructure.oauth.client import OAuthClientImpl
from apps.member.infrastructure.oauth.providers import (
    AppleOAuthProvider,
    GoogleOAuthProvider,
    KakaoOAuthProvider,
    OAuthProvider,
)
from apps.member.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "OAuthProvider",
    "AppleOAuthProvider",
    "GoogleOAuthProvider",
    "KakaoOAuthProvider",
    "ProviderRegistry",
    "OAuthClientImpl",
]
