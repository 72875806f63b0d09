"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.member.infrastructure.oauth.providers.apple import AppleOAuthProvider
from apps.member.infrastructure.oauth.providers.base import OAuthProvider
from apps.member.infrastructure.oauth.providers.google import GoogleOAuthProvider
from apps.member.infrastructure.oauth.providers.kakao import KakaoOAuthProvider

__all__ = [
    "OAuthProvider",
    "AppleOAuthProvider",
    "GoogleOAuthProvider",
    "KakaoOAuthProvider",
]
