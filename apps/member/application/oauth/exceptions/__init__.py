"""OAuth exceptions."""

from apps.member.application.oauth.exceptions.oauth import (
    MissingOAuthCredentialError,
    MissingOAuthRefreshTokenError,
    MissingProviderUserIdError,
    OAuthLoginError,
    OAuthProviderError,
    OAuthUnlinkError,
    UnsupportedProviderError,
)

__all__ = [
    "OAuthProviderError",
    "OAuthLoginError",
    "OAuthUnlinkError",
    "MissingOAuthCredentialError",
    "MissingOAuthRefreshTokenError",
    "MissingProviderUserIdError",
    "UnsupportedProviderError",
]
