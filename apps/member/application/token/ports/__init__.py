"""Token Ports."""

from apps.member.application.token.ports.refresh_token_store import RefreshTokenStore
from apps.member.application.token.ports.token_issuer import TokenIssuer, TokenPair

__all__ = ["TokenIssuer", "TokenPair", "RefreshTokenStore"]
