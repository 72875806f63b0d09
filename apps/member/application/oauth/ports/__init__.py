"""OAuth Ports."""

from apps.member.application.oauth.ports.identity_provider_gateway import (
    IdentityProviderGateway,
)

__all__ = ["IdentityProviderGateway"]
