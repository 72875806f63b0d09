"""Token DTOs."""

from apps.member.application.token.dto.token import (
    LogoutRequest,
    ReissueTokensRequest,
    ReissueTokensResponse,
)

__all__ = ["LogoutRequest", "ReissueTokensRequest", "ReissueTokensResponse"]
