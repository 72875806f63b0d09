"""HTTP auth dependencies."""

from apps.member.presentation.http.auth.dependencies import (
    get_current_member,
    parse_bearer,
)

__all__ = ["get_current_member", "parse_bearer"]
