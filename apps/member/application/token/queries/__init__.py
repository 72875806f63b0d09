"""Token Queries."""

from apps.member.application.token.queries.authenticate import AuthenticateMemberQuery

__all__ = ["AuthenticateMemberQuery"]
