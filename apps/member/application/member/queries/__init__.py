"""Member Queries."""

from apps.member.application.member.queries.get_member_info import GetMemberInfoQuery

__all__ = ["GetMemberInfoQuery"]
