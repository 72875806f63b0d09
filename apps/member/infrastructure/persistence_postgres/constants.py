"""PostgreSQL constants for the member service."""

MEMBER_SCHEMA = "member"

MEMBERS_TABLE = "members"

UQ_MEMBERS_SOCIAL = "uq_members_social_id_social_type"
UQ_MEMBERS_EMAIL = "uq_members_email"
UQ_MEMBERS_NICKNAME = "uq_members_nickname"
