"""Domain Entities."""

from apps.member.domain.entities.member import (
    PLACEHOLDER_EMAIL_DOMAIN,
    Member,
    anonymize,
    change_image_url,
    change_nickname,
    generate_placeholder_email,
    restore,
    sync_oauth_credentials,
)

__all__ = [
    "Member",
    "PLACEHOLDER_EMAIL_DOMAIN",
    "generate_placeholder_email",
    "restore",
    "anonymize",
    "sync_oauth_credentials",
    "change_nickname",
    "change_image_url",
]
