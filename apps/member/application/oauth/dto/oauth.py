"""OAuth DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExternalIdentity:
    """프로바이더 로그인 1회분의 정규화된 사용자 정보.

    영속화되지 않습니다.
    """

    provider_user_id: str | None
    email: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    refresh_token: str | None = None
