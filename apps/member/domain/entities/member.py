"""Member Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/members.py에서 정의합니다.

상태 변경은 모두 새 Member 값을 반환하는 순수 함수로 표현하며,
실제 쓰기는 영속성 계층(MemberGateway.save)이 수행합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.member.domain.enums.role import Role
from apps.member.domain.enums.social_type import SocialType

PLACEHOLDER_EMAIL_DOMAIN = "socialUser.com"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_placeholder_email() -> str:
    """프로바이더가 이메일을 주지 않을 때 사용하는 대체 이메일."""
    return f"{uuid4()}@{PLACEHOLDER_EMAIL_DOMAIN}"


@dataclass
class Member:
    """회원 엔티티 (Aggregate Root).

    Attributes:
        id: 회원 고유 식별자 (생성 시 할당, 불변)
        social_id: 프로바이더에서의 사용자 ID
        social_type: 회원을 생성한 프로바이더
        email: 프로바이더 이메일 또는 대체 이메일 (토큰 subject)
        nickname: 자동 생성 닉네임 (이후 사용자가 변경 가능)
        image_url: 프로필 이미지 URL (선택)
        role: 권한
        oauth_refresh_token: 프로바이더 리프레시 토큰 (Apple/Google 연결 해제용)
        deleted: 탈퇴 여부
        deleted_at: 탈퇴 시각 (deleted=True일 때만 존재)
    """

    id: UUID
    social_id: str
    social_type: SocialType
    email: str
    nickname: str
    image_url: str | None = None
    role: Role = Role.USER
    oauth_refresh_token: str | None = None
    deleted: bool = False
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def register(
        cls,
        *,
        social_id: str,
        social_type: SocialType,
        nickname: str,
        email: str | None = None,
        image_url: str | None = None,
        oauth_refresh_token: str | None = None,
    ) -> "Member":
        """신규 회원 생성."""
        now = _utcnow()
        return cls(
            id=uuid4(),
            social_id=social_id,
            social_type=social_type,
            email=email or generate_placeholder_email(),
            nickname=nickname,
            image_url=image_url,
            role=Role.USER,
            oauth_refresh_token=oauth_refresh_token or None,
            deleted=False,
            deleted_at=None,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        return not self.deleted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"Member(id={self.id}, social_type={self.social_type.value}, "
            f"nickname={self.nickname!r}, deleted={self.deleted})"
        )


def _copy(member: Member, **changes) -> Member:
    return replace(member, updated_at=_utcnow(), **changes)


def restore(
    member: Member,
    *,
    email: str | None = None,
    oauth_refresh_token: str | None = None,
) -> Member:
    """탈퇴 회원 복구.

    deleted/deleted_at을 함께 해제합니다. 이메일과 리프레시 토큰은
    값이 주어진 경우에만 덮어쓰고, 빈 값으로 지우지 않습니다.
    """
    return _copy(
        member,
        deleted=False,
        deleted_at=None,
        email=email or member.email,
        oauth_refresh_token=oauth_refresh_token or member.oauth_refresh_token,
    )


def sync_oauth_credentials(
    member: Member,
    *,
    email: str | None = None,
    oauth_refresh_token: str | None = None,
) -> Member:
    """활성 회원의 프로바이더 이메일/리프레시 토큰 갱신.

    프로바이더는 최초 동의 시에만 리프레시 토큰을 주기도 하므로
    새 값이 있을 때만 갱신합니다.
    """
    new_email = email or member.email
    new_token = oauth_refresh_token or member.oauth_refresh_token
    if new_email == member.email and new_token == member.oauth_refresh_token:
        return member
    return _copy(member, email=new_email, oauth_refresh_token=new_token)


def anonymize(member: Member, *, now: datetime | None = None) -> Member:
    """탈퇴 처리 및 개인정보 익명화.

    email은 새 대체 이메일로, image_url/oauth_refresh_token은 None으로 지웁니다.
    social_id/social_type은 재로그인 시 복구를 위해 유지합니다.
    """
    deleted_at = now or _utcnow()
    return replace(
        member,
        deleted=True,
        deleted_at=deleted_at,
        email=generate_placeholder_email(),
        image_url=None,
        oauth_refresh_token=None,
        updated_at=deleted_at,
    )


def change_nickname(member: Member, nickname: str) -> Member:
    """닉네임 변경."""
    return _copy(member, nickname=nickname)


def change_image_url(member: Member, image_url: str | None) -> Member:
    """프로필 이미지 변경."""
    return _copy(member, image_url=image_url)
