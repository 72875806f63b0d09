"""Members ORM Mapping.

Member 도메인 엔티티와 member.members 테이블의 매핑입니다.

(social_id, social_type), email, nickname은 각각 유니크합니다.
행은 삭제하지 않으며, 탈퇴는 deleted 플래그와 익명화로 표현합니다.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.member.domain.enums.role import Role
from apps.member.domain.enums.social_type import SocialType
from apps.member.infrastructure.persistence_postgres.constants import (
    MEMBER_SCHEMA,
    MEMBERS_TABLE,
    UQ_MEMBERS_EMAIL,
    UQ_MEMBERS_NICKNAME,
    UQ_MEMBERS_SOCIAL,
)
from apps.member.infrastructure.persistence_postgres.registry import mapper_registry

members_table = Table(
    MEMBERS_TABLE,
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("social_id", Text, nullable=False),
    Column(
        "social_type",
        Enum(SocialType, name="social_type", schema=MEMBER_SCHEMA),
        nullable=False,
    ),
    Column("email", Text, nullable=False),
    Column("nickname", Text, nullable=False),
    Column("image_url", Text),
    Column(
        "role",
        Enum(Role, name="member_role", schema=MEMBER_SCHEMA),
        nullable=False,
        server_default=Role.USER.name,
    ),
    Column("oauth_refresh_token", Text),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_at", DateTime(timezone=True)),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("social_id", "social_type", name=UQ_MEMBERS_SOCIAL),
    UniqueConstraint("email", name=UQ_MEMBERS_EMAIL),
    UniqueConstraint("nickname", name=UQ_MEMBERS_NICKNAME),
    CheckConstraint("deleted = (deleted_at IS NOT NULL)", name="ck_members_deleted_at"),
)


def start_members_mapper() -> None:
    """Members 매퍼 시작.

    Note:
        Imperative Mapping 사용.
        도메인 엔티티가 SQLAlchemy에 의존하지 않도록 합니다.
    """
    from apps.member.domain.entities.member import Member

    # 이미 매핑된 경우 스킵
    if hasattr(Member, "__mapper__"):
        return

    mapper_registry.map_imperatively(Member, members_table)
