"""ORM Mappings.

도메인 엔티티와 DB 테이블의 매핑을 정의합니다.
"""

from apps.member.infrastructure.persistence_postgres.mappings.members import (
    members_table,
    start_members_mapper,
)


def start_all_mappers() -> None:
    """모든 매퍼 시작."""
    start_members_mapper()


__all__ = [
    "members_table",
    "start_members_mapper",
    "start_all_mappers",
]
