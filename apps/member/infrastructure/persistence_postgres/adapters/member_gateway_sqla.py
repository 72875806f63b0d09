"""SQLAlchemy implementation of member gateway."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.member.application.common.exceptions import GatewayError
from apps.member.application.member.exceptions import NicknameConflictError
from apps.member.domain.entities.member import Member
from apps.member.domain.enums.social_type import SocialType
from apps.member.infrastructure.persistence_postgres.constants import UQ_MEMBERS_NICKNAME
from apps.member.infrastructure.persistence_postgres.mappings.members import members_table

logger = logging.getLogger(__name__)


class SqlaMemberGateway:
    """회원 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, member_id: UUID) -> Member | None:
        """ID로 회원을 조회합니다."""
        return await self._fetch_one(select(Member).where(members_table.c.id == member_id))

    async def get_by_social_id(self, social_id: str, social_type: SocialType) -> Member | None:
        """프로바이더 계정으로 회원을 조회합니다 (탈퇴 회원 포함)."""
        stmt = select(Member).where(
            members_table.c.social_id == social_id,
            members_table.c.social_type == social_type,
        )
        return await self._fetch_one(stmt)

    async def get_by_email(self, email: str) -> Member | None:
        """이메일로 회원을 조회합니다."""
        return await self._fetch_one(select(Member).where(members_table.c.email == email))

    async def exists_by_nickname(self, nickname: str) -> bool:
        """닉네임 사용 여부를 확인합니다."""
        stmt = select(exists().where(members_table.c.nickname == nickname))
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise GatewayError(str(e)) from e
        return bool(result.scalar())

    async def save(self, member: Member) -> Member:
        """회원을 저장합니다 (upsert).

        SAVEPOINT 안에서 flush하여 유니크 제약 위반 후에도 세션을 계속 쓸 수 있습니다.
        """
        try:
            async with self._session.begin_nested():
                merged = await self._session.merge(member)
                await self._session.flush()
        except IntegrityError as e:
            if UQ_MEMBERS_NICKNAME in str(e.orig):
                raise NicknameConflictError(member.nickname) from e
            logger.error(
                "Member save violated a constraint",
                extra={"member_id": str(member.id), "error": str(e.orig)},
            )
            raise GatewayError("Member constraint violated") from e
        except SQLAlchemyError as e:
            raise GatewayError(str(e)) from e
        return merged

    async def _fetch_one(self, stmt) -> Member | None:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise GatewayError(str(e)) from e
        return result.scalar_one_or_none()
