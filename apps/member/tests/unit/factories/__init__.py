"""Test Factories.

테스트용 객체 생성 팩토리와 in-memory 포트 구현.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import fields
from typing import AsyncIterator
from uuid import UUID

from apps.member.application.common.exceptions import GatewayError
from apps.member.application.member.exceptions import NicknameConflictError
from apps.member.domain.entities.member import Member, anonymize
from apps.member.domain.enums.social_type import SocialType


def create_member(
    *,
    social_id: str = "social-123",
    social_type: SocialType = SocialType.KAKAO,
    nickname: str = "귀여운고양이#07",
    email: str | None = None,
    image_url: str | None = None,
    oauth_refresh_token: str | None = None,
    deleted: bool = False,
) -> Member:
    """테스트용 Member 생성."""
    member = Member.register(
        social_id=social_id,
        social_type=social_type,
        nickname=nickname,
        email=email,
        image_url=image_url,
        oauth_refresh_token=oauth_refresh_token,
    )
    if deleted:
        member = anonymize(member)
    return member


class InMemoryMemberGateway:
    """MemberGateway in-memory 구현.

    유니크 제약((social_id, social_type), email, nickname)을 흉내냅니다.
    reserved_nicknames에 넣은 닉네임은 exists_by_nickname에는 보이지 않지만
    save 시점에 한 번 충돌합니다 (동시 가입 시뮬레이션).

    save는 session.merge처럼 이미 저장된 인스턴스에 값을 덮어쓰고
    그 인스턴스를 반환합니다.
    """

    def __init__(self) -> None:
        self.members: dict[UUID, Member] = {}
        self.reserved_nicknames: set[str] = set()
        self.save_calls = 0

    def add(self, member: Member) -> Member:
        self.members[member.id] = member
        return member

    async def get_by_id(self, member_id: UUID) -> Member | None:
        return self.members.get(member_id)

    async def get_by_social_id(self, social_id: str, social_type: SocialType) -> Member | None:
        for member in self.members.values():
            if member.social_id == social_id and member.social_type == social_type:
                return member
        return None

    async def get_by_email(self, email: str) -> Member | None:
        for member in self.members.values():
            if member.email == email:
                return member
        return None

    async def exists_by_nickname(self, nickname: str) -> bool:
        return any(m.nickname == nickname for m in self.members.values())

    async def save(self, member: Member) -> Member:
        self.save_calls += 1
        if member.nickname in self.reserved_nicknames:
            self.reserved_nicknames.discard(member.nickname)
            raise NicknameConflictError(member.nickname)

        for other in self.members.values():
            if other.id == member.id:
                continue
            if other.nickname == member.nickname:
                raise NicknameConflictError(member.nickname)
            if other.email == member.email:
                raise GatewayError("email unique constraint violated")
            if (other.social_id, other.social_type) == (member.social_id, member.social_type):
                raise GatewayError("social identity unique constraint violated")

        stored = self.members.get(member.id)
        if stored is None:
            self.members[member.id] = member
            return member
        for field in fields(stored):
            setattr(stored, field.name, getattr(member, field.name))
        return stored


class FakeTransactionManager:
    """커밋/롤백 횟수를 기록하는 TransactionManager."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        try:
            yield
        except BaseException:
            self.rollbacks += 1
            raise
        else:
            self.commits += 1

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


class InMemoryRefreshTokenStore:
    """RefreshTokenStore in-memory 구현."""

    def __init__(self) -> None:
        self.current: dict[str, str] = {}

    async def save(self, subject: str, jti: str, expires_at: int) -> None:
        self.current[subject] = jti

    async def rotate(
        self,
        subject: str,
        *,
        old_jti: str,
        new_jti: str,
        expires_at: int,
    ) -> bool:
        if self.current.get(subject) != old_jti:
            return False
        self.current[subject] = new_jti
        return True

    async def delete(self, subject: str) -> None:
        self.current.pop(subject, None)
