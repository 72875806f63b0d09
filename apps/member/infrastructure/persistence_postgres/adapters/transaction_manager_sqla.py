"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현.

    세션은 요청 단위로 공유되며 이미 autobegin 상태일 수 있으므로
    session.begin() 대신 블록 종료 시점에 커밋/롤백합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """블록 정상 종료 시 커밋, 예외 시 롤백."""
        try:
            yield
        except BaseException:
            await self._session.rollback()
            raise
        else:
            await self._session.commit()

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        await self._session.commit()

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        await self._session.rollback()
