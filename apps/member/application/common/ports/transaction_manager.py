"""Transaction manager port."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리 포트.

    begin() 블록이 정상 종료되면 커밋, 예외로 빠져나가면 롤백합니다.
    """

    def begin(self) -> AbstractAsyncContextManager[None]:
        """트랜잭션을 시작합니다."""
        ...

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        ...

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        ...
