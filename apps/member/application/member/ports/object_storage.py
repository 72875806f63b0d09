"""ObjectStorage Port.

프로필 이미지 등 오브젝트 스토리지 업로드/삭제 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True, slots=True)
class UploadFile:
    """업로드할 파일."""

    filename: str
    content: bytes
    content_type: str | None = None


class ObjectStorage(Protocol):
    """오브젝트 스토리지.

    구현체:
        - S3ObjectStorage (infrastructure/storage/)
    """

    async def upload(self, owner_key: str, files: Sequence[UploadFile]) -> list[str]:
        """파일 업로드 후 공개 URL 목록 반환. 빈 파일은 건너뜁니다."""
        ...

    async def delete(self, url: str) -> None:
        """URL이 가리키는 오브젝트 삭제. 관리 대상이 아닌 URL은 무시합니다."""
        ...
