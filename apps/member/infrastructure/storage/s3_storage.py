"""S3 Object Storage.

ObjectStorage 포트의 구현체입니다.
boto3 호출은 블로킹이므로 스레드에서 실행합니다.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING, Sequence
from uuid import uuid4

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from apps.member.application.member.exceptions import StorageError

if TYPE_CHECKING:
    from botocore.client import BaseClient

    from apps.member.application.member.ports import UploadFile

logger = logging.getLogger(__name__)

PROFILE_IMAGE_PREFIX = "profile"


class S3ObjectStorage:
    """S3 기반 오브젝트 스토리지.

    키 형식: profile/{owner_key}/{uuid}{ext}
    공개 URL: {public_domain}/{key}
    """

    def __init__(
        self,
        *,
        bucket: str,
        public_domain: str,
        region: str | None = None,
        s3_client: "BaseClient | None" = None,
    ) -> None:
        self._bucket = bucket
        self._public_domain = public_domain.rstrip("/")
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    async def upload(self, owner_key: str, files: Sequence["UploadFile"]) -> list[str]:
        """파일 업로드 후 공개 URL 목록 반환."""
        urls: list[str] = []
        for file in files:
            if not file.content:
                continue

            key = self._build_object_key(owner_key, file.filename)
            params = {"Bucket": self._bucket, "Key": key, "Body": file.content}
            if file.content_type:
                params["ContentType"] = file.content_type

            try:
                await asyncio.to_thread(self._s3_client.put_object, **params)
            except (BotoCoreError, ClientError) as e:
                logger.error("S3 upload failed", extra={"key": key, "error": str(e)})
                raise StorageError(f"Failed to upload {file.filename}") from e

            urls.append(self._compose_url(key))
            logger.info("Object uploaded", extra={"key": key})
        return urls

    async def delete(self, url: str) -> None:
        """URL이 가리키는 오브젝트 삭제. 이 버킷의 URL이 아니면 무시합니다."""
        key = self._extract_key(url)
        if key is None:
            logger.info("Skipping delete of unmanaged url", extra={"url": url})
            return

        try:
            await asyncio.to_thread(self._s3_client.delete_object, Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 delete failed", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to delete {key}") from e

        logger.info("Object deleted", extra={"key": key})

    def _build_object_key(self, owner_key: str, filename: str) -> str:
        _, ext = os.path.splitext(filename)
        sanitized_ext = ext.lower() or ".bin"
        return f"{PROFILE_IMAGE_PREFIX}/{owner_key}/{uuid4().hex}{sanitized_ext}"

    def _compose_url(self, key: str) -> str:
        return f"{self._public_domain}/{key}"

    def _extract_key(self, url: str) -> str | None:
        prefix = f"{self._public_domain}/"
        if not url.startswith(prefix):
            return None
        return url[len(prefix):] or None
