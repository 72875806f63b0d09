"""S3ObjectStorage Tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from apps.member.application.member.exceptions import StorageError
from apps.member.application.member.ports import UploadFile
from apps.member.infrastructure.storage import S3ObjectStorage

PUBLIC_DOMAIN = "https://cdn.example.com"


def _client_error(operation: str) -> ClientError:
    return ClientError({"Error": {"Code": "500", "Message": "boom"}}, operation)


class TestS3ObjectStorage:
    """S3ObjectStorage 테스트."""

    @pytest.fixture
    def s3_client(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def storage(self, s3_client: MagicMock) -> S3ObjectStorage:
        return S3ObjectStorage(
            bucket="memo-bucket",
            public_domain=f"{PUBLIC_DOMAIN}/",
            s3_client=s3_client,
        )

    @pytest.mark.asyncio
    async def test_upload_returns_public_urls(
        self,
        storage: S3ObjectStorage,
        s3_client: MagicMock,
    ) -> None:
        file = UploadFile(filename="Me.PNG", content=b"png", content_type="image/png")

        urls = await storage.upload("me@example.com", [file])

        assert len(urls) == 1
        kwargs = s3_client.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "memo-bucket"
        assert kwargs["Key"].startswith("profile/me@example.com/")
        assert kwargs["Key"].endswith(".png")
        assert kwargs["ContentType"] == "image/png"
        assert urls[0] == f"{PUBLIC_DOMAIN}/{kwargs['Key']}"

    @pytest.mark.asyncio
    async def test_upload_skips_empty_files(
        self,
        storage: S3ObjectStorage,
        s3_client: MagicMock,
    ) -> None:
        urls = await storage.upload("owner", [UploadFile(filename="a.png", content=b"")])

        assert urls == []
        s3_client.put_object.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_failure(self, storage: S3ObjectStorage, s3_client: MagicMock) -> None:
        s3_client.put_object.side_effect = _client_error("PutObject")

        with pytest.raises(StorageError):
            await storage.upload("owner", [UploadFile(filename="a.png", content=b"x")])

    @pytest.mark.asyncio
    async def test_delete_managed_url(
        self,
        storage: S3ObjectStorage,
        s3_client: MagicMock,
    ) -> None:
        await storage.delete(f"{PUBLIC_DOMAIN}/profile/owner/abc.png")

        s3_client.delete_object.assert_called_once_with(
            Bucket="memo-bucket",
            Key="profile/owner/abc.png",
        )

    @pytest.mark.asyncio
    async def test_delete_ignores_foreign_url(
        self,
        storage: S3ObjectStorage,
        s3_client: MagicMock,
    ) -> None:
        """카카오 프로필 이미지처럼 외부 URL은 삭제하지 않습니다."""
        await storage.delete("https://k.kakaocdn.net/p.png")

        s3_client.delete_object.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_failure(self, storage: S3ObjectStorage, s3_client: MagicMock) -> None:
        s3_client.delete_object.side_effect = _client_error("DeleteObject")

        with pytest.raises(StorageError):
            await storage.delete(f"{PUBLIC_DOMAIN}/profile/owner/abc.png")
