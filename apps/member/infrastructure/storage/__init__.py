"""Object storage adapters."""

from apps.member.infrastructure.storage.s3_storage import S3ObjectStorage

__all__ = ["S3ObjectStorage"]
