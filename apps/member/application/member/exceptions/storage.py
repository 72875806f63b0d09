"""Storage Exceptions."""

from apps.member.application.common.exceptions.gateway import GatewayError


class StorageError(GatewayError):
    """오브젝트 스토리지 업로드/삭제 실패."""

    def __init__(self, reason: str = "Object storage request failed") -> None:
        super().__init__(reason)
