"""Gateway Exceptions."""

from apps.member.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """저장소/외부 시스템 접근 실패.

    '찾을 수 없음'(None 반환)과 구분되는 전송/저장 계층 오류입니다.
    """

    def __init__(self, reason: str = "Storage access failed") -> None:
        super().__init__(reason)
