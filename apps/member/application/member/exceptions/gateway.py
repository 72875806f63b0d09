"""Member Gateway Exceptions."""

from apps.member.application.common.exceptions.gateway import GatewayError


class NicknameConflictError(GatewayError):
    """저장 시점에 닉네임 유니크 제약이 위반됨.

    사전 중복 검사 이후 동시 가입으로 같은 닉네임이 먼저 저장된 경우입니다.
    """

    def __init__(self, nickname: str) -> None:
        self.nickname = nickname
        super().__init__(f"Nickname unique constraint violated: {nickname}")
