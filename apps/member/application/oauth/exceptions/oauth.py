"""OAuth Exceptions."""

from apps.member.application.common.exceptions.base import ApplicationError


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 통신 오류.

    인프라 어댑터가 발생시키며, 유스케이스가 로그인/연결 해제 맥락에 맞게
    OAuthLoginError 또는 OAuthUnlinkError로 다시 분류합니다.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"OAuth provider error ({provider}): {reason}")


class OAuthLoginError(ApplicationError):
    """로그인 중 프로바이더 연동 실패 (BadRequest)."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Failed to access {provider} OAuth service")


class OAuthUnlinkError(ApplicationError):
    """탈퇴 중 프로바이더 연결 해제 실패 (InternalServerError)."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Failed to unlink {provider} account")


class MissingOAuthCredentialError(ApplicationError):
    """인가 코드/액세스 토큰 누락."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Missing OAuth credential for {provider}")


class MissingOAuthRefreshTokenError(ApplicationError):
    """연결 해제에 필요한 프로바이더 리프레시 토큰 누락."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Missing OAuth refresh token for {provider}")


class MissingProviderUserIdError(ApplicationError):
    """프로바이더 응답에 사용자 ID가 없음."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Provider user id is missing ({provider})")


class UnsupportedProviderError(ApplicationError):
    """지원하지 않는 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported OAuth provider: {provider}")
