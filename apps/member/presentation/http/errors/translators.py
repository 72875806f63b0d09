"""Error Translators.

도메인/애플리케이션 예외를 (HTTP 상태 코드, 에러 코드)로 변환합니다.
더 구체적인 예외가 먼저 오도록 순서를 유지합니다.
"""

from apps.member.application.common.exceptions import ApplicationError, GatewayError
from apps.member.application.member.exceptions import StorageError
from apps.member.application.oauth.exceptions import (
    MissingOAuthCredentialError,
    MissingOAuthRefreshTokenError,
    MissingProviderUserIdError,
    OAuthLoginError,
    OAuthProviderError,
    OAuthUnlinkError,
    UnsupportedProviderError,
)
from apps.member.application.token.exceptions import AuthenticationError
from apps.member.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenRevokedError,
    TokenTypeMismatchError,
)
from apps.member.domain.exceptions.base import DomainError
from apps.member.domain.exceptions.member import (
    MemberAlreadyDeletedError,
    MemberNotFoundError,
    NicknameAlreadyExistsError,
)

ERROR_TABLE: tuple[tuple[type[Exception], int, str], ...] = (
    # 401
    (TokenExpiredError, 401, "TOKEN_EXPIRED"),
    (TokenRevokedError, 401, "TOKEN_REVOKED"),
    (TokenTypeMismatchError, 401, "TOKEN_TYPE_MISMATCH"),
    (InvalidTokenError, 401, "INVALID_TOKEN"),
    (AuthenticationError, 401, "AUTHENTICATION_FAILED"),
    # 404
    (MemberNotFoundError, 404, "MEMBER_NOT_FOUND"),
    # 400
    (MemberAlreadyDeletedError, 400, "MEMBER_ALREADY_DELETED"),
    (NicknameAlreadyExistsError, 400, "NICKNAME_ALREADY_EXISTS"),
    (OAuthLoginError, 400, "OAUTH_LOGIN_FAILED"),
    (MissingOAuthCredentialError, 400, "MISSING_OAUTH_CREDENTIAL"),
    (MissingProviderUserIdError, 400, "MISSING_PROVIDER_USER_ID"),
    (UnsupportedProviderError, 400, "UNSUPPORTED_PROVIDER"),
    # 500
    (OAuthUnlinkError, 500, "OAUTH_UNLINK_FAILED"),
    (MissingOAuthRefreshTokenError, 500, "MISSING_OAUTH_REFRESH_TOKEN"),
    (OAuthProviderError, 500, "OAUTH_PROVIDER_ERROR"),
    (StorageError, 500, "STORAGE_ERROR"),
    (GatewayError, 500, "STORAGE_ERROR"),
    # fallback
    (DomainError, 400, "DOMAIN_ERROR"),
    (ApplicationError, 400, "APPLICATION_ERROR"),
)


def translate_error(exc: Exception) -> tuple[int, str]:
    """예외를 (status_code, code) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, 에러 코드). 매핑이 없으면 (500, INTERNAL_SERVER_ERROR)
    """
    for exc_type, status_code, code in ERROR_TABLE:
        if isinstance(exc, exc_type):
            return status_code, code
    return 500, "INTERNAL_SERVER_ERROR"
