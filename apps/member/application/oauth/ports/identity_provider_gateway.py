"""IdentityProviderGateway Port.

OAuth 프로바이더(Kakao, Apple, Google)와의 통신을 담당하는 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.member.application.oauth.dto import ExternalIdentity


class IdentityProviderGateway(Protocol):
    """OAuth 프로바이더 Gateway 인터페이스.

    구현체:
        - OAuthClientImpl (infrastructure/oauth/)
    """

    async def exchange(self, provider: str, credential: str) -> ExternalIdentity:
        """로그인 자격 증명을 정규화된 사용자 정보로 교환.

        Args:
            provider: OAuth 프로바이더 (kakao, apple, google)
            credential: Kakao는 액세스 토큰, Apple/Google은 인가 코드

        Returns:
            정규화된 사용자 정보

        Raises:
            OAuthProviderError: 전송 오류 또는 프로바이더 오류
        """
        ...

    async def refresh_access_token(self, provider: str, refresh_token: str) -> str:
        """저장된 리프레시 토큰으로 프로바이더 액세스 토큰 발급.

        Raises:
            OAuthProviderError: 전송 오류 또는 프로바이더 오류
        """
        ...

    async def unlink(self, provider: str, target: str) -> None:
        """프로바이더 측 앱 연결 해제.

        Args:
            provider: OAuth 프로바이더
            target: Kakao는 social_id, Apple/Google은 프로바이더 액세스 토큰

        Raises:
            OAuthProviderError: 전송 오류 또는 프로바이더 오류
        """
        ...
