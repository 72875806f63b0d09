"""OAuth Client Implementation.

IdentityProviderGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, TypeVar

import httpx
from jose.exceptions import JOSEError

from apps.member.application.oauth.exceptions import OAuthProviderError

if TYPE_CHECKING:
    from apps.member.application.oauth.dto import ExternalIdentity
    from apps.member.infrastructure.oauth.providers import OAuthProvider
    from apps.member.infrastructure.oauth.registry import ProviderRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OAuthClientImpl:
    """OAuth 클라이언트 구현체.

    IdentityProviderGateway 구현체. 호출마다 httpx.AsyncClient를 열고,
    전송 오류, 비정상 응답, 서명 실패를 모두 OAuthProviderError로 변환합니다.
    프로바이더 응답 본문은 로그에만 남깁니다.
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            registry: OAuth 프로바이더 레지스트리
            timeout_seconds: HTTP 클라이언트 타임아웃 (설정에서 주입)
            transport: 테스트용 httpx transport (선택)
        """
        self._registry = registry
        self._timeout = timeout_seconds
        self._transport = transport

    async def exchange(self, provider: str, credential: str) -> "ExternalIdentity":
        """로그인 자격 증명 교환."""
        oauth_provider = self._registry.get(provider)
        return await self._call(
            oauth_provider,
            lambda client: oauth_provider.exchange(client=client, credential=credential),
        )

    async def refresh_access_token(self, provider: str, refresh_token: str) -> str:
        """프로바이더 액세스 토큰 재발급."""
        oauth_provider = self._registry.get(provider)
        return await self._call(
            oauth_provider,
            lambda client: oauth_provider.refresh_access_token(
                client=client,
                refresh_token=refresh_token,
            ),
        )

    async def unlink(self, provider: str, target: str) -> None:
        """프로바이더 앱 연결 해제."""
        oauth_provider = self._registry.get(provider)
        await self._call(
            oauth_provider,
            lambda client: oauth_provider.unlink(client=client, target=target),
        )
        logger.info("OAuth account unlinked", extra={"provider": provider})

    async def _call(
        self,
        oauth_provider: "OAuthProvider",
        operation: Callable[[httpx.AsyncClient], Awaitable[T]],
    ) -> T:
        provider = oauth_provider.name
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                return await operation(client)

        except httpx.HTTPStatusError as e:
            logger.warning(
                "OAuth API error",
                extra={
                    "provider": provider,
                    "status_code": e.response.status_code,
                    "response_body": e.response.text[:500],
                },
            )
            raise OAuthProviderError(provider, f"API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(
                "OAuth request failed",
                extra={"provider": provider, "error": str(e)},
            )
            raise OAuthProviderError(provider, str(e)) from e
        except ValueError as e:
            # JSON 디코딩 실패 등 비정상 응답
            logger.warning(
                "Malformed OAuth response",
                extra={"provider": provider, "error": str(e)},
            )
            raise OAuthProviderError(provider, "Malformed provider response") from e
        except JOSEError as e:
            # 클라이언트 시크릿 서명 실패 (키 설정 오류)
            logger.error(
                "OAuth credential signing failed",
                extra={"provider": provider, "error": str(e)},
            )
            raise OAuthProviderError(provider, "Client credential signing failed") from e
