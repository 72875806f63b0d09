"""OAuth Provider Base Class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from apps.member.application.oauth.exceptions import OAuthProviderError

if TYPE_CHECKING:
    import httpx

    from apps.member.application.oauth.dto import ExternalIdentity


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    세 가지 작업(자격 증명 교환, 액세스 토큰 재발급, 연결 해제)을 제공합니다.
    HTTP 오류는 OAuthClientImpl이 OAuthProviderError로 변환합니다.
    """

    name: str

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    @abstractmethod
    async def exchange(
        self,
        *,
        client: "httpx.AsyncClient",
        credential: str,
    ) -> "ExternalIdentity":
        """로그인 자격 증명으로 사용자 정보 조회."""
        raise NotImplementedError

    @abstractmethod
    async def refresh_access_token(
        self,
        *,
        client: "httpx.AsyncClient",
        refresh_token: str,
    ) -> str:
        """리프레시 토큰으로 액세스 토큰 발급."""
        raise NotImplementedError

    @abstractmethod
    async def unlink(
        self,
        *,
        client: "httpx.AsyncClient",
        target: str,
    ) -> None:
        """앱 연결 해제."""
        raise NotImplementedError

    def _require(self, payload: dict[str, Any], key: str) -> Any:
        """응답 필드 추출. 없으면 OAuthProviderError."""
        value = payload.get(key)
        if not value:
            raise OAuthProviderError(self.name, f"Missing '{key}' in provider response")
        return value
