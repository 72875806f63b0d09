"""SocialType Enum.

회원을 생성한 소셜 로그인 프로바이더입니다.
"""

from enum import Enum


class SocialType(str, Enum):
    """소셜 로그인 프로바이더.

    회원은 자신을 생성한 프로바이더 계정에 영구히 묶입니다.
    """

    KAKAO = "KAKAO"
    APPLE = "APPLE"
    GOOGLE = "GOOGLE"

    @property
    def provider_name(self) -> str:
        """OAuth 레지스트리 키 (소문자)."""
        return self.value.lower()

    @classmethod
    def from_provider(cls, provider: str) -> "SocialType":
        """프로바이더 이름(kakao, apple, google)에서 변환."""
        return cls(provider.strip().upper())
