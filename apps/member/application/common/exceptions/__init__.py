"""Application Exceptions.

공통 예외만 포함합니다. 도메인별 예외는 각 도메인에서 직접 import하세요:
  - apps.member.application.oauth.exceptions.*
  - apps.member.application.member.exceptions.*
  - apps.member.application.token.exceptions.*
"""

from apps.member.application.common.exceptions.base import ApplicationError
from apps.member.application.common.exceptions.gateway import GatewayError

__all__ = [
    "ApplicationError",
    "GatewayError",
]
