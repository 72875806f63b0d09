"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from apps.member.application.token.queries import AuthenticateMemberQuery
from apps.member.domain.entities.member import Member
from apps.member.setup.dependencies import get_authenticate_member_query

ACCESS_TOKEN_HEADER = "Authorization"
REFRESH_TOKEN_HEADER = "Authorization-Refresh"


def parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def get_access_token(
    authorization: Optional[str] = Header(None, alias=ACCESS_TOKEN_HEADER),
) -> str:
    """Authorization 헤더의 액세스 토큰.

    Raises:
        HTTPException: 헤더 누락 또는 Bearer 형식 아님
    """
    access_token = parse_bearer(authorization)
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return access_token


async def get_current_member(
    access_token: str = Depends(get_access_token),
    query: AuthenticateMemberQuery = Depends(get_authenticate_member_query),
) -> Member:
    """현재 인증된 회원 조회.

    검증 실패는 AuthenticationError/TokenExpiredError로 전파되어 401로 변환됩니다.
    """
    return await query.execute(access_token)
