"""Token Controller.

토큰 재발급/로그아웃 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status

from apps.member.application.token.commands import LogoutInteractor, ReissueTokensInteractor
from apps.member.application.token.dto import LogoutRequest, ReissueTokensRequest
from apps.member.presentation.http.auth.dependencies import (
    REFRESH_TOKEN_HEADER,
    get_access_token,
    parse_bearer,
)
from apps.member.presentation.http.schemas import TokenResponse
from apps.member.setup.dependencies import (
    get_logout_interactor,
    get_reissue_tokens_interactor,
)

router = APIRouter()


@router.post(
    "/token-reissue",
    response_model=TokenResponse,
    response_model_by_alias=True,
    summary="토큰 재발급",
)
async def reissue(
    refresh_authorization: Optional[str] = Header(None, alias=REFRESH_TOKEN_HEADER),
    interactor: ReissueTokensInteractor = Depends(get_reissue_tokens_interactor),
) -> TokenResponse:
    """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

    사용한 리프레시 토큰은 즉시 무효화됩니다.
    """
    refresh_token = parse_bearer(refresh_authorization)
    if not refresh_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token is required",
        )

    result = await interactor.execute(ReissueTokensRequest(refresh_token=refresh_token))
    return TokenResponse(access_token=result.access_token, refresh_token=result.refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="로그아웃")
async def logout(
    access_token: str = Depends(get_access_token),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
) -> Response:
    """현재 리프레시 토큰을 폐기합니다."""
    await interactor.execute(LogoutRequest(access_token=access_token))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
