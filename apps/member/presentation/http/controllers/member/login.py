"""Login Controller.

소셜 로그인 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Header

from apps.member.application.member.commands import LoginInteractor
from apps.member.application.member.dto import LoginRequest
from apps.member.domain.enums.social_type import SocialType
from apps.member.presentation.http.schemas import (
    AppleLoginRequest,
    GoogleLoginRequest,
    KakaoLoginRequest,
    LoginResponse,
)
from apps.member.setup.dependencies import get_login_interactor

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_by_alias=True,
    summary="카카오 로그인",
)
async def kakao_login(
    access_token: Optional[str] = Header(None, alias="accessToken"),
    body: Optional[KakaoLoginRequest] = Body(None),
    interactor: LoginInteractor = Depends(get_login_interactor),
) -> LoginResponse:
    """Kakao 액세스 토큰으로 로그인합니다.

    토큰은 accessToken 헤더 또는 본문의 accessToken으로 받습니다.
    """
    credential = access_token or (body.access_token if body else None)
    result = await interactor.execute(
        LoginRequest(provider=SocialType.KAKAO.provider_name, credential=credential)
    )
    return LoginResponse.from_result(result)


@router.post(
    "/apple-login",
    response_model=LoginResponse,
    response_model_by_alias=True,
    summary="애플 로그인",
)
async def apple_login(
    request: AppleLoginRequest,
    interactor: LoginInteractor = Depends(get_login_interactor),
) -> LoginResponse:
    """Apple 인가 코드로 로그인합니다."""
    result = await interactor.execute(
        LoginRequest(provider=SocialType.APPLE.provider_name, credential=request.code)
    )
    return LoginResponse.from_result(result)


@router.post(
    "/google-login",
    response_model=LoginResponse,
    response_model_by_alias=True,
    summary="구글 로그인",
)
async def google_login(
    request: GoogleLoginRequest,
    interactor: LoginInteractor = Depends(get_login_interactor),
) -> LoginResponse:
    """Google 인가 코드로 로그인합니다."""
    result = await interactor.execute(
        LoginRequest(provider=SocialType.GOOGLE.provider_name, credential=request.code)
    )
    return LoginResponse.from_result(result)
