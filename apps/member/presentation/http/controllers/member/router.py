"""Member Router.

회원/인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.member.presentation.http.controllers.member.account import router as account_router
from apps.member.presentation.http.controllers.member.login import router as login_router
from apps.member.presentation.http.controllers.member.token import router as token_router

router = APIRouter()

router.include_router(login_router)
router.include_router(token_router)
router.include_router(account_router)
