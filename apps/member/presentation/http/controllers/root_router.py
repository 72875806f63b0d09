"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.member.presentation.http.controllers.general.router import (
    router as general_router,
)
from apps.member.presentation.http.controllers.member.router import (
    router as member_router,
)

router = APIRouter()

# Member endpoints
router.include_router(member_router, prefix="/api/v2/member", tags=["member"])

# General endpoints (health)
router.include_router(general_router, tags=["general"])
