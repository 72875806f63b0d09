"""Member API Application Entry Point.

Clean Architecture 기반 회원/인증 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.member.presentation.http.controllers import root_router
from apps.member.presentation.http.errors import register_exception_handlers
from apps.member.setup.config import get_settings
from apps.member.setup.logging import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    logger.info("Starting Member API")

    # ORM 매퍼 시작
    from apps.member.infrastructure.persistence_postgres.mappings import start_all_mappers

    start_all_mappers()
    logger.info("ORM mappers initialized")

    yield

    logger.info("Shutting down Member API")
    from apps.member.infrastructure.persistence_postgres.session import dispose_engine

    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    setup_logging("DEBUG" if settings.environment == "local" else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="소셜 로그인 회원/세션 서비스 (Clean Architecture)",
        version=settings.service_version,
        lifespan=lifespan,
    )

    cors_origins = (
        [origin.strip() for origin in settings.cors_origins.split(",")]
        if settings.cors_origins
        else DEFAULT_CORS_ORIGINS
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.member.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "local",
    )
