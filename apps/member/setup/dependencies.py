"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncGenerator

import redis.asyncio as aioredis
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.member.application.member.commands import (
    ChangeNicknameInteractor,
    DeleteMemberInteractor,
    LoginInteractor,
    UpdateProfileImageInteractor,
)
from apps.member.application.member.queries import GetMemberInfoQuery
from apps.member.application.member.services import (
    MemberReconciliationService,
    UnlinkStrategyRegistry,
)
from apps.member.application.token.commands import LogoutInteractor, ReissueTokensInteractor
from apps.member.application.token.queries import AuthenticateMemberQuery
from apps.member.application.token.services import TokenService
from apps.member.infrastructure.notification import SlackRegistrationNotifier
from apps.member.infrastructure.oauth import OAuthClientImpl, ProviderRegistry
from apps.member.infrastructure.persistence_postgres.adapters import (
    SqlaMemberGateway,
    SqlaTransactionManager,
)
from apps.member.infrastructure.persistence_redis import RedisRefreshTokenStore
from apps.member.infrastructure.security import JwtTokenService
from apps.member.infrastructure.storage import S3ObjectStorage
from apps.member.setup.config import get_settings


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """DB 세션 제공자."""
    from apps.member.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_token_redis() -> aioredis.Redis:
    """리프레시 토큰용 Redis 클라이언트 제공자."""
    from apps.member.infrastructure.persistence_redis.client import get_token_redis

    return get_token_redis()


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_member_gateway(
    session: AsyncSession = Depends(get_db_session),
) -> SqlaMemberGateway:
    """MemberGateway 제공자."""
    return SqlaMemberGateway(session)


async def get_transaction_manager(
    session: AsyncSession = Depends(get_db_session),
) -> SqlaTransactionManager:
    """TransactionManager 제공자."""
    return SqlaTransactionManager(session)


def get_refresh_token_store(
    redis: aioredis.Redis = Depends(get_token_redis),
) -> RedisRefreshTokenStore:
    """RefreshTokenStore 제공자."""
    return RedisRefreshTokenStore(redis)


@lru_cache
def get_provider_gateway() -> OAuthClientImpl:
    """IdentityProviderGateway 제공자 (싱글톤)."""
    settings = get_settings()
    return OAuthClientImpl(
        ProviderRegistry.from_settings(settings),
        timeout_seconds=settings.oauth_timeout_seconds,
    )


@lru_cache
def get_token_issuer() -> JwtTokenService:
    """TokenIssuer 제공자 (싱글톤)."""
    settings = get_settings()
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_exp_minutes,
        refresh_token_expire_minutes=settings.refresh_token_exp_minutes,
    )


@lru_cache
def get_object_storage() -> S3ObjectStorage:
    """ObjectStorage 제공자 (싱글톤)."""
    settings = get_settings()
    return S3ObjectStorage(
        bucket=settings.s3_bucket,
        public_domain=settings.s3_public_domain,
        region=settings.aws_region,
    )


@lru_cache
def get_registration_notifier() -> SlackRegistrationNotifier:
    """RegistrationNotifier 제공자 (싱글톤)."""
    settings = get_settings()
    return SlackRegistrationNotifier(
        settings.slack_webhook_url,
        timeout_seconds=settings.slack_timeout_seconds,
        environment=settings.environment,
    )


# ============================================================
# Service Dependencies (연주자)
# ============================================================


def get_token_service(
    issuer: JwtTokenService = Depends(get_token_issuer),
    refresh_token_store: RedisRefreshTokenStore = Depends(get_refresh_token_store),
) -> TokenService:
    """TokenService 제공자."""
    return TokenService(issuer, refresh_token_store)


def get_reconciliation_service(
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
) -> MemberReconciliationService:
    """MemberReconciliationService 제공자."""
    return MemberReconciliationService(member_gateway)


def get_unlink_strategies(
    provider_gateway: OAuthClientImpl = Depends(get_provider_gateway),
) -> UnlinkStrategyRegistry:
    """UnlinkStrategyRegistry 제공자."""
    return UnlinkStrategyRegistry.default(provider_gateway)


# ============================================================
# UseCase Dependencies (지휘자)
# ============================================================


def get_login_interactor(
    reconciliation: MemberReconciliationService = Depends(get_reconciliation_service),
    token_service: TokenService = Depends(get_token_service),
    provider_gateway: OAuthClientImpl = Depends(get_provider_gateway),
    notifier: SlackRegistrationNotifier = Depends(get_registration_notifier),
    transaction_manager: SqlaTransactionManager = Depends(get_transaction_manager),
) -> LoginInteractor:
    """LoginInteractor 제공자."""
    return LoginInteractor(
        reconciliation=reconciliation,
        token_service=token_service,
        provider_gateway=provider_gateway,
        notifier=notifier,
        transaction_manager=transaction_manager,
    )


def get_reissue_tokens_interactor(
    token_service: TokenService = Depends(get_token_service),
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
) -> ReissueTokensInteractor:
    """ReissueTokensInteractor 제공자."""
    return ReissueTokensInteractor(token_service=token_service, member_gateway=member_gateway)


def get_logout_interactor(
    token_service: TokenService = Depends(get_token_service),
) -> LogoutInteractor:
    """LogoutInteractor 제공자."""
    return LogoutInteractor(token_service=token_service)


def get_delete_member_interactor(
    unlink_strategies: UnlinkStrategyRegistry = Depends(get_unlink_strategies),
    token_service: TokenService = Depends(get_token_service),
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
    object_storage: S3ObjectStorage = Depends(get_object_storage),
    transaction_manager: SqlaTransactionManager = Depends(get_transaction_manager),
) -> DeleteMemberInteractor:
    """DeleteMemberInteractor 제공자."""
    return DeleteMemberInteractor(
        unlink_strategies=unlink_strategies,
        token_service=token_service,
        member_gateway=member_gateway,
        object_storage=object_storage,
        transaction_manager=transaction_manager,
    )


def get_change_nickname_interactor(
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
    transaction_manager: SqlaTransactionManager = Depends(get_transaction_manager),
) -> ChangeNicknameInteractor:
    """ChangeNicknameInteractor 제공자."""
    return ChangeNicknameInteractor(member_gateway, transaction_manager)


def get_update_profile_image_interactor(
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
    object_storage: S3ObjectStorage = Depends(get_object_storage),
    transaction_manager: SqlaTransactionManager = Depends(get_transaction_manager),
) -> UpdateProfileImageInteractor:
    """UpdateProfileImageInteractor 제공자."""
    return UpdateProfileImageInteractor(member_gateway, object_storage, transaction_manager)


# ============================================================
# Query Dependencies
# ============================================================


def get_authenticate_member_query(
    token_service: TokenService = Depends(get_token_service),
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
) -> AuthenticateMemberQuery:
    """AuthenticateMemberQuery 제공자."""
    return AuthenticateMemberQuery(token_service=token_service, member_gateway=member_gateway)


def get_member_info_query(
    member_gateway: SqlaMemberGateway = Depends(get_member_gateway),
) -> GetMemberInfoQuery:
    """GetMemberInfoQuery 제공자."""
    return GetMemberInfoQuery(member_gateway)
