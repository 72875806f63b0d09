"""Member Application Services."""

from apps.member.application.member.services.reconciliation import (
    MemberReconciliationService,
    ReconciliationResult,
)
from apps.member.application.member.services.unlink_strategies import (
    AppleUnlinkStrategy,
    GoogleUnlinkStrategy,
    KakaoUnlinkStrategy,
    ProviderUnlinkStrategy,
    UnlinkStrategyRegistry,
)

__all__ = [
    "MemberReconciliationService",
    "ReconciliationResult",
    "ProviderUnlinkStrategy",
    "KakaoUnlinkStrategy",
    "AppleUnlinkStrategy",
    "GoogleUnlinkStrategy",
    "UnlinkStrategyRegistry",
]
