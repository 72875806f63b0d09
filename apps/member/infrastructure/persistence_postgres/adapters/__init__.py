"""PostgreSQL adapters."""

from apps.member.infrastructure.persistence_postgres.adapters.member_gateway_sqla import (
    SqlaMemberGateway,
)
from apps.member.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = ["SqlaMemberGateway", "SqlaTransactionManager"]
