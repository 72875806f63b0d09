"""Common Ports."""

from apps.member.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
