"""Member application exceptions."""

from apps.member.application.member.exceptions.gateway import NicknameConflictError
from apps.member.application.member.exceptions.storage import StorageError

__all__ = ["NicknameConflictError", "StorageError"]
