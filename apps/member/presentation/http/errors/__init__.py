"""HTTP error handling."""

from apps.member.presentation.http.errors.handlers import register_exception_handlers
from apps.member.presentation.http.errors.translators import translate_error

__all__ = ["register_exception_handlers", "translate_error"]
