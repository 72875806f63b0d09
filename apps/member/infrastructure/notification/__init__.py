"""Notification adapters."""

from apps.member.infrastructure.notification.slack_notifier import (
    SlackRegistrationNotifier,
)

__all__ = ["SlackRegistrationNotifier"]
