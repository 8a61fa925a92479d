"""Services for the core app."""

from core.services.email_service import EmailService
from core.services.reply_notification_service import (
    ReplyNotificationService,
    reply_notification_service,
)
from core.services.settings_service import (
    ReplySettingsService,
    reply_settings_service,
)

__all__ = [
    "EmailService",
    "ReplyNotificationService",
    "ReplySettingsService",
    "reply_notification_service",
    "reply_settings_service",
]
