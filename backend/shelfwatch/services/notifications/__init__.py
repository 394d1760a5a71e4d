"""Notification senders."""

from shelfwatch.core.config import settings
from shelfwatch.services.notifications.base import BaseNotificationService
from shelfwatch.services.notifications.log import LogNotificationService
from shelfwatch.services.notifications.telegram import TelegramNotificationService

__all__ = [
    "BaseNotificationService",
    "LogNotificationService",
    "TelegramNotificationService",
    "get_notification_service",
]


def get_notification_service() -> BaseNotificationService:
    """Pick the sender from settings: log in mock mode, Telegram otherwise."""
    if settings.NOTIFICATIONS_MOCK_MODE or not settings.TELEGRAM_BOT_TOKEN:
        return LogNotificationService()
    return TelegramNotificationService(
        bot_token=settings.TELEGRAM_BOT_TOKEN,
        chat_id=settings.TELEGRAM_CHAT_ID,
        base_url=settings.TELEGRAM_API_BASE_URL,
        timeout=settings.NOTIFICATION_TIMEOUT,
    )
