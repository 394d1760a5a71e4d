"""Log-only notification sender for development without a Telegram bot."""

import logging
from datetime import datetime
from typing import Any

from shelfwatch.services.notifications.base import BaseNotificationService

logger = logging.getLogger(__name__)


class LogNotificationService(BaseNotificationService):
    """Writes notifications to the log and remembers them in `sent`."""

    def __init__(self):
        self.sent: list[tuple[str, dict[str, Any]]] = []

    async def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        logger.info("Delay: %s restock in %d days", product_name, lead_time)
        self.sent.append(("delay", {"lead_time": lead_time, "product_name": product_name}))

    async def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.info("Out of stock: %s", product_name)
        self.sent.append(("out_of_stock", {"product_name": product_name}))

    async def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        logger.info("Expired: %s on %s", product_name, expiry_date)
        self.sent.append(
            ("expiration", {"product_name": product_name, "expiry_date": expiry_date})
        )
