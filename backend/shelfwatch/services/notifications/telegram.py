"""Telegram Bot API notification sender."""

import logging
from datetime import datetime
from typing import Any

import httpx

from shelfwatch.services.notifications.base import BaseNotificationService

logger = logging.getLogger(__name__)


class TelegramNotificationService(BaseNotificationService):
    """Sends each notification as a message to one chat."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        base_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.chat_id = chat_id
        self.url = f"{base_url.rstrip('/')}/bot{bot_token}/sendMessage"
        self.timeout = timeout
        self.transport = transport

    async def _send(self, text: str) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    self.url, json={"chat_id": self.chat_id, "text": text}
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.error("Telegram notification failed: %s", e)
                raise
            return response.json()

    async def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        await self._send(f"⏳ {product_name}: restock delayed, expected in {lead_time} days")

    async def send_out_of_stock_notification(self, product_name: str) -> None:
        await self._send(f"🚫 {product_name}: out of stock")

    async def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        await self._send(
            f"⌛ {product_name}: expired on {expiry_date:%Y-%m-%d %H:%M} UTC"
        )
