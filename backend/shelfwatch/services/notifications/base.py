"""Notification port."""

from abc import ABC, abstractmethod
from datetime import datetime


class BaseNotificationService(ABC):
    """Abstract notification sender used by the product strategies."""

    @abstractmethod
    async def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        """Restock of a product is delayed by `lead_time` days."""

    @abstractmethod
    async def send_out_of_stock_notification(self, product_name: str) -> None:
        """Product will have no available units for the relevant period."""

    @abstractmethod
    async def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        """Product shelf life has ended."""
