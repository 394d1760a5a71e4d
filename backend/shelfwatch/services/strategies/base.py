"""Base product strategy and registry."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime

from shelfwatch.core.types import utcnow
from shelfwatch.models.product import Product
from shelfwatch.services.notifications.base import BaseNotificationService
from shelfwatch.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class BaseProductStrategy(ABC):
    """Lifecycle rules for one product type.

    `handle` may change `available` and `lead_time` in place, persist the
    product and send notifications. Errors from the repository or the
    notification sender are not caught.
    """

    product_type: str

    def __init__(
        self,
        repository: ProductRepository,
        notifications: BaseNotificationService,
        clock: Clock = utcnow,
    ):
        self.repository = repository
        self.notifications = notifications
        self.clock = clock

    @abstractmethod
    async def handle(self, product: Product) -> None:
        ...

    async def notify_delay(self, lead_time: int, product: Product) -> None:
        """Record the new lead time, persist, then send a delay notification."""
        product.lead_time = lead_time
        await self.repository.save(product)
        await self.notifications.send_delay_notification(lead_time, product.name)


# Strategy registry
_registry: dict[str, type[BaseProductStrategy]] = {}


def register_strategy(strategy_class: type[BaseProductStrategy]):
    """Register a strategy class for its product type."""
    _registry[strategy_class.product_type] = strategy_class
    return strategy_class


def get_strategy_class(product_type: str) -> type[BaseProductStrategy] | None:
    return _registry.get(product_type)
