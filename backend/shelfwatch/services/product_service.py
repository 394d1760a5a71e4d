"""Product service: entry point for product lifecycle processing."""

import logging

from shelfwatch.core.types import utcnow
from shelfwatch.models.product import Product
from shelfwatch.services.notifications.base import BaseNotificationService
from shelfwatch.services.product_repository import ProductRepository
from shelfwatch.services.strategies.base import Clock
from shelfwatch.services.strategies.factory import ProductStrategyFactory

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(
        self,
        repository: ProductRepository,
        notifications: BaseNotificationService,
        clock: Clock = utcnow,
    ):
        self.factory = ProductStrategyFactory(repository, notifications, clock)

    async def notify_delay(self, lead_time: int, product: Product) -> None:
        """Set the product's lead time, persist it and send a delay notification."""
        await self.factory.get_strategy(product).notify_delay(lead_time, product)

    async def handle_product(self, product: Product) -> None:
        """Apply the lifecycle rules of the product's type."""
        strategy = self.factory.get_strategy(product)
        logger.info(
            "Handling product %s (%s) with %s",
            product.id,
            product.type,
            type(strategy).__name__,
        )
        await strategy.handle(product)

    # Entry point names used by existing callers. All dispatch by type.

    async def handle_product_update(self, product: Product) -> None:
        await self.handle_product(product)

    async def handle_seasonal_product(self, product: Product) -> None:
        await self.handle_product(product)

    async def handle_expired_product(self, product: Product) -> None:
        await self.handle_product(product)
