"""Product strategy factory: picks the strategy for a product's type."""

import logging

from shelfwatch.core.types import utcnow
from shelfwatch.models.product import Product
from shelfwatch.services.notifications.base import BaseNotificationService
from shelfwatch.services.product_repository import ProductRepository
from shelfwatch.services.strategies.base import (
    BaseProductStrategy,
    Clock,
    get_strategy_class,
)
from shelfwatch.services.strategies.normal import NormalProductStrategy

logger = logging.getLogger(__name__)


class ProductStrategyFactory:
    def __init__(
        self,
        repository: ProductRepository,
        notifications: BaseNotificationService,
        clock: Clock = utcnow,
    ):
        self.repository = repository
        self.notifications = notifications
        self.clock = clock

    def get_strategy(self, product: Product) -> BaseProductStrategy:
        """Build a fresh strategy for the product.

        Unknown types are processed as normal products.
        """
        strategy_class = get_strategy_class(product.type)
        if strategy_class is None:
            logger.debug(
                "Product %s has unknown type %r, using %s",
                product.id,
                product.type,
                NormalProductStrategy.__name__,
            )
            strategy_class = NormalProductStrategy
        return strategy_class(self.repository, self.notifications, self.clock)
