"""Expirable products: consume stock until the expiry date, then write it off."""

import logging

from shelfwatch.models.product import EXPIRABLE, Product
from shelfwatch.services.strategies.base import BaseProductStrategy, register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class ExpiredProductStrategy(BaseProductStrategy):
    product_type = EXPIRABLE

    async def handle(self, product: Product) -> None:
        now = self.clock()

        if product.available > 0 and product.expiry_date > now:
            product.available -= 1
            logger.info(
                "Expirable product %s: %d left until %s",
                product.id,
                product.available,
                product.expiry_date,
            )
            await self.repository.save(product)
        else:
            # Fires again on every call once stock is zero
            logger.info(
                "Expirable product %s: expired or empty (available=%d, expiry=%s)",
                product.id,
                product.available,
                product.expiry_date,
            )
            await self.notifications.send_expiration_notification(
                product.name, product.expiry_date
            )
            product.available = 0
            await self.repository.save(product)
