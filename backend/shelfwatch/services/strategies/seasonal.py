"""Seasonal products: restock must land inside the selling season."""

import logging
from datetime import timedelta

from shelfwatch.models.product import SEASONAL, Product
from shelfwatch.services.strategies.base import BaseProductStrategy, register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class SeasonalProductStrategy(BaseProductStrategy):
    product_type = SEASONAL

    async def handle(self, product: Product) -> None:
        now = self.clock()
        projected_restock = now + timedelta(days=product.lead_time)

        # Restock arrives after the season is over
        if projected_restock > product.season_end_date:
            logger.info(
                "Seasonal product %s: restock %s is after season end %s",
                product.id,
                projected_restock,
                product.season_end_date,
            )
            await self.notifications.send_out_of_stock_notification(product.name)
            product.available = 0
            await self.repository.save(product)
        elif product.season_start_date > now:
            logger.info(
                "Seasonal product %s: season starts %s",
                product.id,
                product.season_start_date,
            )
            await self.notifications.send_out_of_stock_notification(product.name)
            await self.repository.save(product)
        else:
            logger.info(
                "Seasonal product %s: in season, restock in %d days",
                product.id,
                product.lead_time,
            )
            await self.notify_delay(product.lead_time, product)
