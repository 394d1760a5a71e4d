"""Normal products: no lifecycle processing."""

from shelfwatch.models.product import NORMAL, Product
from shelfwatch.services.strategies.base import BaseProductStrategy, register_strategy


@register_strategy
class NormalProductStrategy(BaseProductStrategy):
    product_type = NORMAL

    async def handle(self, product: Product) -> None:
        # Delay notifications for normal products go through notify_delay
        return None
