"""Product persistence: load by id and full-row update by id."""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shelfwatch.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, product_id: int) -> Product | None:
        result = await self.db.execute(select(Product).where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def save(self, product: Product) -> None:
        """Overwrite every column of the stored row with the in-memory values.

        The session is flushed but not committed.
        """
        values = {
            column.key: getattr(product, column.key)
            for column in Product.__mapper__.column_attrs
            if column.key != "id"
        }
        await self.db.execute(
            update(Product).where(Product.id == product.id).values(**values)
        )
        await self.db.flush()
        logger.debug("Saved product %d: %s", product.id, values)
