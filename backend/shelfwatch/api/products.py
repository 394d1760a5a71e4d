"""Product lifecycle endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from shelfwatch.core.database import get_db
from shelfwatch.models.product import Product
from shelfwatch.schemas.product import DelayNotificationRequest, ProductResponse
from shelfwatch.services.notifications import (
    BaseNotificationService,
    get_notification_service,
)
from shelfwatch.services.product_repository import ProductRepository
from shelfwatch.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


# --- Helpers ---


async def _get_product_or_404(repository: ProductRepository, product_id: int) -> Product:
    product = await repository.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# --- Endpoints ---


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_product_or_404(ProductRepository(db), product_id)


@router.post("/{product_id}/lifecycle", response_model=ProductResponse)
async def handle_product(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    notifications: BaseNotificationService = Depends(get_notification_service),
):
    """Apply the lifecycle rules for the product's type."""
    repository = ProductRepository(db)
    product = await _get_product_or_404(repository, product_id)
    await ProductService(repository, notifications).handle_product(product)
    await db.commit()
    return product


@router.post("/{product_id}/delay", response_model=ProductResponse)
async def notify_delay(
    product_id: int,
    data: DelayNotificationRequest,
    db: AsyncSession = Depends(get_db),
    notifications: BaseNotificationService = Depends(get_notification_service),
):
    """Set a new lead time and send a delay notification."""
    repository = ProductRepository(db)
    product = await _get_product_or_404(repository, product_id)
    await ProductService(repository, notifications).notify_delay(data.lead_time, product)
    await db.commit()
    return product
