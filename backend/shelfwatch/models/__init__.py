"""SQLAlchemy models."""

from shelfwatch.models.product import EXPIRABLE, NORMAL, PRODUCT_TYPES, SEASONAL, Product

__all__ = [
    "Product",
    "PRODUCT_TYPES",
    "NORMAL",
    "SEASONAL",
    "EXPIRABLE",
]
