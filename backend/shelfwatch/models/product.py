"""Product model."""

from datetime import datetime

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from shelfwatch.core.database import Base
from shelfwatch.core.types import UTCDateTime, as_utc

NORMAL = "NORMAL"
SEASONAL = "SEASONAL"
EXPIRABLE = "EXPIRABLE"

PRODUCT_TYPES = (NORMAL, SEASONAL, EXPIRABLE)


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("available >= 0", name="ck_products_available_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    # One of PRODUCT_TYPES; unknown values are processed as NORMAL
    type: Mapped[str] = mapped_column(String(20), default=NORMAL, index=True)
    name: Mapped[str] = mapped_column(String(255))
    lead_time: Mapped[int] = mapped_column(default=0)  # Days until restock
    available: Mapped[int] = mapped_column(default=0)
    expiry_date: Mapped[datetime | None] = mapped_column(UTCDateTime)  # EXPIRABLE only
    season_start_date: Mapped[datetime | None] = mapped_column(UTCDateTime)  # SEASONAL only
    season_end_date: Mapped[datetime | None] = mapped_column(UTCDateTime)  # SEASONAL only

    @validates("expiry_date", "season_start_date", "season_end_date")
    def _validate_date(self, key, value):
        return as_utc(value)

    def __repr__(self) -> str:
        return f"<Product id={self.id} type={self.type} name={self.name!r}>"
