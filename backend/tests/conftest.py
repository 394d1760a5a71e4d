"""Shared fixtures: temporary SQLite database, mocked notifications, fixed clock."""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["NOTIFICATIONS_MOCK_MODE"] = "true"

from datetime import UTC, datetime  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import select  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from shelfwatch.core.database import Base  # noqa: E402
from shelfwatch.models.product import NORMAL, Product  # noqa: E402
from shelfwatch.services.notifications import BaseNotificationService  # noqa: E402
from shelfwatch.services.product_repository import ProductRepository  # noqa: E402

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'unit-test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db):
    return ProductRepository(db)


@pytest.fixture
def notifications():
    return AsyncMock(spec=BaseNotificationService)


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def make_product(db):
    """Insert a product and return the attached instance."""

    async def _make(**fields) -> Product:
        values = {
            "id": 1,
            "type": NORMAL,
            "name": "Product1",
            "lead_time": 5,
            "available": 0,
            "expiry_date": None,
            "season_start_date": None,
            "season_end_date": None,
        }
        values.update(fields)
        product = Product(**values)
        db.add(product)
        await db.flush()
        return product

    return _make


def as_row(product: Product) -> dict:
    return {column.key: getattr(product, column.key) for column in Product.__table__.columns}


async def stored_row(db, product_id: int) -> dict:
    """Read the row straight from the table, bypassing the identity map."""
    table = Product.__table__
    result = await db.execute(select(table).where(table.c.id == product_id))
    return dict(result.mappings().one())
