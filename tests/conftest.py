"""Pytest configuration and shared fixtures."""

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.data.models import Base
from storefront.domain import Address, Customer, Order, OrderItem, Product
from storefront.infrastructure.database import (
    DatabaseSettings,
    create_engine,
    get_session_factory,
    init_database,
)
from storefront.infrastructure.logging import get_logger


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Repository loggers under "storefront." propagate to this handler
get_logger("storefront")


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine with all tables."""
    engine = create_engine(DatabaseSettings(database_url=TEST_DATABASE_URL))

    await init_database(engine)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield get_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def customer() -> Customer:
    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    return customer


@pytest.fixture
def product() -> Product:
    return Product(id="123", name="Product 1", price=Decimal("10"))


@pytest.fixture
def order(product) -> Order:
    """Order 123 with a single line: 2 x Product 1 at 10."""
    item = OrderItem(
        id="1",
        name=product.name,
        price=product.price,
        product_id=product.id,
        quantity=2,
    )
    return Order(id="123", customer_id="123", items=[item])
