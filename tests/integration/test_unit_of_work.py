"""Tests for UnitOfWork transaction scope."""
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from storefront.data import create_uow
from storefront.domain import Order, OrderItem, OrderNotFoundError


@pytest_asyncio.fixture
async def committed_order(test_session_factory, customer, product, order):
    """Customer, product and order 123 committed to the database."""
    async with create_uow(test_session_factory) as uow:
        await uow.customers.create(customer)
        await uow.products.create(product)
        await uow.orders.create(order)
        await uow.commit()
    return order


@pytest.mark.asyncio
async def test_commit_is_visible_from_a_new_session(test_session_factory, committed_order):
    async with create_uow(test_session_factory) as uow:
        found = await uow.orders.find("123")

    assert found == committed_order


@pytest.mark.asyncio
async def test_leaving_without_commit_discards_changes(test_session_factory, customer):
    async with create_uow(test_session_factory) as uow:
        await uow.customers.create(customer)

    async with create_uow(test_session_factory) as uow:
        assert await uow.customers.find_all() == []


@pytest.mark.asyncio
async def test_failed_update_rolls_back_every_step(test_session_factory, committed_order):
    """Item insert fails on an unknown product: row update and delete are undone."""
    broken = Order(
        id="123",
        customer_id="123",
        items=[OrderItem(id="9", name="Ghost", price=Decimal("99"), product_id="missing", quantity=1)],
    )

    with pytest.raises(IntegrityError):
        async with create_uow(test_session_factory) as uow:
            await uow.orders.update(broken)
            await uow.commit()

    async with create_uow(test_session_factory) as uow:
        found = await uow.orders.find("123")

    assert found == committed_order
    assert found.total() == Decimal("20")


@pytest.mark.asyncio
async def test_not_found_propagates_through_the_unit_of_work(test_session_factory):
    with pytest.raises(OrderNotFoundError):
        async with create_uow(test_session_factory) as uow:
            await uow.orders.find("nope")


@pytest.mark.asyncio
async def test_repositories_require_an_open_scope(test_session_factory):
    uow = create_uow(test_session_factory)

    with pytest.raises(RuntimeError, match="UnitOfWork not initialized"):
        uow.orders

    async with uow:
        assert uow.orders is uow.orders

    with pytest.raises(RuntimeError):
        await uow.commit()
