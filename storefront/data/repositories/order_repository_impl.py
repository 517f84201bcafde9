"""
SQLAlchemy Order Repository Implementation.

Implements OrderRepository using a SQLAlchemy async session.
"""
from typing import List
import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.domain.entities import Order
from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.repositories import OrderRepository

from ..mappers import OrderItemMapper, OrderMapper
from ..models import OrderItemModel, OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    Writes go to the orders and order_items tables of the given session and
    are flushed, never committed. Commit is handled by the Unit of Work (or
    whoever owns the session).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def create(self, order: Order) -> None:
        """Insert the order row and all item rows in one flush.

        Args:
            order: Order aggregate to persist

        Raises:
            IntegrityError: On duplicate ids or unknown customer/product
        """
        logger.info(f"Creating order: {order.id} ({len(order.items)} items)")

        order_model = OrderMapper.to_persistence(order)
        self._session.add(order_model)

        # Nested insert: the items cascade from the order relationship
        await self._session.flush()

        logger.info(f"✅ Created order: {order.id} (total: {order.total()})")

    async def update(self, order: Order) -> None:
        """Rewrite the order row, then replace its items.

        Three statements run one after another: update the order row,
        delete every item row of the order, bulk insert the current items.
        They share the session's transaction; nothing here commits or rolls
        back, so a failing step leaves earlier steps to the caller.

        Args:
            order: Order aggregate whose id is already persisted

        Raises:
            OrderNotFoundError: If no order row has this id
        """
        logger.info(f"Updating order: {order.id}")

        result = await self._session.execute(
            update(OrderModel)
            .where(OrderModel.id == order.id)
            .values(customer_id=order.customer_id, total=order.total())
        )
        if result.rowcount == 0:
            logger.warning(f"Order not found for update: {order.id}")
            raise OrderNotFoundError()

        await self._session.execute(
            delete(OrderItemModel).where(OrderItemModel.order_id == order.id)
        )

        rows = [OrderItemMapper.to_row(item, order.id) for item in order.items]
        await self._session.execute(insert(OrderItemModel), rows)

        logger.info(f"✅ Updated order: {order.id} ({len(rows)} items)")

    async def find(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Freshly built Order aggregate

        Raises:
            OrderNotFoundError: If the order cannot be loaded
        """
        logger.info(f"Getting order: {order_id}")

        try:
            result = await self._session.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.id == order_id)
                .execution_options(populate_existing=True)
            )
            order_model = result.scalar_one()
        except SQLAlchemyError as error:
            logger.info(f"Order not found: {order_id}")
            raise OrderNotFoundError() from error

        return OrderMapper.to_domain(order_model)

    async def find_all(self) -> List[Order]:
        """List every order with its items.

        No ORDER BY is applied: rows come back in the store's scan order.

        Returns:
            List of Order aggregates
        """
        logger.info("Finding all orders")

        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .execution_options(populate_existing=True)
        )
        order_models = result.scalars().all()

        orders = [OrderMapper.to_domain(om) for om in order_models]

        logger.info(f"✅ Found {len(orders)} orders")
        return orders
