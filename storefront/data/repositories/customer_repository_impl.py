"""SQLAlchemy implementation of CustomerRepository."""

from typing import List
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Customer
from storefront.domain.exceptions import CustomerNotFoundError
from storefront.domain.repositories import CustomerRepository

from ..mappers import CustomerMapper
from ..models import CustomerModel


logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, customer: Customer) -> None:
        logger.info(f"Creating customer: {customer.id}")
        self._session.add(CustomerMapper.to_persistence(customer))
        await self._session.flush()

    async def update(self, customer: Customer) -> None:
        """Overwrite every mutable column of the customer row.

        Raises:
            CustomerNotFoundError: If no customer row has this id
        """
        values = CustomerMapper.to_row(customer)
        del values["id"]

        result = await self._session.execute(
            update(CustomerModel)
            .where(CustomerModel.id == customer.id)
            .values(**values)
        )
        if result.rowcount == 0:
            logger.warning(f"Customer not found for update: {customer.id}")
            raise CustomerNotFoundError()

        logger.info(f"✅ Updated customer: {customer.id}")

    async def find(self, customer_id: str) -> Customer:
        result = await self._session.execute(
            select(CustomerModel)
            .where(CustomerModel.id == customer_id)
            .execution_options(populate_existing=True)
        )
        try:
            model = result.scalar_one()
        except NoResultFound as error:
            raise CustomerNotFoundError() from error

        return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        result = await self._session.execute(
            select(CustomerModel).execution_options(populate_existing=True)
        )
        return [CustomerMapper.to_domain(model) for model in result.scalars().all()]
