"""SQLAlchemy implementation of ProductRepository."""

from typing import List
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Product
from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models import ProductModel


logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> None:
        logger.info(f"Creating product: {product.id}")
        self._session.add(ProductMapper.to_persistence(product))
        await self._session.flush()

    async def update(self, product: Product) -> None:
        """Overwrite name and price of the product row.

        Raises:
            ProductNotFoundError: If no product row has this id
        """
        result = await self._session.execute(
            update(ProductModel)
            .where(ProductModel.id == product.id)
            .values(name=product.name, price=product.price)
        )
        if result.rowcount == 0:
            logger.warning(f"Product not found for update: {product.id}")
            raise ProductNotFoundError()

        logger.info(f"✅ Updated product: {product.id}")

    async def find(self, product_id: str) -> Product:
        result = await self._session.execute(
            select(ProductModel)
            .where(ProductModel.id == product_id)
            .execution_options(populate_existing=True)
        )
        try:
            model = result.scalar_one()
        except NoResultFound as error:
            raise ProductNotFoundError() from error

        return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        result = await self._session.execute(
            select(ProductModel).execution_options(populate_existing=True)
        )
        return [ProductMapper.to_domain(model) for model in result.scalars().all()]
