"""Repository interface for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def create(self, order: Order) -> None:
        """Persist a new order together with its items.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Rewrite an existing order and replace its whole item set.

        Args:
            order: Order aggregate whose id is already persisted
        """
        pass

    @abstractmethod
    async def find(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Freshly built Order

        Raises:
            OrderNotFoundError: If no order has this id
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """List every persisted order.

        Returns:
            Orders in the store's default order
        """
        pass
