"""Repository interface for Customer entity."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.customer import Customer


class CustomerRepository(ABC):
    """Abstract repository for Customer persistence."""

    @abstractmethod
    async def create(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def find(self, customer_id: str) -> Customer:
        """Raises CustomerNotFoundError if no customer has this id."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Customer]:
        pass
