"""Customer entity."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Address


@dataclass
class Customer:
    """
    Customer placing orders.

    Orders only hold the customer id; this entity lives in its own table.
    """
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Customer id is required")
        if not self.name:
            raise ValueError("Customer name is required")

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate()

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        """Business rule: only customers with an address can be activated."""
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"Reward points must be non-negative, got: {points}")
        self.reward_points += points
