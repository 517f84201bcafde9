"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

# Money columns are Numeric(15, 2)
CENT = Decimal("0.01")


@dataclass
class OrderItem:
    """Individual line item within an order."""
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

        if not self.id:
            raise ValueError("Order item id is required")
        if self.price < 0:
            raise ValueError(f"Price must be non-negative, got: {self.price}")
        if self.price != self.price.quantize(CENT):
            raise ValueError(f"Price must have at most 2 decimal places, got: {self.price}")
        if not self.product_id:
            raise ValueError("Product id is required")
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValueError(f"Quantity must be an integer, got: {self.quantity!r}")
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be greater than zero, got: {self.quantity}")

    def subtotal(self) -> Decimal:
        """Unit price times quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    The total is always derived from the items. The persisted row keeps a
    copy of it, written on create/update only.
    """
    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check aggregate invariants.

        Raises:
            ValueError: If id, customer id or items are missing
        """
        if not self.id:
            raise ValueError("Order id is required")
        if not self.customer_id:
            raise ValueError("Customer id is required")
        if not self.items:
            raise ValueError("Order must have at least one item")

    def total(self) -> Decimal:
        """Sum of item subtotals."""
        return sum((item.subtotal() for item in self.items), Decimal("0"))
