"""Product entity."""
from dataclasses import dataclass
from decimal import Decimal

from .order import CENT


@dataclass
class Product:
    """Catalog product referenced by order items."""
    id: str
    name: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Product id is required")
        if not self.name:
            raise ValueError("Product name is required")
        if self.price < 0:
            raise ValueError(f"Price must be non-negative, got: {self.price}")
        if self.price != self.price.quantize(CENT):
            raise ValueError(f"Price must have at most 2 decimal places, got: {self.price}")

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate()

    def change_price(self, price: Decimal) -> None:
        self.price = Decimal(str(price))
        self.validate()
