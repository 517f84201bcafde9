"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .exceptions import (
    CustomerNotFoundError,
    NotFoundError,
    OrderNotFoundError,
    ProductNotFoundError,
    StorefrontError,
)
from .repositories import CustomerRepository, OrderRepository, ProductRepository
from .value_objects import Address

__all__ = [
    "Address",
    "Customer",
    "CustomerNotFoundError",
    "CustomerRepository",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderNotFoundError",
    "OrderRepository",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
    "StorefrontError",
]
