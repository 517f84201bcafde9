"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Any, Dict

from storefront.domain.entities import Customer, Order, OrderItem, Product
from storefront.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order id

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(**OrderItemMapper.to_row(entity, order_id))

    @staticmethod
    def to_row(entity: OrderItem, order_id: str) -> Dict[str, Any]:
        """Plain column dictionary, as consumed by bulk INSERT."""
        return {
            "id": entity.id,
            "name": entity.name,
            "price": entity.price,
            "product_id": entity.product_id,
            "quantity": entity.quantity,
            "order_id": order_id,
        }


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The stored total is not read back: Order.total() is derived.

        Args:
            model: OrderModel instance with items loaded

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=items,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id)
            for item in entity.items
        ]

        return order_model


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zip_code=model.zip_code,
                city=model.city,
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=bool(model.active),
            reward_points=model.reward_points or 0,
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        return CustomerModel(**CustomerMapper.to_row(entity))

    @staticmethod
    def to_row(entity: Customer) -> Dict[str, Any]:
        address = entity.address
        return {
            "id": entity.id,
            "name": entity.name,
            "street": address.street if address else None,
            "number": address.number if address else None,
            "zip_code": address.zip_code if address else None,
            "city": address.city if address else None,
            "active": entity.active,
            "reward_points": entity.reward_points,
        }


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            id=entity.id,
            name=entity.name,
            price=entity.price,
        )
