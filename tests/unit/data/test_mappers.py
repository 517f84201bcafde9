"""Tests for domain ↔ ORM mappers (no database involved)."""
from decimal import Decimal

from storefront.data.mappers import CustomerMapper, OrderItemMapper, OrderMapper, ProductMapper
from storefront.data.models import CustomerModel, OrderItemModel, OrderModel, ProductModel
from storefront.domain.entities import Customer, Order, OrderItem, Product
from storefront.domain.value_objects import Address


def _order() -> Order:
    return Order(
        id="o1",
        customer_id="c1",
        items=[
            OrderItem(id="1", name="A", price=Decimal("10"), product_id="p1", quantity=2),
            OrderItem(id="2", name="B", price=Decimal("3.5"), product_id="p2", quantity=4),
        ],
    )


def test_order_to_persistence_tags_items_and_caches_total():
    model = OrderMapper.to_persistence(_order())

    assert model.id == "o1"
    assert model.customer_id == "c1"
    assert model.total == Decimal("34.0")
    assert [item.id for item in model.items] == ["1", "2"]
    assert {item.order_id for item in model.items} == {"o1"}


def test_order_to_domain_ignores_stored_total():
    model = OrderModel(id="o1", customer_id="c1", total=Decimal("999"))
    model.items = [
        OrderItemModel(
            id="1", name="A", price=Decimal("10.00"), product_id="p1", quantity=2, order_id="o1"
        )
    ]

    order = OrderMapper.to_domain(model)

    assert order.total() == Decimal("20")
    assert order.items[0].product_id == "p1"


def test_item_row_matches_columns():
    item = _order().items[1]
    assert OrderItemMapper.to_row(item, "o1") == {
        "id": "2",
        "name": "B",
        "price": Decimal("3.5"),
        "product_id": "p2",
        "quantity": 4,
        "order_id": "o1",
    }


def test_customer_without_address_maps_to_null_columns():
    row = CustomerMapper.to_row(Customer(id="c1", name="John"))
    assert row["street"] is None
    assert row["city"] is None

    restored = CustomerMapper.to_domain(CustomerModel(**row))
    assert restored.address is None
    assert restored.active is False


def test_customer_address_round_trips():
    customer = Customer(id="c1", name="John", address=Address("Street 1", 1, "Zip", "City"))
    restored = CustomerMapper.to_domain(CustomerMapper.to_persistence(customer))
    assert restored == customer


def test_product_mapping():
    model = ProductMapper.to_persistence(Product(id="p1", name="Product 1", price=Decimal("10")))
    assert isinstance(model, ProductModel)
    assert ProductMapper.to_domain(model).price == Decimal("10")
