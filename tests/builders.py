"""Builders for aggregates in a known state, with their buffers drained."""

from __future__ import annotations

from uuid import UUID, uuid4

from commerce.domain.model.order import Order, OrderItem
from commerce.domain.model.payment import Payment
from commerce.domain.model.product import Product
from commerce.domain.model.value_objects import Money, Quantity

CATEGORY = UUID("11111111-1111-1111-1111-111111111111")


def make_product(price: str = "10.00", currency: str = "USD", **overrides) -> Product:
    kwargs = dict(
        name="Widget",
        price=Money.of(price, currency),
        category_id=CATEGORY,
        sku="wid-001",
    )
    kwargs.update(overrides)
    product = Product.create(**kwargs).value
    product.pull_events()
    return product


def make_item(price: str = "5.00", qty: int = 1, currency: str = "USD") -> OrderItem:
    return OrderItem(
        product_id=uuid4(),
        quantity=Quantity(qty),
        unit_price=Money.of(price, currency),
    )


def make_order(*items: OrderItem, email: str = "alice@example.com") -> Order:
    order = Order.create(email, list(items) or [make_item()]).value
    order.pull_events()
    return order


def make_payment(amount: str = "12.50", order_id: UUID | None = None) -> Payment:
    payment = Payment.create(
        order_id=order_id or uuid4(),
        amount=Money.of(amount),
        provider="stripe",
        idempotency_key="key-1",
    ).value
    payment.pull_events()
    return payment
