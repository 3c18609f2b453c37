"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from commerce.domain.model.order import Order
from commerce.domain.model.payment import Payment
from commerce.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class FeatureDTO:
    id: str
    name: str
    value: str
    display_order: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str | None
    sku: str
    price: str  # formatted, e.g. "10.00 USD"
    category_id: str
    status: str
    features: list[FeatureDTO]

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            name=product.name,
            description=product.description,
            sku=product.sku,
            price=str(product.price),
            category_id=str(product.category_id),
            status=product.status.value,
            features=[
                FeatureDTO(
                    id=str(f.id),
                    name=f.name,
                    value=f.value,
                    display_order=f.display_order,
                )
                for f in sorted(product.features, key=lambda f: f.display_order)
            ],
        )


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    customer_email: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=str(order.id),
            customer_email=order.customer_email,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_id=str(item.product_id),
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class PaymentDTO:
    id: str
    order_id: str
    amount: str
    status: str
    provider: str
    provider_reference: str | None
    idempotency_key: str
    failure_reason: str | None

    @staticmethod
    def from_domain(payment: Payment) -> PaymentDTO:
        return PaymentDTO(
            id=str(payment.id),
            order_id=str(payment.order_id),
            amount=str(payment.amount),
            status=payment.status.value,
            provider=payment.provider,
            provider_reference=payment.provider_reference,
            idempotency_key=payment.idempotency_key,
            failure_reason=payment.failure_reason,
        )
