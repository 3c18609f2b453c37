"""Domain events — immutable records of things that happened.

Events are plain data.  Aggregates buffer them; the persistence
collaborator drains the buffer after a successful commit and hands the
records to a dispatcher.  Every event carries ``occurred_at`` (UTC), the
same instant the aggregate stamped on ``updated_at``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from commerce.domain.model.value_objects import Money


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    occurred_at: datetime

    @property
    def event_type(self) -> str:
        return type(self).__name__


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    product_id: UUID
    category_id: UUID
    sku: str


@dataclass(frozen=True)
class ProductActivated(DomainEvent):
    product_id: UUID


@dataclass(frozen=True)
class ProductDeactivated(DomainEvent):
    product_id: UUID


@dataclass(frozen=True)
class ProductDiscontinued(DomainEvent):
    product_id: UUID


@dataclass(frozen=True)
class ProductPriceChanged(DomainEvent):
    product_id: UUID
    old_price: Money
    new_price: Money


@dataclass(frozen=True)
class ProductCategoryChanged(DomainEvent):
    product_id: UUID
    old_category_id: UUID
    new_category_id: UUID


@dataclass(frozen=True)
class ProductFeatureAdded(DomainEvent):
    product_id: UUID
    feature_id: UUID
    name: str
    value: str
    display_order: int


@dataclass(frozen=True)
class ProductFeatureUpdated(DomainEvent):
    product_id: UUID
    feature_id: UUID
    name: str
    old_value: str
    new_value: str


@dataclass(frozen=True)
class ProductFeatureRemoved(DomainEvent):
    product_id: UUID
    feature_id: UUID
    name: str


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    order_id: UUID
    customer_email: str
    total: Money


@dataclass(frozen=True)
class OrderSubmittedForPayment(DomainEvent):
    order_id: UUID
    total: Money


@dataclass(frozen=True)
class OrderPaid(DomainEvent):
    order_id: UUID
    total: Money


@dataclass(frozen=True)
class OrderCancelled(DomainEvent):
    order_id: UUID
    reason: str | None


# ---------------------------------------------------------------------------
# Payment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PaymentInitiated(DomainEvent):
    payment_id: UUID
    order_id: UUID
    amount: Money
    provider: str
    idempotency_key: str


@dataclass(frozen=True)
class PaymentSucceeded(DomainEvent):
    payment_id: UUID
    order_id: UUID
    amount: Money
    provider_reference: str


@dataclass(frozen=True)
class PaymentFailed(DomainEvent):
    payment_id: UUID
    order_id: UUID
    amount: Money
    reason: str | None
