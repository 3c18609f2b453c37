"""Order aggregate.

The Order is an aggregate root that owns its line items.  Items are fixed
at creation; afterwards only the lifecycle moves:

    CREATED ──submit──▶ AWAITING_PAYMENT ──pay──▶ PAID
       │                      │
       └──────cancel──────────┴──▶ CANCELLED

PAID and CANCELLED are terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from commerce.domain.exceptions import GuardError
from commerce.domain.model.aggregate import AggregateRoot
from commerce.domain.model.errors import OrderErrors
from commerce.domain.model.events import (
    OrderCancelled,
    OrderCreated,
    OrderPaid,
    OrderSubmittedForPayment,
    utc_now,
)
from commerce.domain.model.value_objects import Money, Quantity, Text, optional_text
from commerce.domain.result import Error, Result


class OrderStatus(Enum):
    CREATED = "CREATED"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class OrderAction(Enum):
    SUBMIT = "submit"
    PAY = "pay"
    CANCEL = "cancel"


_S = OrderStatus
_A = OrderAction

ORDER_TRANSITIONS: dict[tuple[OrderStatus, OrderAction], OrderStatus | Error] = {
    (_S.CREATED, _A.SUBMIT): _S.AWAITING_PAYMENT,
    (_S.AWAITING_PAYMENT, _A.SUBMIT): OrderErrors.NOT_CREATED,
    (_S.PAID, _A.SUBMIT): OrderErrors.NOT_CREATED,
    (_S.CANCELLED, _A.SUBMIT): OrderErrors.NOT_CREATED,
    (_S.AWAITING_PAYMENT, _A.PAY): _S.PAID,
    (_S.CREATED, _A.PAY): OrderErrors.NOT_AWAITING_PAYMENT,
    (_S.PAID, _A.PAY): OrderErrors.NOT_AWAITING_PAYMENT,
    (_S.CANCELLED, _A.PAY): OrderErrors.NOT_AWAITING_PAYMENT,
    (_S.CREATED, _A.CANCEL): _S.CANCELLED,
    (_S.AWAITING_PAYMENT, _A.CANCEL): _S.CANCELLED,
    (_S.PAID, _A.CANCEL): OrderErrors.CANNOT_CANCEL_PAID_ORDER,
    (_S.CANCELLED, _A.CANCEL): OrderErrors.ALREADY_CANCELLED,
}


def order_transition(status: OrderStatus, action: OrderAction) -> OrderStatus | Error:
    """Pure lookup: the next status, or the Error explaining why not."""
    return ORDER_TRANSITIONS.get((status, action), OrderErrors.INVALID_STATE)


@dataclass(frozen=True)
class OrderItem:
    """A product reference with the price captured when the order was built.

    ``unit_price`` never changes after creation (price lock).
    """

    product_id: UUID
    quantity: Quantity
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.product_id, UUID):
            raise GuardError("Order item requires a product id")
        if not isinstance(self.quantity, Quantity):
            raise GuardError("Order item quantity must be a Quantity")
        if not isinstance(self.unit_price, Money):
            raise GuardError("Order item unit price must be Money")

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def currency(self):
        return self.unit_price.currency


@dataclass(eq=False)
class Order(AggregateRoot):
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: UUID
    customer_email: str
    items: tuple[OrderItem, ...]
    total: Money
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_email: str, items: list[OrderItem] | None) -> Result:
        """Create a new order; the Result carries the Order on success."""
        email = Text.parse(customer_email)
        if email is None:
            return Result.fail(OrderErrors.INVALID_CUSTOMER_EMAIL)
        if items is None:
            return Result.fail(OrderErrors.ORDER_ITEMS_CANNOT_BE_NULL)

        order_items = tuple(items)
        if not order_items:
            return Result.fail(OrderErrors.EMPTY_ORDER)

        currency = order_items[0].currency
        total = Money.zero(currency)
        for item in order_items:
            if item.currency != currency:
                return Result.fail(OrderErrors.CURRENCY_MISMATCH)
            total = total + item.line_total

        now = utc_now()
        order = Order(
            id=uuid4(),
            customer_email=email.value,
            items=order_items,
            total=total,
            created_at=now,
        )
        order._record(
            OrderCreated(
                occurred_at=now,
                order_id=order.id,
                customer_email=order.customer_email,
                total=order.total,
            )
        )
        return Result.ok(order)

    # --- State transitions ----------------------------------------------------

    def submit_for_payment(self) -> Result:
        """Transition CREATED -> AWAITING_PAYMENT."""
        outcome = order_transition(self.status, OrderAction.SUBMIT)
        if isinstance(outcome, Error):
            return Result.fail(outcome)
        if not self.items:
            return Result.fail(OrderErrors.EMPTY_ORDER)

        now = utc_now()
        self._move_to(outcome, now)
        self._record(
            OrderSubmittedForPayment(occurred_at=now, order_id=self.id, total=self.total)
        )
        return Result.ok()

    def mark_as_paid(self) -> Result:
        """Transition AWAITING_PAYMENT -> PAID."""
        outcome = order_transition(self.status, OrderAction.PAY)
        if isinstance(outcome, Error):
            return Result.fail(outcome)

        now = utc_now()
        self._move_to(outcome, now)
        self._record(OrderPaid(occurred_at=now, order_id=self.id, total=self.total))
        return Result.ok()

    def cancel(self, reason: str | None = None) -> Result:
        """Transition CREATED|AWAITING_PAYMENT -> CANCELLED.

        A blank reason is recorded as no reason.
        """
        outcome = order_transition(self.status, OrderAction.CANCEL)
        if isinstance(outcome, Error):
            return Result.fail(outcome)

        now = utc_now()
        self._move_to(outcome, now)
        self._record(
            OrderCancelled(occurred_at=now, order_id=self.id, reason=optional_text(reason))
        )
        return Result.ok()

    # --- Computed properties --------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in (OrderStatus.PAID, OrderStatus.CANCELLED)

    # --- Internal helpers -----------------------------------------------------

    def _move_to(self, status: OrderStatus, now: datetime) -> None:
        self.status = status
        self._touch(now)
