"""Payment aggregate — the observed outcome of one payment attempt.

The payment gateway itself lives outside the system.  This aggregate only
records what the gateway reported, and must tolerate at-least-once
delivery of those reports:

    INITIATED ──succeeded──▶ SUCCEEDED   (same reference again: no-op)
        │
        └──────failed──────▶ FAILED      (failed again: no-op)

SUCCEEDED and FAILED are terminal and never turn into each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from commerce.domain.model.aggregate import AggregateRoot
from commerce.domain.model.errors import PaymentErrors
from commerce.domain.model.events import (
    PaymentFailed,
    PaymentInitiated,
    PaymentSucceeded,
    utc_now,
)
from commerce.domain.model.value_objects import Money, Text, optional_text
from commerce.domain.result import Error, Result


class PaymentStatus(Enum):
    INITIATED = "INITIATED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class PaymentAction(Enum):
    SUCCEED = "succeed"
    FAIL = "fail"


# ``None`` marks an idempotent repeat: success without a state change.
PAYMENT_TRANSITIONS: dict[
    tuple[PaymentStatus, PaymentAction], PaymentStatus | Error | None
] = {
    (PaymentStatus.INITIATED, PaymentAction.SUCCEED): PaymentStatus.SUCCEEDED,
    (PaymentStatus.INITIATED, PaymentAction.FAIL): PaymentStatus.FAILED,
    (PaymentStatus.SUCCEEDED, PaymentAction.SUCCEED): None,
    (PaymentStatus.SUCCEEDED, PaymentAction.FAIL): PaymentErrors.CANNOT_FAIL_SUCCEEDED_PAYMENT,
    (PaymentStatus.FAILED, PaymentAction.SUCCEED): PaymentErrors.CANNOT_SUCCEED_FAILED_PAYMENT,
    (PaymentStatus.FAILED, PaymentAction.FAIL): None,
}


def payment_transition(
    status: PaymentStatus, action: PaymentAction
) -> PaymentStatus | Error | None:
    """Pure lookup: next status, an Error, or ``None`` for a repeat."""
    return PAYMENT_TRANSITIONS.get((status, action), PaymentErrors.INVALID_STATE)


@dataclass(eq=False)
class Payment(AggregateRoot):
    """Aggregate root for a payment attempt against an order.

    The idempotency key is stored trimmed; its uniqueness is enforced by
    the repository, not here.
    """

    id: UUID
    order_id: UUID
    amount: Money
    provider: str
    idempotency_key: str
    status: PaymentStatus = PaymentStatus.INITIATED
    provider_reference: str | None = None
    failure_reason: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None
    version: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        order_id: UUID,
        amount: Money,
        provider: str,
        idempotency_key: str,
    ) -> Result:
        if not isinstance(order_id, UUID) or order_id.int == 0:
            return Result.fail(PaymentErrors.INVALID_ORDER_ID)
        if not isinstance(amount, Money) or not amount.is_positive:
            return Result.fail(PaymentErrors.INVALID_AMOUNT)
        provider_name = Text.parse(provider)
        if provider_name is None:
            return Result.fail(PaymentErrors.PROVIDER_REQUIRED)
        key = Text.parse(idempotency_key)
        if key is None:
            return Result.fail(PaymentErrors.IDEMPOTENCY_KEY_REQUIRED)

        now = utc_now()
        payment = Payment(
            id=uuid4(),
            order_id=order_id,
            amount=amount,
            provider=provider_name.value,
            idempotency_key=key.value,
            created_at=now,
        )
        payment._record(
            PaymentInitiated(
                occurred_at=now,
                payment_id=payment.id,
                order_id=payment.order_id,
                amount=payment.amount,
                provider=payment.provider,
                idempotency_key=payment.idempotency_key,
            )
        )
        return Result.ok(payment)

    # --- Outcome reporting ----------------------------------------------------

    def mark_as_succeeded(self, provider_reference: str) -> Result:
        """Record a successful charge.

        Repeating the report with the same reference is a harmless retry;
        a different reference means two charges disagree and is refused.
        """
        reference = Text.parse(provider_reference)
        if reference is None:
            return Result.fail(PaymentErrors.PROVIDER_REFERENCE_REQUIRED)

        outcome = payment_transition(self.status, PaymentAction.SUCCEED)
        if outcome is None:
            if self.provider_reference == reference.value:
                return Result.ok()
            return Result.fail(PaymentErrors.CONFLICTING_PROVIDER_REFERENCE)
        if isinstance(outcome, Error):
            return Result.fail(outcome)

        now = utc_now()
        self.status = outcome
        self.provider_reference = reference.value
        self._touch(now)
        self._record(
            PaymentSucceeded(
                occurred_at=now,
                payment_id=self.id,
                order_id=self.order_id,
                amount=self.amount,
                provider_reference=self.provider_reference,
            )
        )
        return Result.ok()

    def mark_as_failed(self, reason: str | None = None) -> Result:
        """Record a declined or errored charge.  Repeats are no-ops."""
        outcome = payment_transition(self.status, PaymentAction.FAIL)
        if outcome is None:
            return Result.ok()
        if isinstance(outcome, Error):
            return Result.fail(outcome)

        now = utc_now()
        self.status = outcome
        self.failure_reason = optional_text(reason)
        self._touch(now)
        self._record(
            PaymentFailed(
                occurred_at=now,
                payment_id=self.id,
                order_id=self.order_id,
                amount=self.amount,
                reason=self.failure_reason,
            )
        )
        return Result.ok()

    @property
    def is_terminal(self) -> bool:
        return self.status != PaymentStatus.INITIATED
