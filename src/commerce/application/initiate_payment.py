"""Application service: Initiate Payment use case.

The idempotency key makes this safe to retry: a second request with the
same key for the same order returns the payment created the first time
instead of starting another one.
"""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import CommandHandler, parse_id
from commerce.application.dto import PaymentDTO
from commerce.domain.model.errors import OrderErrors, PaymentErrors
from commerce.domain.model.order import OrderStatus
from commerce.domain.model.payment import Payment
from commerce.domain.model.value_objects import Text
from commerce.domain.result import Result


class InitiatePaymentHandler(CommandHandler):

    def handle(
        self, order_id: UUID | str, provider: str, idempotency_key: str
    ) -> Result:
        """Start a payment for the full order total.

        The Result carries a PaymentDTO on success.
        """
        with self._uow:
            order = self._uow.orders.get_by_id(parse_id(order_id))
            if order is None:
                return Result.fail(OrderErrors.NOT_FOUND)

            key = Text.parse(idempotency_key)
            if key is not None:
                existing = self._uow.payments.get_by_idempotency_key(key.value)
                if existing is not None:
                    if existing.order_id != order.id:
                        return Result.fail(PaymentErrors.IDEMPOTENCY_KEY_CONFLICT)
                    return Result.ok(PaymentDTO.from_domain(existing))

            if order.status != OrderStatus.AWAITING_PAYMENT:
                return Result.fail(OrderErrors.NOT_AWAITING_PAYMENT)

            created = Payment.create(
                order_id=order.id,
                amount=order.total,
                provider=provider,
                idempotency_key=idempotency_key,
            )
            if created.is_success:
                self._uow.payments.add(created.value)
            result = self._complete(
                "payment.initiate", created, order_id=str(order.id)
            )
        if result.is_failure:
            return result
        return Result.ok(PaymentDTO.from_domain(result.value))
