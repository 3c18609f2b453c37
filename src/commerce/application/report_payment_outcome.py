"""Application service: record what the payment gateway reported.

Gateways deliver notifications at least once, so both operations are
safe to repeat.  A success also settles the order in the same unit of
work, so the payment and the order are committed together.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from commerce.application.command_handler import CommandHandler, parse_id
from commerce.domain.model.errors import PaymentErrors
from commerce.domain.model.order import OrderStatus
from commerce.domain.result import Result

logger = structlog.get_logger(__name__)


class ReportPaymentOutcomeHandler(CommandHandler):

    def succeeded(self, payment_id: UUID | str, provider_reference: str) -> Result:
        with self._uow:
            payment = self._uow.payments.get_by_id(parse_id(payment_id))
            if payment is None:
                return Result.fail(PaymentErrors.NOT_FOUND)

            first_report = not payment.is_terminal
            result = payment.mark_as_succeeded(provider_reference)
            if result.is_success:
                order = self._uow.orders.get_by_id(payment.order_id)
                if order is not None and order.status == OrderStatus.AWAITING_PAYMENT:
                    result = order.mark_as_paid()
                elif first_report and (order is None or order.status != OrderStatus.PAID):
                    # charged for an order that cannot be paid; needs reconciling
                    logger.warning(
                        "payment.order_not_payable",
                        payment_id=str(payment.id),
                        order_id=str(payment.order_id),
                        order_status=order.status.value if order is not None else None,
                    )
            return self._complete(
                "payment.succeeded", result, payment_id=str(payment.id)
            )

    def failed(self, payment_id: UUID | str, reason: str | None = None) -> Result:
        with self._uow:
            payment = self._uow.payments.get_by_id(parse_id(payment_id))
            if payment is None:
                return Result.fail(PaymentErrors.NOT_FOUND)
            result = payment.mark_as_failed(reason)
            return self._complete("payment.failed", result, payment_id=str(payment.id))
