"""Application service: Cancel Order use case.

Orders can be cancelled while CREATED or AWAITING_PAYMENT.  A PAID order
is never cancelled; refunds are outside this system.
"""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import CommandHandler, parse_id
from commerce.domain.model.errors import OrderErrors
from commerce.domain.result import Result


class CancelOrderHandler(CommandHandler):

    def handle(self, order_id: UUID | str, reason: str | None = None) -> Result:
        with self._uow:
            order = self._uow.orders.get_by_id(parse_id(order_id))
            if order is None:
                return Result.fail(OrderErrors.NOT_FOUND)
            result = order.cancel(reason)
            return self._complete("order.cancel", result, order_id=str(order.id))
