"""Application service: Submit Order for payment."""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import CommandHandler, parse_id
from commerce.domain.model.errors import OrderErrors
from commerce.domain.result import Result


class SubmitOrderHandler(CommandHandler):

    def handle(self, order_id: UUID | str) -> Result:
        with self._uow:
            order = self._uow.orders.get_by_id(parse_id(order_id))
            if order is None:
                return Result.fail(OrderErrors.NOT_FOUND)
            result = order.submit_for_payment()
            return self._complete("order.submit", result, order_id=str(order.id))
