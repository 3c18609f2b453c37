"""Application service: Show Order use case (load by id)."""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import parse_id
from commerce.application.dto import OrderDTO
from commerce.domain.model.errors import OrderErrors
from commerce.domain.repository.unit_of_work import UnitOfWork
from commerce.domain.result import Result


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: UUID | str) -> Result:
        with self._uow:
            order = self._uow.orders.get_by_id(parse_id(order_id))
            if order is None:
                return Result.fail(OrderErrors.NOT_FOUND)
            return Result.ok(OrderDTO.from_domain(order))
