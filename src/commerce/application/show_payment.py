"""Application service: Show Payment use case (load by id)."""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import parse_id
from commerce.application.dto import PaymentDTO
from commerce.domain.model.errors import PaymentErrors
from commerce.domain.repository.unit_of_work import UnitOfWork
from commerce.domain.result import Result


class ShowPaymentHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, payment_id: UUID | str) -> Result:
        with self._uow:
            payment = self._uow.payments.get_by_id(parse_id(payment_id))
            if payment is None:
                return Result.fail(PaymentErrors.NOT_FOUND)
            return Result.ok(PaymentDTO.from_domain(payment))
