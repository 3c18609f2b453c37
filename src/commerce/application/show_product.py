"""Application service: Show Product use case (load by id)."""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import parse_id
from commerce.application.dto import ProductDTO
from commerce.domain.model.errors import ProductErrors
from commerce.domain.repository.unit_of_work import UnitOfWork
from commerce.domain.result import Result


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: UUID | str) -> Result:
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)
            return Result.ok(ProductDTO.from_domain(product))
