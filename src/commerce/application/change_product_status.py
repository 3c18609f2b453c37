"""Application service: publish, deactivate or discontinue a product."""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import CommandHandler, parse_id
from commerce.domain.model.errors import ProductErrors
from commerce.domain.model.product import ProductAction
from commerce.domain.result import Result


class ChangeProductStatusHandler(CommandHandler):

    def handle(self, product_id: UUID | str, action: ProductAction) -> Result:
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)

            if action is ProductAction.PUBLISH:
                result = product.publish()
            elif action is ProductAction.DEACTIVATE:
                result = product.deactivate()
            else:
                result = product.discontinue()

            return self._complete(
                f"product.{action.value}", result, product_id=str(product.id)
            )
