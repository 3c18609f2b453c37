"""Application service: Update Product use cases (price and category).

Changing a price does NOT affect existing orders — they captured a
price snapshot at creation time.
"""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import CommandHandler, parse_id, parse_money
from commerce.domain.model.errors import ProductErrors
from commerce.domain.result import Result


class UpdateProductHandler(CommandHandler):

    def change_price(
        self, product_id: UUID | str, new_price: str, currency: str
    ) -> Result:
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)
            result = product.change_price(parse_money(new_price, currency))
            return self._complete(
                "product.change_price", result, product_id=str(product.id)
            )

    def change_category(
        self, product_id: UUID | str, category_id: UUID | str
    ) -> Result:
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)
            result = product.change_category(parse_id(category_id))
            return self._complete(
                "product.change_category", result, product_id=str(product.id)
            )
