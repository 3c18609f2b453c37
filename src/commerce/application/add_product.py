"""Application service: Create Product use case."""

from __future__ import annotations

from uuid import UUID

from commerce.application.command_handler import CommandHandler, parse_id, parse_money
from commerce.application.dto import ProductDTO
from commerce.domain.model.product import Product
from commerce.domain.result import Result


class CreateProductHandler(CommandHandler):

    def handle(
        self,
        name: str,
        price: str,
        currency: str,
        category_id: UUID | str,
        sku: str,
        description: str | None = None,
    ) -> Result:
        """Add a new DRAFT product to the catalog.

        The Result carries a ProductDTO on success.
        """
        with self._uow:
            created = Product.create(
                name=name,
                price=parse_money(price, currency),
                category_id=parse_id(category_id),
                sku=sku,
                description=description,
            )
            if created.is_success:
                self._uow.products.add(created.value)
            result = self._complete("product.create", created, sku=sku)
        if result.is_failure:
            return result
        return Result.ok(ProductDTO.from_domain(result.value))
