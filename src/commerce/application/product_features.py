"""Application service: add, update and remove product features."""

from __future__ import annotations

from uuid import UUID, uuid4

from commerce.application.command_handler import CommandHandler, parse_id
from commerce.domain.model.errors import ProductErrors
from commerce.domain.result import Result


class ManageProductFeaturesHandler(CommandHandler):

    def add(
        self,
        product_id: UUID | str,
        name: str,
        value: str,
        display_order: int = 0,
        feature_id: UUID | str | None = None,
    ) -> Result:
        """Add a feature; the Result carries the feature id on success.

        A fresh id is generated when none is supplied.
        """
        new_id = parse_id(feature_id) if feature_id is not None else uuid4()
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)
            result = product.add_feature(new_id, name, value, display_order)
            result = self._complete(
                "product.add_feature", result, product_id=str(product.id)
            )
        return Result.ok(new_id) if result.is_success else result

    def update_value(
        self, product_id: UUID | str, feature_id: UUID | str, value: str
    ) -> Result:
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)
            result = product.update_feature_value(parse_id(feature_id), value)
            return self._complete(
                "product.update_feature", result, product_id=str(product.id)
            )

    def remove(self, product_id: UUID | str, feature_id: UUID | str) -> Result:
        with self._uow:
            product = self._uow.products.get_by_id(parse_id(product_id))
            if product is None:
                return Result.fail(ProductErrors.NOT_FOUND)
            result = product.remove_feature(parse_id(feature_id))
            return self._complete(
                "product.remove_feature", result, product_id=str(product.id)
            )
