"""Product aggregate.

Products live independently of orders.  A product owns its features and
moves through a small lifecycle:

    DRAFT ──publish──▶ ACTIVE ◀──publish── INACTIVE
                         │                    ▲
                         └────deactivate──────┘
    any non-terminal ──discontinue──▶ DISCONTINUED (terminal)

Once discontinued nothing structural (status, price, category, features)
may change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from commerce.domain.model.aggregate import AggregateRoot
from commerce.domain.model.errors import ProductErrors
from commerce.domain.model.events import (
    ProductActivated,
    ProductCategoryChanged,
    ProductCreated,
    ProductDeactivated,
    ProductDiscontinued,
    ProductFeatureAdded,
    ProductFeatureRemoved,
    ProductFeatureUpdated,
    ProductPriceChanged,
    utc_now,
)
from commerce.domain.model.value_objects import FeatureName, Money, Text, optional_text
from commerce.domain.result import Error, Result


class ProductStatus(Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DISCONTINUED = "DISCONTINUED"


class ProductAction(Enum):
    PUBLISH = "publish"
    DEACTIVATE = "deactivate"
    DISCONTINUE = "discontinue"


_S = ProductStatus
_A = ProductAction

PRODUCT_TRANSITIONS: dict[tuple[ProductStatus, ProductAction], ProductStatus | Error] = {
    (_S.DRAFT, _A.PUBLISH): _S.ACTIVE,
    (_S.INACTIVE, _A.PUBLISH): _S.ACTIVE,
    (_S.ACTIVE, _A.PUBLISH): ProductErrors.ALREADY_ACTIVE,
    (_S.DISCONTINUED, _A.PUBLISH): ProductErrors.INVALID_STATUS,
    (_S.ACTIVE, _A.DEACTIVATE): _S.INACTIVE,
    (_S.DRAFT, _A.DEACTIVATE): ProductErrors.NOT_ACTIVE,
    (_S.INACTIVE, _A.DEACTIVATE): ProductErrors.NOT_ACTIVE,
    (_S.DISCONTINUED, _A.DEACTIVATE): ProductErrors.NOT_ACTIVE,
    (_S.DRAFT, _A.DISCONTINUE): _S.DISCONTINUED,
    (_S.ACTIVE, _A.DISCONTINUE): _S.DISCONTINUED,
    (_S.INACTIVE, _A.DISCONTINUE): _S.DISCONTINUED,
    (_S.DISCONTINUED, _A.DISCONTINUE): ProductErrors.ALREADY_DISCONTINUED,
}


def product_transition(
    status: ProductStatus, action: ProductAction
) -> ProductStatus | Error:
    """Pure lookup: the next status, or the Error explaining why not."""
    return PRODUCT_TRANSITIONS.get((status, action), ProductErrors.INVALID_STATUS)


def _is_missing_id(value: UUID | None) -> bool:
    return not isinstance(value, UUID) or value.int == 0


@dataclass(eq=False)
class ProductFeature:
    """A named attribute owned by a product (e.g. ``Color: Red``).

    Names are unique within the product, compared case-insensitively.
    """

    id: UUID
    name: str
    value: str
    display_order: int
    created_at: datetime
    updated_at: datetime | None = None

    @property
    def name_key(self) -> FeatureName:
        return FeatureName(self.name)

    def _update_value(self, new_value: str, now: datetime) -> None:
        self.value = new_value
        self.updated_at = now


@dataclass(eq=False)
class Product(AggregateRoot):
    """Aggregate root for the catalog.

    Use ``Product.create()`` for new products.  The ``__init__`` is plain
    so repositories can reconstitute persisted products without
    re-validating or re-emitting events.
    """

    id: UUID
    name: str
    price: Money
    category_id: UUID
    sku: str
    description: str | None = None
    status: ProductStatus = ProductStatus.DRAFT
    features: list[ProductFeature] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None
    version: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        category_id: UUID,
        sku: str,
        description: str | None = None,
    ) -> Result:
        """Create a DRAFT product; the Result carries the new Product."""
        product_name = Text.parse(name)
        if product_name is None:
            return Result.fail(ProductErrors.INVALID_NAME)
        if not isinstance(price, Money):
            return Result.fail(ProductErrors.INVALID_PRICE)
        if _is_missing_id(category_id):
            return Result.fail(ProductErrors.INVALID_CATEGORY_ID)
        product_sku = Text.parse(sku)
        if product_sku is None:
            return Result.fail(ProductErrors.INVALID_SKU)

        now = utc_now()
        product = Product(
            id=uuid4(),
            name=product_name.value,
            price=price,
            category_id=category_id,
            sku=product_sku.value.upper(),
            description=optional_text(description),
            created_at=now,
        )
        product._record(
            ProductCreated(
                occurred_at=now,
                product_id=product.id,
                category_id=product.category_id,
                sku=product.sku,
            )
        )
        return Result.ok(product)

    # --- Status transitions ---------------------------------------------------

    def publish(self) -> Result:
        """DRAFT|INACTIVE -> ACTIVE."""
        return self._transition(ProductAction.PUBLISH, ProductActivated)

    def deactivate(self) -> Result:
        """ACTIVE -> INACTIVE."""
        return self._transition(ProductAction.DEACTIVATE, ProductDeactivated)

    def discontinue(self) -> Result:
        """Any status -> DISCONTINUED.  There is no way back."""
        return self._transition(ProductAction.DISCONTINUE, ProductDiscontinued)

    # --- Pricing and categorisation -------------------------------------------

    def change_price(self, new_price: Money) -> Result:
        if not isinstance(new_price, Money):
            return Result.fail(ProductErrors.INVALID_PRICE)
        if self.is_discontinued:
            return Result.fail(ProductErrors.DISCONTINUED_CANNOT_BE_MODIFIED)
        if new_price == self.price:
            return Result.fail(ProductErrors.PRICE_UNCHANGED)

        now = utc_now()
        old_price = self.price
        self.price = new_price
        self._touch(now)
        self._record(
            ProductPriceChanged(
                occurred_at=now,
                product_id=self.id,
                old_price=old_price,
                new_price=new_price,
            )
        )
        return Result.ok()

    def change_category(self, category_id: UUID) -> Result:
        if _is_missing_id(category_id):
            return Result.fail(ProductErrors.INVALID_CATEGORY_ID)
        if self.is_discontinued:
            return Result.fail(ProductErrors.DISCONTINUED_CANNOT_BE_MODIFIED)
        if category_id == self.category_id:
            return Result.fail(ProductErrors.CATEGORY_UNCHANGED)

        now = utc_now()
        old_category_id = self.category_id
        self.category_id = category_id
        self._touch(now)
        self._record(
            ProductCategoryChanged(
                occurred_at=now,
                product_id=self.id,
                old_category_id=old_category_id,
                new_category_id=category_id,
            )
        )
        return Result.ok()

    # --- Features -------------------------------------------------------------

    def add_feature(
        self, feature_id: UUID, name: str, value: str, display_order: int = 0
    ) -> Result:
        if _is_missing_id(feature_id):
            return Result.fail(ProductErrors.INVALID_FEATURE_ID)
        feature_name = FeatureName.parse(name)
        if feature_name is None:
            return Result.fail(ProductErrors.INVALID_FEATURE_NAME)
        feature_value = Text.parse(value)
        if feature_value is None:
            return Result.fail(ProductErrors.INVALID_FEATURE_VALUE)
        if self.is_discontinued:
            return Result.fail(ProductErrors.DISCONTINUED_CANNOT_BE_MODIFIED)
        if self.feature(feature_id) is not None:
            return Result.fail(ProductErrors.DUPLICATE_FEATURE_ID)
        if any(f.name_key == feature_name for f in self.features):
            return Result.fail(ProductErrors.FEATURE_ALREADY_EXISTS)

        now = utc_now()
        feature = ProductFeature(
            id=feature_id,
            name=feature_name.value,
            value=feature_value.value,
            display_order=int(display_order),
            created_at=now,
        )
        self.features.append(feature)
        self._touch(now)
        self._record(
            ProductFeatureAdded(
                occurred_at=now,
                product_id=self.id,
                feature_id=feature.id,
                name=feature.name,
                value=feature.value,
                display_order=feature.display_order,
            )
        )
        return Result.ok()

    def update_feature_value(self, feature_id: UUID, new_value: str) -> Result:
        """Change a feature's value.

        Setting the value it already has succeeds without touching the
        product or recording an event.
        """
        if _is_missing_id(feature_id):
            return Result.fail(ProductErrors.INVALID_FEATURE_ID)
        feature_value = Text.parse(new_value)
        if feature_value is None:
            return Result.fail(ProductErrors.INVALID_FEATURE_VALUE)
        if self.is_discontinued:
            return Result.fail(ProductErrors.DISCONTINUED_CANNOT_BE_MODIFIED)
        feature = self.feature(feature_id)
        if feature is None:
            return Result.fail(ProductErrors.FEATURE_NOT_FOUND)
        if feature.value == feature_value.value:
            return Result.ok()

        now = utc_now()
        old_value = feature.value
        feature._update_value(feature_value.value, now)
        self._touch(now)
        self._record(
            ProductFeatureUpdated(
                occurred_at=now,
                product_id=self.id,
                feature_id=feature.id,
                name=feature.name,
                old_value=old_value,
                new_value=feature.value,
            )
        )
        return Result.ok()

    def remove_feature(self, feature_id: UUID) -> Result:
        if _is_missing_id(feature_id):
            return Result.fail(ProductErrors.INVALID_FEATURE_ID)
        if self.is_discontinued:
            return Result.fail(ProductErrors.DISCONTINUED_CANNOT_BE_MODIFIED)
        feature = self.feature(feature_id)
        if feature is None:
            return Result.fail(ProductErrors.FEATURE_NOT_FOUND)

        now = utc_now()
        self.features.remove(feature)
        self._touch(now)
        self._record(
            ProductFeatureRemoved(
                occurred_at=now,
                product_id=self.id,
                feature_id=feature.id,
                name=feature.name,
            )
        )
        return Result.ok()

    # --- Queries --------------------------------------------------------------

    @property
    def is_discontinued(self) -> bool:
        return self.status == ProductStatus.DISCONTINUED

    def feature(self, feature_id: UUID) -> ProductFeature | None:
        for feature in self.features:
            if feature.id == feature_id:
                return feature
        return None

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, action: ProductAction, event_type: type) -> Result:
        outcome = product_transition(self.status, action)
        if isinstance(outcome, Error):
            return Result.fail(outcome)

        now = utc_now()
        self.status = outcome
        self._touch(now)
        self._record(event_type(occurred_at=now, product_id=self.id))
        return Result.ok()
