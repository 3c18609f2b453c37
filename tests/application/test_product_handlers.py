"""Integration tests for the product use cases.

Uses in-memory fakes, no file I/O.
"""

from uuid import uuid4

import pytest

from commerce.application.add_product import CreateProductHandler
from commerce.application.change_product_status import ChangeProductStatusHandler
from commerce.application.event_dispatcher import EventDispatcher
from commerce.application.product_features import ManageProductFeaturesHandler
from commerce.application.show_product import ShowProductHandler
from commerce.application.update_product import UpdateProductHandler
from commerce.domain.exceptions import UnsupportedCurrencyError
from commerce.domain.model.events import (
    DomainEvent,
    ProductActivated,
    ProductCreated,
    ProductFeatureAdded,
    ProductPriceChanged,
)
from commerce.domain.model.product import ProductAction, ProductStatus
from commerce.domain.model.value_objects import Money
from tests.builders import CATEGORY, make_product
from tests.fakes import FakeUnitOfWork


def _recording_dispatcher() -> tuple[EventDispatcher, list[DomainEvent]]:
    received: list[DomainEvent] = []
    dispatcher = EventDispatcher()
    dispatcher.subscribe(DomainEvent, received.append)
    return dispatcher, received


class TestCreateProduct:

    def test_creates_draft_product(self):
        uow = FakeUnitOfWork()
        dispatcher, received = _recording_dispatcher()
        handler = CreateProductHandler(uow, dispatcher)

        result = handler.handle("Widget", "10.00", "usd", str(CATEGORY), "wid-1", "A widget")

        assert result.is_success
        dto = result.value
        assert dto.status == "DRAFT"
        assert dto.price == "10.00 USD"
        assert dto.sku == "WID-1"
        assert uow.commits == 1
        assert [type(e) for e in received] == [ProductCreated]

    def test_persists_product(self):
        uow = FakeUnitOfWork()
        dto = CreateProductHandler(uow).handle("Widget", "1", "USD", CATEGORY, "S").value
        stored = ShowProductHandler(uow).handle(dto.id)
        assert stored.is_success
        assert stored.value.name == "Widget"

    def test_invalid_input_writes_nothing(self):
        uow = FakeUnitOfWork()
        dispatcher, received = _recording_dispatcher()
        result = CreateProductHandler(uow, dispatcher).handle(
            "  ", "1", "USD", CATEGORY, "S"
        )
        assert result.error.code == "Product.InvalidName"
        assert uow.commits == 0
        assert received == []

    def test_malformed_category_id(self):
        uow = FakeUnitOfWork()
        result = CreateProductHandler(uow).handle("Widget", "1", "USD", "nope", "S")
        assert result.error.code == "Product.InvalidCategoryId"

    @pytest.mark.parametrize("price", ["-1", "abc", "", "NaN"])
    def test_bad_price_rejected(self, price):
        uow = FakeUnitOfWork()
        result = CreateProductHandler(uow).handle("Widget", price, "USD", CATEGORY, "S")
        assert result.error.code == "Product.InvalidPrice"
        assert uow.commits == 0

    def test_unsupported_currency_is_a_caller_defect(self):
        with pytest.raises(UnsupportedCurrencyError):
            CreateProductHandler(FakeUnitOfWork()).handle("W", "1", "XYZ", CATEGORY, "S")


class TestChangeProductStatus:

    def test_publish_then_publish_again(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        dispatcher, received = _recording_dispatcher()
        handler = ChangeProductStatusHandler(uow, dispatcher)

        assert handler.handle(product.id, ProductAction.PUBLISH).is_success
        again = handler.handle(str(product.id), ProductAction.PUBLISH)

        assert again.error.code == "Product.AlreadyActive"
        assert product.status == ProductStatus.ACTIVE
        assert [type(e) for e in received] == [ProductActivated]
        assert product.version == 1

    def test_unknown_product(self):
        result = ChangeProductStatusHandler(FakeUnitOfWork()).handle(
            uuid4(), ProductAction.DISCONTINUE
        )
        assert result.error.code == "Product.NotFound"

    def test_discontinue(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        assert ChangeProductStatusHandler(uow).handle(
            product.id, ProductAction.DISCONTINUE
        ).is_success
        assert product.status == ProductStatus.DISCONTINUED


class TestUpdateProduct:

    def test_change_price(self):
        product = make_product(price="10.00")
        uow = FakeUnitOfWork(products=[product])
        dispatcher, received = _recording_dispatcher()

        result = UpdateProductHandler(uow, dispatcher).change_price(product.id, "12.00", "USD")

        assert result.is_success
        assert product.price == Money.of("12.00")
        assert isinstance(received[0], ProductPriceChanged)

    def test_unchanged_price(self):
        product = make_product(price="10.00")
        uow = FakeUnitOfWork(products=[product])
        result = UpdateProductHandler(uow).change_price(product.id, "10", "USD")
        assert result.error.code == "Product.PriceUnchanged"
        assert uow.commits == 0

    @pytest.mark.parametrize("price", ["-1", "ten"])
    def test_bad_price_rejected(self, price):
        product = make_product(price="10.00")
        uow = FakeUnitOfWork(products=[product])

        result = UpdateProductHandler(uow).change_price(product.id, price, "USD")

        assert result.error.code == "Product.InvalidPrice"
        assert product.price == Money.of("10.00")
        assert uow.commits == 0

    def test_change_category(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        new_category = uuid4()
        assert UpdateProductHandler(uow).change_category(product.id, str(new_category)).is_success
        assert product.category_id == new_category

    def test_change_category_unknown_product(self):
        result = UpdateProductHandler(FakeUnitOfWork()).change_category(uuid4(), uuid4())
        assert result.error.code == "Product.NotFound"


class TestProductFeatures:

    def test_add_generates_id(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        dispatcher, received = _recording_dispatcher()

        result = ManageProductFeaturesHandler(uow, dispatcher).add(product.id, "Color", "Red", 2)

        assert result.is_success
        assert product.feature(result.value).value == "Red"
        assert isinstance(received[0], ProductFeatureAdded)

    def test_add_with_explicit_id(self):
        product = make_product()
        feature_id = uuid4()
        uow = FakeUnitOfWork(products=[product])
        result = ManageProductFeaturesHandler(uow).add(
            product.id, "Color", "Red", feature_id=str(feature_id)
        )
        assert result.value == feature_id

    def test_update_and_remove(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        handler = ManageProductFeaturesHandler(uow)
        feature_id = handler.add(product.id, "Color", "Red").value

        assert handler.update_value(product.id, feature_id, "Blue").is_success
        assert product.feature(feature_id).value == "Blue"
        assert handler.remove(product.id, str(feature_id)).is_success
        assert product.features == []

    def test_duplicate_name_rejected(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        handler = ManageProductFeaturesHandler(uow)
        handler.add(product.id, "Color", "Red")
        result = handler.add(product.id, "color", "Blue")
        assert result.error.code == "Product.FeatureAlreadyExists"

    def test_show_lists_features_by_display_order(self):
        product = make_product()
        uow = FakeUnitOfWork(products=[product])
        handler = ManageProductFeaturesHandler(uow)
        handler.add(product.id, "Size", "L", 2)
        handler.add(product.id, "Color", "Red", 1)

        dto = ShowProductHandler(uow).handle(product.id).value

        assert [f.name for f in dto.features] == ["Color", "Size"]


class TestShowProduct:

    def test_not_found(self):
        assert ShowProductHandler(FakeUnitOfWork()).handle(uuid4()).error.code == "Product.NotFound"

    def test_malformed_id_is_not_found(self):
        assert ShowProductHandler(FakeUnitOfWork()).handle("xyz").error.code == "Product.NotFound"
