"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from uuid import UUID

from commerce.domain.model.product import Product, ProductFeature, ProductStatus
from commerce.domain.repository.product_repository import ProductRepository
from commerce.infrastructure.persistence.json_store import JsonAggregateStore
from commerce.infrastructure.persistence.mapping import (
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
    uuid_from_raw,
)


class JsonProductRepository(JsonAggregateStore[Product], ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: UUID) -> Product | None:
        return self._get(product_id)

    def add(self, product: Product) -> None:
        self._add(product)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": str(product.id),
            "name": product.name,
            "description": product.description,
            "price": money_to_raw(product.price),
            "category_id": str(product.category_id),
            "sku": product.sku,
            "status": product.status.value,
            "features": [
                {
                    "id": str(f.id),
                    "name": f.name,
                    "value": f.value,
                    "display_order": f.display_order,
                    "created_at": dt_to_raw(f.created_at),
                    "updated_at": dt_to_raw(f.updated_at),
                }
                for f in product.features
            ],
            "created_at": dt_to_raw(product.created_at),
            "updated_at": dt_to_raw(product.updated_at),
            "version": product.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        features = [
            ProductFeature(
                id=uuid_from_raw(f["id"]),
                name=f["name"],
                value=f["value"],
                display_order=f.get("display_order", 0),
                created_at=dt_from_raw(f["created_at"]),
                updated_at=dt_from_raw(f.get("updated_at")),
            )
            for f in raw.get("features", [])
        ]
        return Product(
            id=uuid_from_raw(raw["id"]),
            name=raw["name"],
            description=raw.get("description"),
            price=money_from_raw(raw["price"]),
            category_id=uuid_from_raw(raw["category_id"]),
            sku=raw["sku"],
            status=ProductStatus(raw["status"]),
            features=features,
            created_at=dt_from_raw(raw["created_at"]),
            updated_at=dt_from_raw(raw.get("updated_at")),
            version=raw.get("version", 0),
        )
