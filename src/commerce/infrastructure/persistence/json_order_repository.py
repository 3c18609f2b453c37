"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from uuid import UUID

from commerce.domain.model.order import Order, OrderItem, OrderStatus
from commerce.domain.model.value_objects import Quantity
from commerce.domain.repository.order_repository import OrderRepository
from commerce.infrastructure.persistence.json_store import JsonAggregateStore
from commerce.infrastructure.persistence.mapping import (
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
    uuid_from_raw,
)


class JsonOrderRepository(JsonAggregateStore[Order], OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: UUID) -> Order | None:
        return self._get(order_id)

    def add(self, order: Order) -> None:
        self._add(order)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": str(order.id),
            "customer_email": order.customer_email,
            "status": order.status.value,
            "total": money_to_raw(order.total),
            "items": [
                {
                    "product_id": str(item.product_id),
                    "quantity": item.quantity.value,
                    "unit_price": money_to_raw(item.unit_price),
                }
                for item in order.items
            ],
            "created_at": dt_to_raw(order.created_at),
            "updated_at": dt_to_raw(order.updated_at),
            "version": order.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderItem(
                product_id=uuid_from_raw(i["product_id"]),
                quantity=Quantity(i["quantity"]),
                unit_price=money_from_raw(i["unit_price"]),
            )
            for i in raw["items"]
        )
        return Order(
            id=uuid_from_raw(raw["id"]),
            customer_email=raw["customer_email"],
            items=items,
            total=money_from_raw(raw["total"]),
            status=OrderStatus(raw["status"]),
            created_at=dt_from_raw(raw["created_at"]),
            updated_at=dt_from_raw(raw.get("updated_at")),
            version=raw.get("version", 0),
        )
