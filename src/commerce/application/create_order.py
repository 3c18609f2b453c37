"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Order creation); the Order itself only keeps product ids.
"""

from __future__ import annotations

from commerce.application.command_handler import (
    CommandHandler,
    parse_id,
    parse_quantity,
)
from commerce.application.dto import OrderDTO, OrderItemSpec
from commerce.domain.model.errors import OrderErrors, ProductErrors
from commerce.domain.model.order import Order, OrderItem
from commerce.domain.model.product import ProductStatus
from commerce.domain.result import Result


class CreateOrderHandler(CommandHandler):

    def handle(self, customer_email: str, item_specs: list[OrderItemSpec]) -> Result:
        """Create a new order.

        Steps:
        1. Resolve each product id to an ACTIVE Product and check its
           quantity.
        2. Build OrderItems with *current* prices (snapshot).
        3. Let the Order aggregate validate all business rules.
        4. Persist, publish events and return a DTO.
        """
        with self._uow:
            items: list[OrderItem] = []
            for spec in item_specs:
                product = self._uow.products.get_by_id(parse_id(spec.product_id))
                if product is None:
                    return Result.fail(ProductErrors.NOT_FOUND)
                if product.status != ProductStatus.ACTIVE:
                    return Result.fail(OrderErrors.PRODUCT_NOT_AVAILABLE)
                quantity = parse_quantity(spec.quantity)
                if quantity is None:
                    return Result.fail(OrderErrors.INVALID_QUANTITY)
                items.append(
                    OrderItem(
                        product_id=product.id,
                        quantity=quantity,
                        unit_price=product.price,  # <-- price snapshot
                    )
                )

            created = Order.create(customer_email=customer_email, items=items)
            if created.is_success:
                self._uow.orders.add(created.value)
            result = self._complete("order.create", created, items=len(items))
        if result.is_failure:
            return result
        return Result.ok(OrderDTO.from_domain(result.value))
