"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from commerce.application.cancel_order import CancelOrderHandler
from commerce.application.create_order import CreateOrderHandler
from commerce.application.dto import OrderDTO, OrderItemSpec
from commerce.application.show_order import ShowOrderHandler
from commerce.application.submit_order import SubmitOrderHandler
from commerce.domain.exceptions import DomainException
from commerce.infrastructure.bootstrap import event_dispatcher, unit_of_work
from commerce.infrastructure.cli.common import unwrap


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '<product-id>:3,<product-id>:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_email}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*72}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<36} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Order Total':<42} {dto.total:>29}")


@click.command("create")
@click.option("--customer", required=True, help="Customer email.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(customer: str, items: str) -> None:
    """Create a new order from active products."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(unit_of_work(), event_dispatcher())

    try:
        dto = unwrap(handler.handle(customer_email=customer, item_specs=specs))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work())

    try:
        dto = unwrap(handler.handle(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("submit")
@click.option("--id", "order_id", required=True, help="Order ID to submit.")
def order_submit(order_id: str) -> None:
    """Submit a created order for payment."""
    handler = SubmitOrderHandler(unit_of_work(), event_dispatcher())

    try:
        unwrap(handler.handle(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} submitted — awaiting payment.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
@click.option("--reason", default=None, help="Why the order is cancelled.")
def order_cancel(order_id: str, reason: str | None) -> None:
    """Cancel an order that has not been paid."""
    handler = CancelOrderHandler(unit_of_work(), event_dispatcher())

    try:
        unwrap(handler.handle(order_id, reason=reason))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} cancelled.")
