"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from commerce.application.add_product import CreateProductHandler
from commerce.application.change_product_status import ChangeProductStatusHandler
from commerce.application.dto import ProductDTO
from commerce.application.product_features import ManageProductFeaturesHandler
from commerce.application.show_product import ShowProductHandler
from commerce.application.update_product import UpdateProductHandler
from commerce.domain.exceptions import DomainException
from commerce.domain.model.product import ProductAction
from commerce.infrastructure.bootstrap import event_dispatcher, unit_of_work
from commerce.infrastructure.cli.common import unwrap
from commerce.infrastructure.config import get_settings


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  (status={dto.status})")
    click.echo(f"Name:     {dto.name}")
    if dto.description:
        click.echo(f"About:    {dto.description}")
    click.echo(f"SKU:      {dto.sku}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Category: {dto.category_id}")
    if dto.features:
        click.echo()
        click.echo(f"  {'#':>3} {'Feature':<20} {'Value':<20} {'ID'}")
        click.echo(f"  {'-'*80}")
        for f in dto.features:
            click.echo(f"  {f.display_order:>3} {f.name:<20} {f.value:<20} {f.id}")


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--currency", default=None, help="Currency code (defaults to settings).")
@click.option("--category", "category_id", required=True, help="Category ID (UUID).")
@click.option("--sku", required=True, help="Stock-keeping unit.")
@click.option("--description", default=None, help="Optional description.")
def product_create(
    name: str,
    price: str,
    currency: str | None,
    category_id: str,
    sku: str,
    description: str | None,
) -> None:
    """Add a new product to the catalog (as DRAFT)."""
    handler = CreateProductHandler(unit_of_work(), event_dispatcher())

    try:
        dto = unwrap(
            handler.handle(
                name=name,
                price=price,
                currency=currency or get_settings().currency,
                category_id=category_id,
                sku=sku,
                description=description,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' created at {dto.price}")


def _status_command(name: str, action: ProductAction, done: str, help_text: str):
    @click.command(name, help=help_text)
    @click.option("--id", "product_id", required=True, help="Product ID.")
    def command(product_id: str) -> None:
        handler = ChangeProductStatusHandler(unit_of_work(), event_dispatcher())
        try:
            unwrap(handler.handle(product_id, action))
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(f"Product {product_id} {done}.")

    return command


product_publish = _status_command(
    "publish", ProductAction.PUBLISH, "published", "Make a product available for sale."
)
product_deactivate = _status_command(
    "deactivate", ProductAction.DEACTIVATE, "deactivated", "Take an active product off sale."
)
product_discontinue = _status_command(
    "discontinue",
    ProductAction.DISCONTINUE,
    "discontinued",
    "Retire a product permanently.",
)


@click.command("price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--currency", default=None, help="Currency code (defaults to settings).")
def product_price(product_id: str, price: str, currency: str | None) -> None:
    """Change a product's price."""
    handler = UpdateProductHandler(unit_of_work(), event_dispatcher())

    try:
        unwrap(
            handler.change_price(
                product_id, price, currency or get_settings().currency
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} price updated to {price}")


@click.command("category")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--category", "category_id", required=True, help="New category ID.")
def product_category(product_id: str, category_id: str) -> None:
    """Move a product to another category."""
    handler = UpdateProductHandler(unit_of_work(), event_dispatcher())
    try:
        unwrap(handler.change_category(product_id, category_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} moved to category {category_id}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show details of a product."""
    dto = unwrap(ShowProductHandler(unit_of_work()).handle(product_id))
    _display_product(dto)


# --- Features -----------------------------------------------------------------


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Feature name (e.g. Color).")
@click.option("--value", required=True, help="Feature value (e.g. Red).")
@click.option("--order", "display_order", default=0, type=int, help="Display order.")
def feature_add(product_id: str, name: str, value: str, display_order: int) -> None:
    """Add a feature to a product."""
    handler = ManageProductFeaturesHandler(unit_of_work(), event_dispatcher())
    try:
        feature_id = unwrap(handler.add(product_id, name, value, display_order))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Feature {feature_id} '{name.strip()}' added to product {product_id}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--feature", "feature_id", required=True, help="Feature ID.")
@click.option("--value", required=True, help="New value.")
def feature_update(product_id: str, feature_id: str, value: str) -> None:
    """Change the value of a product feature."""
    handler = ManageProductFeaturesHandler(unit_of_work(), event_dispatcher())
    try:
        unwrap(handler.update_value(product_id, feature_id, value))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Feature {feature_id} updated")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--feature", "feature_id", required=True, help="Feature ID.")
def feature_remove(product_id: str, feature_id: str) -> None:
    """Remove a feature from a product."""
    handler = ManageProductFeaturesHandler(unit_of_work(), event_dispatcher())
    try:
        unwrap(handler.remove(product_id, feature_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Feature {feature_id} removed")
