import click

from commerce.infrastructure.bootstrap import init_app
from commerce.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_show,
    order_submit,
)
from commerce.infrastructure.cli.payment_commands import (
    payment_fail,
    payment_initiate,
    payment_show,
    payment_succeed,
)
from commerce.infrastructure.cli.product_commands import (
    feature_add,
    feature_remove,
    feature_update,
    product_category,
    product_create,
    product_deactivate,
    product_discontinue,
    product_price,
    product_publish,
    product_show,
)


@click.group()
def cli() -> None:
    """Commerce — products, orders and payments"""
    init_app()


@cli.group()
def product() -> None:
    """Manage products."""


@product.group()
def feature() -> None:
    """Manage product features."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def payment() -> None:
    """Record payments."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_publish)
product.add_command(product_deactivate)
product.add_command(product_discontinue)
product.add_command(product_price)
product.add_command(product_category)
product.add_command(product_show)
feature.add_command(feature_add)
feature.add_command(feature_update)
feature.add_command(feature_remove)
order.add_command(order_create)
order.add_command(order_submit)
order.add_command(order_cancel)
order.add_command(order_show)
payment.add_command(payment_initiate)
payment.add_command(payment_succeed)
payment.add_command(payment_fail)
payment.add_command(payment_show)
