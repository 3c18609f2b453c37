"""End-to-end runs of the ``commerce`` command against a temp data dir."""

import re

import pytest
from click.testing import CliRunner

from commerce.infrastructure.cli.main import cli
from commerce.infrastructure.config import get_settings

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
CATEGORY = "11111111-1111-1111-1111-111111111111"


@pytest.fixture
def run(monkeypatch, tmp_path):
    monkeypatch.setenv("COMMERCE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("COMMERCE_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(cli, list(args))

    yield invoke
    get_settings.cache_clear()


def _first_id(output: str) -> str:
    return UUID_RE.search(output).group(0)


def _active_product(run, price: str = "5.00") -> str:
    result = run(
        "product", "create", "--name", "Widget", "--price", price,
        "--category", CATEGORY, "--sku", "w-1",
    )
    assert result.exit_code == 0, result.output
    product_id = _first_id(result.output)
    assert run("product", "publish", "--id", product_id).exit_code == 0
    return product_id


def test_product_lifecycle(run):
    product_id = _active_product(run)

    again = run("product", "publish", "--id", product_id)
    assert again.exit_code != 0
    assert "[Product.AlreadyActive]" in again.output

    assert run("product", "feature", "add", "--id", product_id,
               "--name", "Color", "--value", "Red").exit_code == 0
    assert run("product", "price", "--id", product_id, "--price", "6.00").exit_code == 0

    shown = run("product", "show", "--id", product_id)
    assert shown.exit_code == 0
    assert "ACTIVE" in shown.output
    assert "6.00 USD" in shown.output
    assert "Color" in shown.output


def test_discontinued_product_is_locked(run):
    product_id = _active_product(run)
    assert run("product", "discontinue", "--id", product_id).exit_code == 0

    result = run("product", "price", "--id", product_id, "--price", "9.00")

    assert result.exit_code != 0
    assert "Product.DiscontinuedCannotBeModified" in result.output


def test_order_and_payment_flow(run):
    widget = _active_product(run, "5.00")
    gadget = _active_product(run, "7.50")

    created = run("order", "create", "--customer", "alice@example.com",
                  "--items", f"{widget}:1,{gadget}:1")
    assert created.exit_code == 0, created.output
    assert "12.50 USD" in created.output
    order_id = _first_id(created.output)

    assert run("order", "submit", "--id", order_id).exit_code == 0

    initiated = run("payment", "initiate", "--order", order_id,
                    "--provider", "stripe", "--key", "key-1")
    assert initiated.exit_code == 0, initiated.output
    payment_id = _first_id(initiated.output)

    retried = run("payment", "initiate", "--order", order_id,
                  "--provider", "stripe", "--key", "key-1")
    assert _first_id(retried.output) == payment_id

    assert run("payment", "succeed", "--id", payment_id, "--reference", "ch_1").exit_code == 0
    assert run("payment", "succeed", "--id", payment_id, "--reference", "ch_1").exit_code == 0

    assert "status=PAID" in run("order", "show", "--id", order_id).output
    assert "status=SUCCEEDED" in run("payment", "show", "--id", payment_id).output

    cancelled = run("order", "cancel", "--id", order_id)
    assert cancelled.exit_code != 0
    assert "Order.CannotCancelPaidOrder" in cancelled.output


def test_bad_item_format(run):
    result = run("order", "create", "--customer", "a@b.c", "--items", "nonsense")
    assert result.exit_code != 0
    assert "ProductId:Quantity" in result.output


def test_unknown_order(run):
    result = run("order", "show", "--id", "00000000-0000-0000-0000-000000000123")
    assert result.exit_code != 0
    assert "[Order.NotFound]" in result.output


def test_unsupported_currency_is_reported(run):
    result = run("product", "create", "--name", "W", "--price", "1",
                 "--currency", "XYZ", "--category", CATEGORY, "--sku", "S")
    assert result.exit_code != 0
    assert "Unsupported currency" in result.output


def test_negative_price_is_reported(run):
    product_id = _active_product(run)
    result = run("product", "price", "--id", product_id, "--price", "-1")
    assert result.exit_code != 0
    assert "[Product.InvalidPrice]" in result.output


def test_default_currency_comes_from_settings(run, monkeypatch):
    monkeypatch.setenv("COMMERCE_DEFAULT_CURRENCY", "eur")
    result = run("product", "create", "--name", "W", "--price", "3",
                 "--category", CATEGORY, "--sku", "S")
    assert result.exit_code == 0, result.output
    assert "3.00 EUR" in result.output
