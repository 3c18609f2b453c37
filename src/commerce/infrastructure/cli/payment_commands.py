"""CLI commands for the Payment aggregate.

``succeed`` and ``fail`` are what a gateway webhook adapter would call;
repeating them with the same arguments is safe.
"""

from __future__ import annotations

import click

from commerce.application.dto import PaymentDTO
from commerce.application.initiate_payment import InitiatePaymentHandler
from commerce.application.report_payment_outcome import ReportPaymentOutcomeHandler
from commerce.application.show_payment import ShowPaymentHandler
from commerce.domain.exceptions import DomainException
from commerce.infrastructure.bootstrap import event_dispatcher, unit_of_work
from commerce.infrastructure.cli.common import unwrap


def _display_payment(dto: PaymentDTO) -> None:
    click.echo(f"Payment {dto.id}  (status={dto.status})")
    click.echo(f"Order:     {dto.order_id}")
    click.echo(f"Amount:    {dto.amount}")
    click.echo(f"Provider:  {dto.provider}")
    click.echo(f"Key:       {dto.idempotency_key}")
    if dto.provider_reference:
        click.echo(f"Reference: {dto.provider_reference}")
    if dto.failure_reason:
        click.echo(f"Reason:    {dto.failure_reason}")


@click.command("initiate")
@click.option("--order", "order_id", required=True, help="Order ID to pay.")
@click.option("--provider", required=True, help="Payment provider name.")
@click.option("--key", "idempotency_key", required=True, help="Idempotency key.")
def payment_initiate(order_id: str, provider: str, idempotency_key: str) -> None:
    """Start a payment for an order awaiting payment."""
    handler = InitiatePaymentHandler(unit_of_work(), event_dispatcher())

    try:
        dto = unwrap(handler.handle(order_id, provider, idempotency_key))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_payment(dto)


@click.command("succeed")
@click.option("--id", "payment_id", required=True, help="Payment ID.")
@click.option("--reference", required=True, help="Provider's transaction reference.")
def payment_succeed(payment_id: str, reference: str) -> None:
    """Record a successful charge (also marks the order paid)."""
    handler = ReportPaymentOutcomeHandler(unit_of_work(), event_dispatcher())

    try:
        unwrap(handler.succeeded(payment_id, reference))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Payment {payment_id} succeeded.")


@click.command("fail")
@click.option("--id", "payment_id", required=True, help="Payment ID.")
@click.option("--reason", default=None, help="Failure reason from the provider.")
def payment_fail(payment_id: str, reason: str | None) -> None:
    """Record a failed charge."""
    handler = ReportPaymentOutcomeHandler(unit_of_work(), event_dispatcher())

    try:
        unwrap(handler.failed(payment_id, reason))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Payment {payment_id} failed.")


@click.command("show")
@click.option("--id", "payment_id", required=True, help="Payment ID.")
def payment_show(payment_id: str) -> None:
    """Show details of a payment."""
    handler = ShowPaymentHandler(unit_of_work())

    try:
        dto = unwrap(handler.handle(payment_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_payment(dto)
