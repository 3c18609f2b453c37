"""Field-level converters shared by the JSON repositories."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from commerce.domain.model.value_objects import Currency, Money


def money_to_raw(money: Money) -> dict:
    return {"amount": str(money.amount), "currency": money.currency.value}


def money_from_raw(raw: dict) -> Money:
    return Money(Decimal(raw["amount"]), Currency.from_code(raw["currency"]))


def dt_to_raw(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def dt_from_raw(raw: str | None) -> datetime | None:
    return datetime.fromisoformat(raw) if raw is not None else None


def uuid_from_raw(raw: str) -> UUID:
    return UUID(raw)
