"""JSON-file-backed implementation of PaymentRepository.

Also enforces idempotency-key uniqueness at commit time: the key is the
caller's retry token, so two stored payments may never share one.
"""

from __future__ import annotations

from uuid import UUID

from commerce.domain.exceptions import ConcurrencyError
from commerce.domain.model.payment import Payment, PaymentStatus
from commerce.domain.repository.payment_repository import PaymentRepository
from commerce.infrastructure.persistence.json_store import JsonAggregateStore
from commerce.infrastructure.persistence.mapping import (
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
    uuid_from_raw,
)


class JsonPaymentRepository(JsonAggregateStore[Payment], PaymentRepository):

    # --- PaymentRepository interface ------------------------------------------

    def get_by_id(self, payment_id: UUID) -> Payment | None:
        return self._get(payment_id)

    def get_by_idempotency_key(self, key: str) -> Payment | None:
        key = key.strip()
        for payment in self._tracked.values():
            if payment.idempotency_key == key:
                return payment
        for raw in self._load_raw():
            if raw["idempotency_key"] == key:
                return self._get(uuid_from_raw(raw["id"]))
        return None

    def add(self, payment: Payment) -> None:
        self._add(payment)

    def _check_unique(self, payment: Payment, records: list[dict]) -> None:
        for raw in records:
            if raw["idempotency_key"] == payment.idempotency_key and raw["id"] != str(
                payment.id
            ):
                raise ConcurrencyError(
                    f"Idempotency key {payment.idempotency_key!r} is already in use"
                )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(payment: Payment) -> dict:
        return {
            "id": str(payment.id),
            "order_id": str(payment.order_id),
            "amount": money_to_raw(payment.amount),
            "status": payment.status.value,
            "provider": payment.provider,
            "provider_reference": payment.provider_reference,
            "idempotency_key": payment.idempotency_key,
            "failure_reason": payment.failure_reason,
            "created_at": dt_to_raw(payment.created_at),
            "updated_at": dt_to_raw(payment.updated_at),
            "version": payment.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Payment:
        return Payment(
            id=uuid_from_raw(raw["id"]),
            order_id=uuid_from_raw(raw["order_id"]),
            amount=money_from_raw(raw["amount"]),
            status=PaymentStatus(raw["status"]),
            provider=raw["provider"],
            provider_reference=raw.get("provider_reference"),
            idempotency_key=raw["idempotency_key"],
            failure_reason=raw.get("failure_reason"),
            created_at=dt_from_raw(raw["created_at"]),
            updated_at=dt_from_raw(raw.get("updated_at")),
            version=raw.get("version", 0),
        )
