"""Abstract repository for Payment aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from commerce.domain.model.payment import Payment


class PaymentRepository(ABC):

    @abstractmethod
    def get_by_id(self, payment_id: UUID) -> Payment | None:
        """Return a payment by its ID, or None if not found."""

    @abstractmethod
    def get_by_idempotency_key(self, key: str) -> Payment | None:
        """Return the payment registered under an idempotency key, if any."""

    @abstractmethod
    def add(self, payment: Payment) -> None:
        """Register a new payment; it is written on the next commit."""
