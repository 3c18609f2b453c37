"""Unit of Work — the persistence boundary the application talks to.

A unit of work tracks every aggregate loaded or added through its
repositories and writes them all in one atomic ``commit()``.  Events are
only handed out (``collect_events``) after a commit succeeded, so a
mutation that was never persisted is never announced.

Usage::

    with uow:
        product = uow.products.get_by_id(product_id)
        product.publish()
        uow.commit()
        events = uow.collect_events()

Leaving the block without committing discards all tracked instances.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from commerce.domain.exceptions import GuardError
from commerce.domain.model.aggregate import AggregateRoot
from commerce.domain.model.events import DomainEvent
from commerce.domain.repository.order_repository import OrderRepository
from commerce.domain.repository.payment_repository import PaymentRepository
from commerce.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    orders: OrderRepository
    payments: PaymentRepository

    def __init__(self) -> None:
        self._committed: list[AggregateRoot] = []

    def __enter__(self) -> UnitOfWork:
        self._committed = []
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    def commit(self) -> int:
        """Persist every tracked aggregate atomically.

        Returns the number of aggregates written.  On failure nothing is
        written, the tracked instances are discarded and the error
        propagates.
        """
        try:
            written = self._commit()
        except Exception:
            self._discard()
            raise
        self._committed.extend(written)
        self._discard()
        return len(written)

    def collect_events(self) -> list[DomainEvent]:
        """Drain the event buffers of everything committed so far."""
        events: list[DomainEvent] = []
        for aggregate in self._committed:
            events.extend(aggregate.pull_events())
        self._committed = []
        return events

    def rollback(self) -> None:
        self._discard()

    # --- Implementation hooks -------------------------------------------------

    @abstractmethod
    def _commit(self) -> list[AggregateRoot]:
        """Write tracked aggregates; return the ones that were written."""

    @abstractmethod
    def _discard(self) -> None:
        """Forget every tracked aggregate instance."""


def ensure_new(aggregate: AggregateRoot, existing: AggregateRoot | None) -> None:
    """Guard for ``add()``: an id may only be registered once."""
    if existing is not None:
        raise GuardError(
            f"{type(aggregate).__name__} {aggregate.id} is already registered"  # type: ignore[attr-defined]
        )
