"""Shared plumbing for application services that change state.

Every command follows the same shape: load or create one aggregate,
call one operation, and on success commit and then publish the drained
events.  A failed Result is returned untouched and nothing is written.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from commerce.application.event_dispatcher import EventDispatcher
from commerce.domain.exceptions import GuardError
from commerce.domain.model.value_objects import Currency, Money, Quantity
from commerce.domain.repository.unit_of_work import UnitOfWork
from commerce.domain.result import Result

logger = structlog.get_logger(__name__)


def parse_id(raw: UUID | str | None) -> UUID | None:
    """Accept a UUID or its string form; anything else becomes None."""
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        return None


def parse_money(amount, currency: Currency | str) -> Money | None:
    """Turn user-supplied amount text into Money; a bad amount becomes None.

    An unsupported currency code still raises.
    """
    resolved = Currency.from_code(currency)
    try:
        return Money.of(amount, resolved)
    except GuardError:
        return None


def parse_quantity(raw) -> Quantity | None:
    try:
        return Quantity(raw)
    except GuardError:
        return None


class CommandHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        dispatcher: EventDispatcher | None = None,
    ) -> None:
        self._uow = uow
        self._dispatcher = dispatcher

    def _complete(self, command: str, result: Result, **context) -> Result:
        """Commit and publish on success; log either way."""
        if result.is_failure:
            logger.warning(command, outcome="rejected", code=result.error.code, **context)
            return result

        self._uow.commit()
        events = self._uow.collect_events()
        if self._dispatcher is not None:
            self._dispatcher.dispatch(events)
        logger.info(command, outcome="ok", events=len(events), **context)
        return result
