"""Base class for aggregate roots.

An aggregate owns an append-only buffer of domain events.  Operations
record events as they succeed; the persistence collaborator drains the
buffer with ``pull_events()`` once the change has been committed.
Aggregates never reference a dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from commerce.domain.model.events import DomainEvent


@dataclass(eq=False)
class AggregateRoot:
    """Identity-based equality plus the event buffer.

    Subclasses declare ``id``, ``created_at``, ``updated_at`` and
    ``version`` as their own dataclass fields.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Events recorded since the last drain (does not clear)."""
        return tuple(self._events)

    def pull_events(self) -> list[DomainEvent]:
        """Return every buffered event and empty the buffer."""
        events, self._events = self._events, []
        return events

    def _record(self, event: DomainEvent) -> None:
        self._events.append(event)

    def _touch(self, now: datetime) -> None:
        self.updated_at = now  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))  # type: ignore[attr-defined]
