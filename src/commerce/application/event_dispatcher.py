"""In-process dispatcher for drained domain events.

Subscribers are plain callables keyed by event class; subscribing to
``DomainEvent`` receives everything.  Delivery is synchronous and in
order.  A failing subscriber is logged and does not stop delivery to the
others, because the state change behind the event is already committed.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Iterable

import structlog

from commerce.domain.model.events import DomainEvent

logger = structlog.get_logger(__name__)

Subscriber = Callable[[DomainEvent], None]


class EventDispatcher:

    def __init__(self) -> None:
        self._subscribers: dict[type[DomainEvent], list[Subscriber]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], subscriber: Subscriber) -> None:
        self._subscribers[event_type].append(subscriber)

    def dispatch(self, events: Iterable[DomainEvent]) -> int:
        """Deliver each event to its subscribers; return events delivered."""
        count = 0
        for event in events:
            for subscriber in self._subscribers_for(event):
                try:
                    subscriber(event)
                except Exception:
                    logger.exception(
                        "event.subscriber_failed",
                        event_type=event.event_type,
                        subscriber=getattr(subscriber, "__qualname__", repr(subscriber)),
                    )
            count += 1
        return count

    def _subscribers_for(self, event: DomainEvent) -> list[Subscriber]:
        matched: list[Subscriber] = []
        for cls in type(event).__mro__:
            matched.extend(self._subscribers.get(cls, ()))
        return matched


def log_event(event: DomainEvent) -> None:
    """Default subscriber: write every event to the structured log."""
    logger.info("event.dispatched", event_type=event.event_type, **_event_fields(event))


def _event_fields(event: DomainEvent) -> dict[str, str]:
    fields = {}
    for name, value in vars(event).items():
        if name == "occurred_at":
            fields[name] = value.isoformat()
        elif value is not None:
            fields[name] = str(value)
    return fields
