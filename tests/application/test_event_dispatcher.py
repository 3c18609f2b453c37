"""Tests for the in-process event dispatcher."""

from uuid import uuid4

from commerce.application.event_dispatcher import EventDispatcher, log_event
from commerce.domain.model.events import (
    DomainEvent,
    OrderCancelled,
    ProductActivated,
    utc_now,
)


def _activated() -> ProductActivated:
    return ProductActivated(occurred_at=utc_now(), product_id=uuid4())


class TestEventDispatcher:

    def test_delivers_by_exact_type(self):
        dispatcher = EventDispatcher()
        received = []
        dispatcher.subscribe(ProductActivated, received.append)
        cancelled = OrderCancelled(occurred_at=utc_now(), order_id=uuid4(), reason=None)

        count = dispatcher.dispatch([_activated(), cancelled])

        assert count == 2
        assert [type(e) for e in received] == [ProductActivated]

    def test_base_class_subscriber_sees_everything(self):
        dispatcher = EventDispatcher()
        received = []
        dispatcher.subscribe(DomainEvent, received.append)
        dispatcher.dispatch([_activated(), _activated()])
        assert len(received) == 2

    def test_delivery_preserves_order(self):
        dispatcher = EventDispatcher()
        received = []
        dispatcher.subscribe(DomainEvent, received.append)
        events = [_activated() for _ in range(3)]
        dispatcher.dispatch(events)
        assert received == events

    def test_failing_subscriber_does_not_stop_others(self):
        dispatcher = EventDispatcher()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        dispatcher.subscribe(DomainEvent, broken)
        dispatcher.subscribe(DomainEvent, received.append)

        assert dispatcher.dispatch([_activated()]) == 1
        assert len(received) == 1

    def test_no_events(self):
        assert EventDispatcher().dispatch([]) == 0

    def test_log_event_accepts_any_event(self):
        log_event(OrderCancelled(occurred_at=utc_now(), order_id=uuid4(), reason=None))
        assert ProductActivated(occurred_at=utc_now(), product_id=uuid4()).event_type == (
            "ProductActivated"
        )
