"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from commerce.application.event_dispatcher import EventDispatcher, log_event
from commerce.domain.model.events import DomainEvent
from commerce.infrastructure.config import Settings, get_settings
from commerce.infrastructure.logging import configure_logging
from commerce.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def init_app(settings: Settings | None = None) -> Settings:
    settings = settings or get_settings()
    configure_logging(settings)
    return settings


def unit_of_work(settings: Settings | None = None) -> JsonUnitOfWork:
    settings = settings or get_settings()
    return JsonUnitOfWork(settings.data_dir)


def event_dispatcher() -> EventDispatcher:
    dispatcher = EventDispatcher()
    dispatcher.subscribe(DomainEvent, log_event)
    return dispatcher
