"""In-memory event bus.

Services only see the ``EventPublisher`` side; subscription happens once
in ``config.container`` when the bus is built.  Nothing here is a module
level singleton, so tests build their own bus.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, Type, TypeVar

import structlog

from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class EventHandler(Protocol[E]):
    def handle(self, event: E) -> None: ...


class EventPublisher(Protocol):
    """What a service needs from the bus."""

    def publish(self, event: DomainEvent) -> None: ...


class InMemoryEventBus:
    """Synchronous bus dispatching on the exact event class."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def subscribe(self, event_class: Type[DomainEvent], handler: EventHandler) -> None:
        handlers = self._handlers.setdefault(event_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), [])
        logger.debug(
            "event_bus.publish",
            event_name=event.event_name,
            aggregate_id=event.aggregate_id,
            handler_count=len(handlers),
        )
        for handler in handlers:
            handler.handle(event)

    def handlers_for(self, event_class: Type[DomainEvent]) -> List[EventHandler]:
        """Return a copy of the handlers subscribed to ``event_class``."""
        return list(self._handlers.get(event_class, []))
