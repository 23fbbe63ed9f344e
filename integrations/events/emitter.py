from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Iterable, List, Protocol, Union

from integrations.events.models import DomainEvent

logger = logging.getLogger("integrations.events")

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class DomainEventEmitter(Protocol):
    """
    Interface for announcing domain events.

    Implementations must be:
    - fail-safe (emission failures must not fail the submission)
    - observational only
    """

    async def emit(self, event: DomainEvent) -> None:
        ...


class NullEventEmitter:
    """
    A safe no-op emitter.

    Used when nothing in the process subscribes to domain events.
    """

    async def emit(self, event: DomainEvent) -> None:
        return


class RecordingEventEmitter:
    """Keeps every emitted event in order. Useful for tests and audits."""

    def __init__(self) -> None:
        self.events: List[DomainEvent] = []

    async def emit(self, event: DomainEvent) -> None:
        self.events.append(event)


class HandlerEventEmitter:
    """
    Fans each event out to plain handler callables.

    Handlers may be sync or async and run in registration order.
    A failing handler is logged and does not stop the others.
    """

    def __init__(self, handlers: Iterable[EventHandler] = ()) -> None:
        self._handlers: List[EventHandler] = list(handlers)

    def subscribe(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    async def emit(self, event: DomainEvent) -> None:
        for handler in list(self._handlers):
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "domain_event_handler_failed",
                    extra={
                        "event_type": event.type,
                        "event_id": str(event.event_id),
                        "handler": getattr(handler, "__name__", repr(handler)),
                    },
                )
