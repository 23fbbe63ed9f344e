from .models import (
    CisSubmitted,
    DomainEvent,
    DomainEventType,
    EVENT_MODELS,
    ReminderCreated,
    RtiSubmitted,
    VatSubmitted,
    dump_domain_event,
    parse_domain_event,
)
from .emitter import (
    DomainEventEmitter,
    EventHandler,
    HandlerEventEmitter,
    NullEventEmitter,
    RecordingEventEmitter,
)

__all__ = [
    "CisSubmitted",
    "DomainEvent",
    "DomainEventType",
    "EVENT_MODELS",
    "ReminderCreated",
    "RtiSubmitted",
    "VatSubmitted",
    "dump_domain_event",
    "parse_domain_event",
    "DomainEventEmitter",
    "EventHandler",
    "HandlerEventEmitter",
    "NullEventEmitter",
    "RecordingEventEmitter",
]
