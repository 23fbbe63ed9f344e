from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# ----------------------------------------------------------------------
# Event Types (Closed Set)
# ----------------------------------------------------------------------
class DomainEventType(str, Enum):
    """
    Side effects the application can announce.

    NOTE:
    This set is closed. Every member has exactly one event model in
    the DomainEvent union below.
    """

    REMINDER_CREATED = "reminder.created"
    HMRC_VAT_SUBMITTED = "hmrc.vat.submitted"
    HMRC_CIS_SUBMITTED = "hmrc.cis.submitted"
    HMRC_RTI_SUBMITTED = "hmrc.rti.submitted"


# ----------------------------------------------------------------------
# Event Models
# ----------------------------------------------------------------------
class _BaseDomainEvent(BaseModel):
    """
    An immutable record of something that already happened.

    Events are observational: no consumer is required to exist and
    emitting one never changes the outcome of the operation that
    produced it.
    """

    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    company_id: str = Field(..., alias="companyId", min_length=1)

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )


class ReminderCreated(_BaseDomainEvent):
    type: Literal["reminder.created"] = "reminder.created"
    reminder_id: str = Field(..., alias="reminderId")


class VatSubmitted(_BaseDomainEvent):
    type: Literal["hmrc.vat.submitted"] = "hmrc.vat.submitted"
    receipt_id: str = Field(..., alias="receiptId")


class CisSubmitted(_BaseDomainEvent):
    type: Literal["hmrc.cis.submitted"] = "hmrc.cis.submitted"
    ref: Optional[str] = None


class RtiSubmitted(_BaseDomainEvent):
    type: Literal["hmrc.rti.submitted"] = "hmrc.rti.submitted"
    submission_id: str = Field(..., alias="submissionId")


DomainEvent = Annotated[
    Union[ReminderCreated, VatSubmitted, CisSubmitted, RtiSubmitted],
    Field(discriminator="type"),
]

EVENT_MODELS = {
    DomainEventType.REMINDER_CREATED: ReminderCreated,
    DomainEventType.HMRC_VAT_SUBMITTED: VatSubmitted,
    DomainEventType.HMRC_CIS_SUBMITTED: CisSubmitted,
    DomainEventType.HMRC_RTI_SUBMITTED: RtiSubmitted,
}

_domain_event_adapter: TypeAdapter[DomainEvent] = TypeAdapter(DomainEvent)


def parse_domain_event(data: dict) -> DomainEvent:
    """
    Validate a wire-shaped dict into the matching event model.

    Raises pydantic.ValidationError for unknown tags or missing fields.
    """
    return _domain_event_adapter.validate_python(data)


def dump_domain_event(event: DomainEvent) -> dict:
    return event.model_dump(by_alias=True, mode="json")
