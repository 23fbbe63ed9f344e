import pytest
from pydantic import ValidationError

from integrations.events import (
    EVENT_MODELS,
    CisSubmitted,
    DomainEventType,
    ReminderCreated,
    RtiSubmitted,
    VatSubmitted,
    dump_domain_event,
    parse_domain_event,
)


def test_every_event_type_has_exactly_one_model():
    assert set(EVENT_MODELS) == set(DomainEventType)
    assert len(set(EVENT_MODELS.values())) == len(DomainEventType)

    for event_type, model in EVENT_MODELS.items():
        assert model.model_fields["type"].default == event_type.value


@pytest.mark.parametrize(
    "wire, model",
    [
        (
            {"type": "reminder.created", "reminderId": "r-1", "companyId": "c-1"},
            ReminderCreated,
        ),
        (
            {"type": "hmrc.vat.submitted", "receiptId": "VAT-1", "companyId": "c-1"},
            VatSubmitted,
        ),
        ({"type": "hmrc.cis.submitted", "companyId": "c-1"}, CisSubmitted),
        (
            {"type": "hmrc.rti.submitted", "submissionId": "RTI-1", "companyId": "c-1"},
            RtiSubmitted,
        ),
    ],
)
def test_wire_events_parse_to_their_variant(wire, model):
    event = parse_domain_event(wire)

    assert isinstance(event, model)
    assert event.company_id == "c-1"

    dumped = dump_domain_event(event)
    for key, value in wire.items():
        assert dumped[key] == value
    assert parse_domain_event(dumped) == event


def test_unknown_tag_is_rejected():
    with pytest.raises(ValidationError):
        parse_domain_event({"type": "hmrc.paye.submitted", "companyId": "c-1"})


def test_variant_fields_are_required():
    with pytest.raises(ValidationError):
        parse_domain_event({"type": "hmrc.vat.submitted", "companyId": "c-1"})


def test_events_are_immutable_and_identified():
    first = VatSubmitted(company_id="c-1", receipt_id="VAT-1")
    second = VatSubmitted(company_id="c-1", receipt_id="VAT-1")

    assert first.event_id != second.event_id
    assert first.timestamp.tzinfo is not None

    with pytest.raises(ValidationError):
        first.receipt_id = "VAT-2"
