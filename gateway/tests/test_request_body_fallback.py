import pytest

from gateway.app.services.mock_functions import MOCK_FUNCTIONS
from gateway.tests.helpers import mock_client


@pytest.mark.parametrize(
    "raw",
    [
        b"{not json",
        b"",
        b"   ",
        b"[1, 2, 3]",
        b'"submit_vat"',
        b"null",
        b"\xff\xfe",
    ],
)
def test_unusable_body_is_treated_as_empty_object(raw):
    client = mock_client()

    response = client.post(
        "/functions/v1/hmrc-vat",
        content=raw,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "HMRC VAT mock ready"}


def test_non_string_action_is_not_dispatched():
    client = mock_client()

    response = client.post("/functions/v1/hmrc-rti", json={"action": ["fps"]})

    assert response.status_code == 200
    assert response.json()["message"] == "HMRC RTI mock ready"


def test_handler_exception_becomes_500_with_message(monkeypatch):
    def explode(body):
        raise ValueError("ledger offline")

    monkeypatch.setitem(MOCK_FUNCTIONS["hmrc-vat"].actions, "submit_vat", explode)
    client = mock_client()

    response = client.post(
        "/functions/v1/hmrc-vat", json={"action": "submit_vat"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "ledger offline"}
    assert response.headers["access-control-allow-origin"] == "*"
