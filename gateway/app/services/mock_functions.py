"""
Mock edge-function registry.

Each entry binds together:

- a public function name (the URL segment under /functions/v1)
- a human-readable service label used in the "mock ready" reply
- the actions the function recognises, each mapped to a handler

Handlers are pure: they receive the already-parsed request body and
return the JSON reply. They echo caller-supplied fields and synthesize
reference ids from the current time. Nothing is validated, stored or
forwarded to HMRC or a bank.
"""

from typing import Any, Callable, Dict
from urllib.parse import urlencode
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from gateway.app.services.references import mock_reference

Body = Dict[str, Any]
ActionHandler = Callable[[Body], Dict[str, Any]]

DEFAULT_ACTION = "info"
DEFAULT_CLIENT_ID = "mock-client"
DEFAULT_REDIRECT_URI = "https://example.com/callback"
DEFAULT_VAT_PERIOD_KEY = "24A1"

HMRC_AUTHORIZE_URL = "https://mock.hmrc.service/oauth/authorize"
TRUELAYER_CONSENT_URL = "https://mock.truelayer.com/consent"


def is_falsy(value: Any) -> bool:
    """
    Falsiness as the browser clients see it: empty containers count as
    present, only null, false, zero, NaN and "" are missing.
    """
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def value_or(value: Any, default: Any) -> Any:
    return default if is_falsy(value) else value


def _details(body: Body) -> Any:
    return value_or(body.get("details"), {})


def _detail(body: Body, key: str, default: str) -> Any:
    details = _details(body)
    if isinstance(details, dict):
        return value_or(details.get(key), default)
    return default


# ---------------------------------------------------------------------------
# hmrc-vat
# ---------------------------------------------------------------------------

def submit_vat(body: Body) -> Dict[str, Any]:
    return {
        "status": "ok",
        "message": "Mock VAT submitted",
        "receiptId": mock_reference("VAT"),
        "periodKey": value_or(body.get("periodKey"), DEFAULT_VAT_PERIOD_KEY),
        "values": value_or(
            body.get("values"),
            {"vatDueSales": 0, "vatDueAcquisitions": 0},
        ),
    }


# ---------------------------------------------------------------------------
# hmrc-cis
# ---------------------------------------------------------------------------

def verify_cis(body: Body) -> Dict[str, Any]:
    return {
        "status": "verified",
        "message": "Mock CIS verified",
        "ref": mock_reference("CIS"),
        "details": _details(body),
    }


# ---------------------------------------------------------------------------
# hmrc-rti
# ---------------------------------------------------------------------------

def submit_fps(body: Body) -> Dict[str, Any]:
    employees = body.get("employees")
    return {
        "status": "ok",
        "message": "Mock RTI FPS submitted",
        "submissionId": mock_reference("RTI"),
        "employeesCount": len(employees) if isinstance(employees, list) else 0,
    }


# ---------------------------------------------------------------------------
# hmrc-oauth
# ---------------------------------------------------------------------------

def start_oauth(body: Body) -> Dict[str, Any]:
    state = str(uuid4())
    client_id = _detail(body, "hmrcClientId", DEFAULT_CLIENT_ID)
    redirect_uri = _detail(body, "hmrcRedirectUri", DEFAULT_REDIRECT_URI)
    query = urlencode(
        {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "state": state,
        }
    )
    return {
        "status": "ok",
        "message": "Mock OAuth URL generated",
        "url": f"{HMRC_AUTHORIZE_URL}?{query}",
        "state": state,
        "clientId": client_id,
    }


def exchange_oauth_code(body: Body) -> Dict[str, Any]:
    return {
        "status": "ok",
        "access_token": "mock_access_token",
        "refresh_token": "mock_refresh_token",
        "expires_in": 3600,
    }


# ---------------------------------------------------------------------------
# banking-truelayer
# ---------------------------------------------------------------------------

def create_consent(body: Body) -> Dict[str, Any]:
    consent_id = mock_reference("CONSENT")
    client_id = _detail(body, "truelayerClientId", DEFAULT_CLIENT_ID)
    redirect_uri = _detail(body, "truelayerRedirectUri", DEFAULT_REDIRECT_URI)
    query = urlencode(
        {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "state": consent_id,
        }
    )
    return {
        "status": "ok",
        "message": "Mock consent created",
        "consentId": consent_id,
        "url": f"{TRUELAYER_CONSENT_URL}?{query}",
    }


def list_transactions(body: Body) -> Dict[str, Any]:
    return {
        "status": "ok",
        "message": "Mock transactions listed",
        "companyId": body.get("companyId"),
        "from": body.get("from"),
        "to": body.get("to"),
        "transactions": [],
    }


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class MockFunctionEntry(BaseModel):
    """Declarative description of one mock edge function."""

    name: str
    service: str
    actions: Dict[str, ActionHandler]

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def handle(self, body: Body) -> Dict[str, Any]:
        """
        Dispatch on body["action"].

        Absent or unrecognised actions get the generic readiness reply.
        """
        action = value_or(body.get("action"), DEFAULT_ACTION)
        handler = self.actions.get(action) if isinstance(action, str) else None
        if handler is None:
            return {"status": "ok", "message": f"{self.service} mock ready"}
        return handler(body)


MOCK_FUNCTIONS: Dict[str, MockFunctionEntry] = {
    "hmrc-vat": MockFunctionEntry(
        name="hmrc-vat",
        service="HMRC VAT",
        actions={"submit_vat": submit_vat},
    ),
    "hmrc-cis": MockFunctionEntry(
        name="hmrc-cis",
        service="HMRC CIS",
        actions={"verify": verify_cis},
    ),
    "hmrc-rti": MockFunctionEntry(
        name="hmrc-rti",
        service="HMRC RTI",
        actions={"fps": submit_fps},
    ),
    "hmrc-oauth": MockFunctionEntry(
        name="hmrc-oauth",
        service="HMRC OAuth",
        actions={"start": start_oauth, "exchange": exchange_oauth_code},
    ),
    "banking-truelayer": MockFunctionEntry(
        name="banking-truelayer",
        service="Banking TrueLayer",
        actions={"consent": create_consent, "transactions": list_transactions},
    ),
}
