"""
Request and response shapes exchanged through the integration ports.

These models are transient: each one is built by a caller for a single
port call and discarded afterwards. Nothing here is persisted. Field
names follow the snake_case convention in Python and serialize to the
camelCase wire names expected by the edge functions.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


_WIRE_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    populate_by_name=True,
)

# Responses tolerate fields added upstream.
_RESPONSE_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    populate_by_name=True,
)


class WireModel(BaseModel):
    """Base for payloads that travel as camelCase JSON."""

    model_config = _WIRE_CONFIG

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ResponseModel(WireModel):
    """Base for shapes parsed out of edge-function replies."""

    model_config = _RESPONSE_CONFIG


# ----------------------------------------------------------------------
# HMRC submissions
# ----------------------------------------------------------------------

class VatReturnPayload(WireModel):
    """
    A VAT return for a single tax period.

    `values` maps named VAT box figures (e.g. "vatDueSales") to amounts.
    """

    period_key: str = Field(
        ...,
        alias="periodKey",
        min_length=1,
        description="HMRC tax-period identifier (e.g. '24A1')",
    )
    values: Dict[str, float] = Field(default_factory=dict)


class CisVerificationPayload(WireModel):
    """One-shot Construction Industry Scheme subcontractor verification."""

    utr: str = Field(
        ...,
        min_length=1,
        description="Unique taxpayer reference",
    )
    nino: Optional[str] = None
    company_name: Optional[str] = Field(None, alias="companyName")


class RtiEmployee(WireModel):
    nin: str
    gross: float
    tax: float


class RtiSubmissionPayload(WireModel):
    """A single Full Payment Submission for one pay period."""

    pay_period: str = Field(..., alias="payPeriod", min_length=1)
    employees: List[RtiEmployee] = Field(default_factory=list)


class CisVerificationResult(ResponseModel):
    status: str
    ref: Optional[str] = None


class OAuthTokens(BaseModel):
    # Token fields keep the OAuth snake_case names on the wire.
    access_token: str
    refresh_token: Optional[str] = None

    model_config = ConfigDict(frozen=True)


# ----------------------------------------------------------------------
# Banking
# ----------------------------------------------------------------------

class BankingConsent(ResponseModel):
    """Authorization redirect target and the opaque consent token."""

    url: str
    consent_id: str = Field(..., alias="consentId")


class BankingTransaction(ResponseModel):
    id: str
    amount: float
    currency: str
    date: str
    description: Optional[str] = None
