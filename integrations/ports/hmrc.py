from __future__ import annotations

from typing import Protocol

from integrations.schemas.payloads import (
    CisVerificationPayload,
    CisVerificationResult,
    OAuthTokens,
    RtiSubmissionPayload,
    VatReturnPayload,
)


class HmrcPort(Protocol):
    """
    Boundary between the application and HMRC.

    Implementations may fail on any call. This contract defines no retry
    policy or error taxonomy; callers own their error handling.
    """

    async def get_auth_url(self, redirect_uri: str) -> str:
        ...

    async def exchange_code(
        self, code: str, redirect_uri: str
    ) -> OAuthTokens:
        ...

    async def submit_vat(
        self, company_id: str, data: VatReturnPayload
    ) -> str:
        """Submit a VAT return and return the HMRC receipt id."""
        ...

    async def submit_cis(
        self, company_id: str, data: CisVerificationPayload
    ) -> CisVerificationResult:
        ...

    async def submit_rti(
        self, company_id: str, data: RtiSubmissionPayload
    ) -> str:
        """Submit an RTI Full Payment Submission and return its id."""
        ...
