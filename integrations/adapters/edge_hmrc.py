from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from integrations.adapters.base import (
    EdgeFunctionClient,
    announce,
    parse_model,
    require,
)
from integrations.events import (
    CisSubmitted,
    DomainEventEmitter,
    NullEventEmitter,
    RtiSubmitted,
    VatSubmitted,
)
from integrations.schemas.payloads import (
    CisVerificationPayload,
    CisVerificationResult,
    OAuthTokens,
    RtiSubmissionPayload,
    VatReturnPayload,
)

logger = logging.getLogger("integrations.adapters.hmrc")

OAUTH_FUNCTION = "hmrc-oauth"
VAT_FUNCTION = "hmrc-vat"
CIS_FUNCTION = "hmrc-cis"
RTI_FUNCTION = "hmrc-rti"


class EdgeFunctionHmrcAdapter:
    """
    HmrcPort implementation backed by the hmrc-* edge functions.

    Each successful submission is announced as a domain event after the
    edge function has acknowledged it.
    """

    def __init__(
        self,
        client: EdgeFunctionClient,
        emitter: Optional[DomainEventEmitter] = None,
        *,
        hmrc_client_id: Optional[str] = None,
    ) -> None:
        self._client = client
        self._emitter = emitter or NullEventEmitter()
        self._hmrc_client_id = hmrc_client_id

    # ------------------------------------------------------------------
    # OAuth
    # ------------------------------------------------------------------

    async def get_auth_url(self, redirect_uri: str) -> str:
        details: Dict[str, Any] = {"hmrcRedirectUri": redirect_uri}
        if self._hmrc_client_id:
            details["hmrcClientId"] = self._hmrc_client_id

        payload = await self._client.invoke(
            OAUTH_FUNCTION, {"action": "start", "details": details}
        )
        return require(payload, "url", OAUTH_FUNCTION)

    async def exchange_code(
        self, code: str, redirect_uri: str
    ) -> OAuthTokens:
        payload = await self._client.invoke(
            OAUTH_FUNCTION,
            {
                "action": "exchange",
                "details": {"code": code, "redirectUri": redirect_uri},
            },
        )
        return parse_model(OAuthTokens, payload, OAUTH_FUNCTION)

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    async def submit_vat(
        self, company_id: str, data: VatReturnPayload
    ) -> str:
        payload = await self._client.invoke(
            VAT_FUNCTION,
            {"action": "submit_vat", "companyId": company_id, **data.to_wire()},
        )
        receipt_id = str(require(payload, "receiptId", VAT_FUNCTION))

        logger.info(
            "vat_return_submitted",
            extra={
                "company_id": company_id,
                "period_key": data.period_key,
                "receipt_id": receipt_id,
            },
        )
        await announce(
            self._emitter,
            VatSubmitted(company_id=company_id, receipt_id=receipt_id),
        )
        return receipt_id

    async def submit_cis(
        self, company_id: str, data: CisVerificationPayload
    ) -> CisVerificationResult:
        payload = await self._client.invoke(
            CIS_FUNCTION,
            {
                "action": "verify",
                "companyId": company_id,
                "details": data.to_wire(),
            },
        )
        result = parse_model(
            CisVerificationResult,
            {
                "status": str(require(payload, "status", CIS_FUNCTION)),
                "ref": payload.get("ref"),
            },
            CIS_FUNCTION,
        )

        logger.info(
            "cis_verification_submitted",
            extra={
                "company_id": company_id,
                "cis_status": result.status,
                "ref": result.ref,
            },
        )
        await announce(
            self._emitter,
            CisSubmitted(company_id=company_id, ref=result.ref),
        )
        return result

    async def submit_rti(
        self, company_id: str, data: RtiSubmissionPayload
    ) -> str:
        payload = await self._client.invoke(
            RTI_FUNCTION,
            {"action": "fps", "companyId": company_id, **data.to_wire()},
        )
        submission_id = str(require(payload, "submissionId", RTI_FUNCTION))

        logger.info(
            "rti_fps_submitted",
            extra={
                "company_id": company_id,
                "pay_period": data.pay_period,
                "employees": len(data.employees),
                "submission_id": submission_id,
            },
        )
        await announce(
            self._emitter,
            RtiSubmitted(company_id=company_id, submission_id=submission_id),
        )
        return submission_id
