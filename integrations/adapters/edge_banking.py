from __future__ import annotations

from typing import List

from integrations.adapters.base import (
    EdgeFunctionClient,
    EdgeFunctionError,
    parse_model,
    require,
)
from integrations.schemas.payloads import BankingConsent, BankingTransaction

BANKING_FUNCTION = "banking-truelayer"


class EdgeFunctionBankingAdapter:
    """BankingPort implementation backed by the banking-truelayer function."""

    def __init__(self, client: EdgeFunctionClient) -> None:
        self._client = client

    async def create_consent(self, redirect_uri: str) -> BankingConsent:
        payload = await self._client.invoke(
            BANKING_FUNCTION,
            {
                "action": "consent",
                "details": {"truelayerRedirectUri": redirect_uri},
            },
        )
        return parse_model(
            BankingConsent,
            {
                "url": require(payload, "url", BANKING_FUNCTION),
                "consentId": require(payload, "consentId", BANKING_FUNCTION),
            },
            BANKING_FUNCTION,
        )

    async def list_transactions(
        self, company_id: str, date_from: str, date_to: str
    ) -> List[BankingTransaction]:
        payload = await self._client.invoke(
            BANKING_FUNCTION,
            {
                "action": "transactions",
                "companyId": company_id,
                "from": date_from,
                "to": date_to,
            },
        )

        raw = payload.get("transactions")
        if not isinstance(raw, list):
            raise EdgeFunctionError(
                BANKING_FUNCTION, "response missing 'transactions' list"
            )

        return [
            parse_model(BankingTransaction, item, BANKING_FUNCTION)
            for item in raw
        ]
