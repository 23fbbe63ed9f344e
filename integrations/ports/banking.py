from __future__ import annotations

from typing import List, Protocol

from integrations.schemas.payloads import BankingConsent, BankingTransaction


class BankingPort(Protocol):
    """
    Boundary between the application and an open-banking provider.

    Consent expiry and revocation are not modelled.
    """

    async def create_consent(self, redirect_uri: str) -> BankingConsent:
        ...

    async def list_transactions(
        self, company_id: str, date_from: str, date_to: str
    ) -> List[BankingTransaction]:
        ...
