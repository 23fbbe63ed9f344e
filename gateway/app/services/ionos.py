"""
Outbound client for the IONOS domain-management API.

A single authenticated GET; no retry, caching or pagination. The
credentials are read from settings on every call so that a missing
value fails the request before any network traffic.
"""

import base64
import logging
from typing import Any, Dict

import httpx

from gateway.app.core.config import GatewaySettings

logger = logging.getLogger("gateway.ionos")


class IonosCredentialsMissing(RuntimeError):
    """Raised when IONOS_PUBLIC_PREFIX or IONOS_SECRET is not configured."""

    def __init__(self) -> None:
        super().__init__("Missing IONOS credentials")


class IonosUpstreamError(RuntimeError):
    """Non-success status from the IONOS API. The body is not kept."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"IONOS API returned HTTP {status_code}")
        self.status_code = status_code


class IonosDomainClient:
    """
    Async client for the IONOS hosting API.

    The httpx.AsyncClient is owned by the application lifespan and
    shared across requests.
    """

    def __init__(
        self,
        settings: GatewaySettings,
        http_client: httpx.AsyncClient,
    ) -> None:
        self.settings = settings
        self.client = http_client
        self.api_url = str(settings.ionos_api_url)

    def auth_headers(self) -> Dict[str, str]:
        prefix = self.settings.ionos_public_prefix
        secret = (
            self.settings.ionos_secret.get_secret_value()
            if self.settings.ionos_secret is not None
            else ""
        )
        if not prefix or not secret:
            raise IonosCredentialsMissing()

        token = base64.b64encode(f"{prefix}:{secret}".encode("utf-8"))
        return {
            "Authorization": f"Basic {token.decode('ascii')}",
            "Accept": "application/json",
        }

    async def list_domains(self) -> Any:
        """
        Fetch the domain list and return the decoded upstream JSON.

        Raises:
            IonosCredentialsMissing: before any request is sent.
            IonosUpstreamError: on a non-2xx status.
            httpx.HTTPError / ValueError: transport or decoding failures.
        """
        headers = self.auth_headers()

        response = await self.client.get(
            self.api_url,
            headers=headers,
            timeout=self.settings.http_timeout_seconds,
        )

        if not response.is_success:
            logger.warning(
                "ionos_upstream_error",
                extra={"status_code": response.status_code},
            )
            raise IonosUpstreamError(response.status_code)

        return response.json()
