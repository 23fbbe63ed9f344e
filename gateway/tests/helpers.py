from typing import Any, Optional

import httpx
from fastapi.testclient import TestClient

from gateway.app.core.config import GatewaySettings
from gateway.app.main import create_app

REQUIRED_ENV = {
    "SUPABASE_URL": "https://abcdefgh.supabase.co",
    "SUPABASE_ANON_KEY": "anon-test-key",
    "AUTH0_DOMAIN": "tradedesk.eu.auth0.com",
    "AUTH0_CLIENT_ID": "auth0-client-id",
}

CONFIG_ENV_NAMES = [
    *REQUIRED_ENV,
    "SUPABASE_PUBLISHABLE_KEY",
    "VITE_SUPABASE_URL",
    "VITE_SUPABASE_ANON_KEY",
    "VITE_SUPABASE_PUBLISHABLE_KEY",
    "VITE_AUTH0_DOMAIN",
    "VITE_AUTH0_CLIENT_ID",
    "IONOS_PUBLIC_PREFIX",
    "IONOS_SECRET",
    "IONOS_API_URL",
]


def make_settings(**overrides: Any) -> GatewaySettings:
    values = {
        "supabase_url": REQUIRED_ENV["SUPABASE_URL"],
        "supabase_anon_key": REQUIRED_ENV["SUPABASE_ANON_KEY"],
        "auth0_domain": REQUIRED_ENV["AUTH0_DOMAIN"],
        "auth0_client_id": REQUIRED_ENV["AUTH0_CLIENT_ID"],
        "ionos_public_prefix": "public-prefix",
        "ionos_secret": "ionos-secret",
    }
    values.update(overrides)
    return GatewaySettings(_env_file=None, **values)


def mock_client() -> TestClient:
    """Client for the mock functions; the lifespan is not started."""
    return TestClient(create_app())


def invoke(
    client: TestClient,
    function: str,
    body: Optional[dict] = None,
    method: str = "POST",
) -> httpx.Response:
    return client.request(
        method,
        f"/functions/v1/{function}",
        json=body,
    )
