from typing import Any

import httpx
from tenacity import wait_none

from gateway.app.main import create_app
from integrations.adapters import EdgeFunctionClient
from integrations.config import EdgeFunctionSettings

GATEWAY_URL = "http://gateway.test"


def make_settings(**overrides: Any) -> EdgeFunctionSettings:
    values = {"url": GATEWAY_URL, "retry_attempts": 3}
    values.update(overrides)
    return EdgeFunctionSettings(_env_file=None, **values)


def gateway_http_client() -> httpx.AsyncClient:
    """AsyncClient wired straight into the in-process gateway app."""
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=create_app()))


def edge_client(http_client: httpx.AsyncClient, **overrides: Any) -> EdgeFunctionClient:
    return EdgeFunctionClient(
        http_client,
        make_settings(**overrides),
        wait=wait_none(),
    )
