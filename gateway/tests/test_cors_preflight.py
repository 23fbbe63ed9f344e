import pytest

from gateway.app.services.mock_functions import MOCK_FUNCTIONS
from gateway.tests.helpers import invoke, mock_client

ALLOWED_HEADERS = "authorization, x-client-info, apikey, content-type"


@pytest.mark.parametrize("function", sorted(MOCK_FUNCTIONS))
def test_options_returns_empty_body_with_cors_headers(function):
    client = mock_client()

    response = client.options(f"/functions/v1/{function}")

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == ALLOWED_HEADERS


def test_options_preflight_with_origin_gets_same_headers():
    client = mock_client()

    response = client.options(
        "/functions/v1/hmrc-vat",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize("function", sorted(MOCK_FUNCTIONS))
def test_json_responses_carry_cors_headers(function):
    client = mock_client()

    response = invoke(client, function, {})

    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == ALLOWED_HEADERS
    assert response.headers["content-type"].startswith("application/json")
