import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from gateway.app.main import create_app
from gateway.tests.helpers import CONFIG_ENV_NAMES, REQUIRED_ENV, make_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in CONFIG_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_startup_loads_settings_and_serves_health(clean_env):
    for name, value in REQUIRED_ENV.items():
        clean_env.setenv(name, value)

    app = create_app()
    with TestClient(app) as client:
        response = client.get("/healthz")

        assert app.state.settings.auth0_domain == "tradedesk.eu.auth0.com"
        assert app.state.http_client is not None

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "gateway"
    assert body["supabase_project"] == "abcdefgh"


@pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
def test_startup_fails_without_required_setting(clean_env, missing):
    for name, value in REQUIRED_ENV.items():
        if name != missing:
            clean_env.setenv(name, value)

    with pytest.raises(ValidationError):
        with TestClient(create_app()):
            pass


def test_vite_prefixed_names_are_accepted(clean_env):
    clean_env.setenv("VITE_SUPABASE_URL", "https://qrstuv.supabase.co")
    clean_env.setenv("VITE_SUPABASE_PUBLISHABLE_KEY", "pk")
    clean_env.setenv("VITE_AUTH0_DOMAIN", "tenant.auth0.com")
    clean_env.setenv("VITE_AUTH0_CLIENT_ID", "cid")

    with TestClient(create_app()) as client:
        assert client.get("/healthz").json()["supabase_project"] == "qrstuv"


def test_blank_anon_key_is_rejected():
    with pytest.raises(ValidationError):
        make_settings(supabase_anon_key="   ")


def test_ionos_credentials_are_optional_at_startup(clean_env):
    for name, value in REQUIRED_ENV.items():
        clean_env.setenv(name, value)

    with TestClient(create_app()) as client:
        response = client.get("/functions/v1/ionos-domain")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Missing IONOS credentials",
    }


def test_secrets_are_redacted_in_repr():
    settings = make_settings()

    assert "anon-test-key" not in repr(settings)
    assert "ionos-secret" not in repr(settings)
