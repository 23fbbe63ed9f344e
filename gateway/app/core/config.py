"""
Centralized configuration management for the gateway service.

Pydantic v2 settings management: strict validation, secrets redacted
from logs, and fast failure at startup when the Supabase or Auth0
settings are missing. IONOS credentials are optional here and are
checked on each proxy request instead.
"""

from typing import Annotated, Optional
from urllib.parse import urlparse

from pydantic import AliasChoices, AnyHttpUrl, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# -------------------------------------------------------------------------
# Reusable Type Aliases
# -------------------------------------------------------------------------

EnvRequired = Annotated[
    str,
    Field(min_length=1),
]

DEFAULT_IONOS_API_URL = "https://api.hosting.ionos.com/v1/domains"


# -------------------------------------------------------------------------
# Settings Model
# -------------------------------------------------------------------------

class GatewaySettings(BaseSettings):
    """
    Gateway settings parsed from the environment.

    The front-end build exposes the same values with a VITE_ prefix;
    both spellings are accepted.
    """

    # ---------------------------------------------------------------------
    # Supabase project (required)
    # ---------------------------------------------------------------------

    supabase_url: Annotated[
        AnyHttpUrl,
        Field(
            validation_alias=AliasChoices(
                "supabase_url",
                "SUPABASE_URL",
                "VITE_SUPABASE_URL",
            ),
        ),
    ]

    supabase_anon_key: Annotated[
        SecretStr,
        Field(
            validation_alias=AliasChoices(
                "supabase_anon_key",
                "SUPABASE_ANON_KEY",
                "SUPABASE_PUBLISHABLE_KEY",
                "VITE_SUPABASE_ANON_KEY",
                "VITE_SUPABASE_PUBLISHABLE_KEY",
            ),
        ),
    ]

    # ---------------------------------------------------------------------
    # Auth0 tenant (required)
    # ---------------------------------------------------------------------

    auth0_domain: Annotated[
        EnvRequired,
        Field(
            validation_alias=AliasChoices(
                "auth0_domain",
                "AUTH0_DOMAIN",
                "VITE_AUTH0_DOMAIN",
            ),
        ),
    ]

    auth0_client_id: Annotated[
        EnvRequired,
        Field(
            validation_alias=AliasChoices(
                "auth0_client_id",
                "AUTH0_CLIENT_ID",
                "VITE_AUTH0_CLIENT_ID",
            ),
        ),
    ]

    # ---------------------------------------------------------------------
    # IONOS domain API (checked per request)
    # ---------------------------------------------------------------------

    ionos_public_prefix: Annotated[
        Optional[str],
        Field(
            default=None,
            validation_alias=AliasChoices(
                "ionos_public_prefix",
                "IONOS_PUBLIC_PREFIX",
            ),
        ),
    ]

    ionos_secret: Annotated[
        Optional[SecretStr],
        Field(
            default=None,
            validation_alias=AliasChoices("ionos_secret", "IONOS_SECRET"),
        ),
    ]

    ionos_api_url: Annotated[
        AnyHttpUrl,
        Field(
            default=DEFAULT_IONOS_API_URL,
            validation_alias=AliasChoices("ionos_api_url", "IONOS_API_URL"),
        ),
    ]

    # ---------------------------------------------------------------------
    # Operational
    # ---------------------------------------------------------------------

    log_level: Annotated[
        str,
        Field(
            default="INFO",
            pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
            validation_alias=AliasChoices("log_level", "GATEWAY_LOG_LEVEL"),
        ),
    ]

    http_timeout_seconds: Annotated[
        float,
        Field(
            default=30.0,
            gt=0,
            le=120,
            validation_alias=AliasChoices(
                "http_timeout_seconds",
                "GATEWAY_HTTP_TIMEOUT_SECONDS",
            ),
        ),
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    # ---------------------------------------------------------------------
    # Validators
    # ---------------------------------------------------------------------

    @field_validator("supabase_anon_key")
    @classmethod
    def anon_key_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("Supabase anon key must not be empty")
        return v

    @property
    def supabase_project_ref(self) -> Optional[str]:
        """First DNS label of the Supabase host, e.g. 'abcd' for abcd.supabase.co."""
        host = urlparse(str(self.supabase_url)).hostname or ""
        ref = host.split(".")[0]
        return ref or None
