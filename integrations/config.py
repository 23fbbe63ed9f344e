"""
Configuration for the edge-function adapters.

Pydantic v2 settings management; values are read from the environment
(or a local .env file) once and are immutable afterwards.
"""

from typing import Annotated, Optional

from pydantic import AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class EdgeFunctionSettings(BaseSettings):
    """
    Where the edge functions live and how to call them.

    Environment variables use the EDGE_FUNCTIONS_ prefix, e.g.
    EDGE_FUNCTIONS_URL and EDGE_FUNCTIONS_ANON_KEY.
    """

    url: Annotated[
        AnyHttpUrl,
        Field(
            default="http://localhost:8000",
            description="Base URL of the gateway (or Supabase project)",
        ),
    ]

    anon_key: Annotated[
        Optional[SecretStr],
        Field(
            default=None,
            description=(
                "Publishable key sent as 'apikey' and bearer token. "
                "Not required by the mock gateway."
            ),
        ),
    ]

    timeout_seconds: Annotated[
        float,
        Field(default=10.0, gt=0, le=120),
    ]

    retry_attempts: Annotated[
        int,
        Field(
            default=3,
            ge=1,
            le=10,
            description="Attempts per call on transport errors (1 = no retry)",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="EDGE_FUNCTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @property
    def base_url(self) -> str:
        return str(self.url).rstrip("/")
