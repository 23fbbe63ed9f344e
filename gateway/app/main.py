import logging
import sys
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

import httpx
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from gateway.app.api.functions import router as functions_router
from gateway.app.api.ionos import router as ionos_router
from gateway.app.core.config import GatewaySettings

logger = logging.getLogger("gateway.main")


def get_app_version() -> str:
    """
    Resolve the installed distribution version.

    Falls back to the source version when running from a checkout.
    """
    try:
        return version("tradedesk-edge")
    except PackageNotFoundError:
        return "0.3.0"


def configure_logging(level: str) -> None:
    """stderr logging, applied once per process."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("gateway").setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Guarantees:
    - Fail-fast startup if Supabase or Auth0 settings are missing
    - One shared outbound HTTP client, closed on shutdown
    """
    # ------------------------------------------------------------------
    # Load and validate configuration (FAIL FAST)
    # ------------------------------------------------------------------
    try:
        settings = GatewaySettings()
    except Exception:
        logger.exception("invalid_gateway_configuration")
        raise

    configure_logging(settings.log_level)

    logger.info(
        "gateway_startup_begin",
        extra={
            "service": "gateway",
            "version": get_app_version(),
            "supabase_project": settings.supabase_project_ref,
        },
    )

    app.state.settings = settings

    # ------------------------------------------------------------------
    # Persistent HTTP client for outbound proxies
    # ------------------------------------------------------------------
    app.state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(
            timeout=settings.http_timeout_seconds,
            connect=10.0,
        ),
        headers={
            "User-Agent": f"tradedesk-gateway/{get_app_version()}",
        },
    )

    try:
        yield
    finally:
        logger.info("gateway_shutdown_begin")

        try:
            await app.state.http_client.aclose()
        except Exception:
            logger.warning("http_client_shutdown_failed")


def create_app() -> FastAPI:
    """
    Application factory for the edge-function gateway.
    """
    app = FastAPI(
        title="Tradedesk Edge Functions",
        description=(
            "Mock HMRC (VAT, CIS, RTI, OAuth) and open-banking functions, "
            "plus the IONOS domain proxy."
        ),
        version=get_app_version(),
        docs_url="/docs",
        redoc_url=None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.include_router(functions_router)
    app.include_router(ionos_router)

    @app.get(
        "/healthz",
        tags=["Monitoring"],
        summary="Liveness and readiness probe",
    )
    async def health_check():
        """
        Reports that the runtime is alive and configured.

        NOTE:
        - Does NOT call IONOS
        - Does NOT check IONOS credentials
        """
        settings: GatewaySettings = app.state.settings
        return ORJSONResponse(
            content={
                "status": "ok",
                "service": "gateway",
                "version": app.version,
                "runtime": f"python {sys.version.split()[0]}",
                "supabase_project": settings.supabase_project_ref,
            }
        )

    return app


app = create_app()
