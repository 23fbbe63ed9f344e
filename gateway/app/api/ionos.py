import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse

from gateway.app.core.config import GatewaySettings
from gateway.app.services.ionos import (
    IonosCredentialsMissing,
    IonosDomainClient,
    IonosUpstreamError,
)

logger = logging.getLogger("gateway.api.ionos")

router = APIRouter(prefix="/functions/v1", tags=["Domains"])


# =============================================================================
# Dependency providers
# =============================================================================

def get_ionos_client(request: Request) -> IonosDomainClient:
    settings: GatewaySettings = request.app.state.settings
    if settings is None:
        raise RuntimeError("settings not initialized")

    return IonosDomainClient(
        settings=settings,
        http_client=request.app.state.http_client,
    )


# =============================================================================
# GET /functions/v1/ionos-domain
# =============================================================================

@router.get(
    "/ionos-domain",
    summary="List domains from the IONOS hosting API",
    responses={500: {"description": "Credentials missing or upstream failure"}},
)
async def ionos_domain(
    client: Annotated[IonosDomainClient, Depends(get_ionos_client)],
) -> ORJSONResponse:
    """
    Proxy the IONOS domain list.

    Upstream error bodies are not forwarded; only the status code is.
    """
    try:
        data = await client.list_domains()

    except IonosUpstreamError as exc:
        return ORJSONResponse(
            status_code=500,
            content={"success": False, "status": exc.status_code},
        )

    except IonosCredentialsMissing as exc:
        logger.error("ionos_credentials_missing")
        return ORJSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc)},
        )

    except Exception as exc:
        logger.exception(
            "ionos_domain_failure",
            extra={"error_type": type(exc).__name__},
        )
        return ORJSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc)},
        )

    return ORJSONResponse(content={"success": True, "data": data})
