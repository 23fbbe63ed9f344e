"""
Cross-origin headers for the mock edge functions.

The mock functions are called straight from the browser, so every
response carries a fixed, permissive header set. The set is applied
explicitly rather than through CORSMiddleware because a bare OPTIONS
request (no Origin header) must still receive it.
"""

from fastapi.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type"
    ),
}


def preflight_response() -> Response:
    """Empty 200 response carrying only the CORS headers."""
    return Response(status_code=200, headers=dict(CORS_HEADERS))
