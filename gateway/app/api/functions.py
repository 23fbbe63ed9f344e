"""
Mock HMRC and banking edge functions.

Every function in the registry is exposed at /functions/v1/<name>.
OPTIONS answers the browser preflight; any other method parses the JSON
body and dispatches on its "action" field. Bodies that are not a JSON
object are treated as {} rather than rejected.
"""

import logging
from typing import Any, Dict

import orjson
from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse, Response

from gateway.app.core.cors import CORS_HEADERS, preflight_response
from gateway.app.services.mock_functions import MOCK_FUNCTIONS, MockFunctionEntry

logger = logging.getLogger("gateway.api.functions")

router = APIRouter(prefix="/functions/v1", tags=["Edge Functions"])

INVOKE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


async def read_json_body(request: Request, function: str) -> Dict[str, Any]:
    """Decode the request body, falling back to {} when it is unusable."""
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        body = orjson.loads(raw)
    except orjson.JSONDecodeError:
        logger.warning(
            "malformed_request_body",
            extra={"function": function, "body_bytes": len(raw)},
        )
        return {}

    if not isinstance(body, dict):
        logger.warning(
            "non_object_request_body",
            extra={"function": function, "body_type": type(body).__name__},
        )
        return {}

    return body


def _register(entry: MockFunctionEntry) -> None:
    path = f"/{entry.name}"

    @router.options(path, include_in_schema=False, name=f"{entry.name}-preflight")
    async def preflight() -> Response:
        return preflight_response()

    @router.api_route(
        path,
        methods=INVOKE_METHODS,
        name=entry.name,
        summary=f"{entry.service} mock",
        responses={500: {"description": "Handler failure"}},
    )
    async def invoke(request: Request) -> ORJSONResponse:
        try:
            body = await read_json_body(request, entry.name)
            logger.info(
                "edge_function_invoked",
                extra={
                    "function": entry.name,
                    "action": body.get("action"),
                    "method": request.method,
                },
            )
            result = entry.handle(body)
        except Exception as exc:
            logger.exception(
                "edge_function_failure",
                extra={
                    "function": entry.name,
                    "error_type": type(exc).__name__,
                },
            )
            return ORJSONResponse(
                status_code=500,
                content={"error": str(exc)},
                headers=dict(CORS_HEADERS),
            )

        return ORJSONResponse(content=result, headers=dict(CORS_HEADERS))


for _entry in MOCK_FUNCTIONS.values():
    _register(_entry)
