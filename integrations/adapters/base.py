"""
HTTP invocation of edge functions.

Mirrors the Supabase `functions.invoke` call shape: a JSON POST to
`{base}/functions/v1/<name>` carrying the project key in both the
`apikey` header and a bearer token. The functions themselves never
retry; this client retries only failures that happen before the request
is sent (connect errors and pool timeouts), a bounded number of times.
Submissions are not idempotent, so read, write and protocol errors are
never retried. HTTP error statuses are terminal.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from integrations.config import EdgeFunctionSettings
from integrations.events import DomainEvent, DomainEventEmitter

logger = logging.getLogger("integrations.adapters")

FUNCTIONS_PATH = "/functions/v1"

ModelT = TypeVar("ModelT", bound=BaseModel)

# Failures where the request never reached the server.
RETRYABLE_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout)


class EdgeFunctionError(RuntimeError):
    """
    Raised when an edge function answers with an error status or with a
    body the adapter cannot use.
    """

    def __init__(
        self,
        function: str,
        message: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(f"{function}: {message}")
        self.function = function
        self.message = message
        self.status_code = status_code


class EdgeFunctionClient:
    """
    Thin async client for the edge functions.

    The caller owns the httpx.AsyncClient so that connection pooling is
    shared with the rest of the process.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: EdgeFunctionSettings,
        *,
        wait: Optional[wait_base] = None,
    ) -> None:
        self.client = http_client
        self.settings = settings
        self._wait = wait or wait_exponential(multiplier=0.5, max=4)

    def url_for(self, function: str) -> str:
        return f"{self.settings.base_url}{FUNCTIONS_PATH}/{function}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "x-client-info": "integrations-python",
        }
        if self.settings.anon_key is not None:
            key = self.settings.anon_key.get_secret_value()
            headers["apikey"] = key
            headers["Authorization"] = f"Bearer {key}"
        return headers

    async def _post(self, function: str, body: Dict[str, Any]) -> httpx.Response:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.settings.retry_attempts),
            wait=self._wait,
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        "edge_function_retry",
                        extra={
                            "function": function,
                            "attempt": attempt.retry_state.attempt_number,
                        },
                    )
                return await self.client.post(
                    self.url_for(function),
                    json=body,
                    headers=self._headers(),
                    timeout=self.settings.timeout_seconds,
                )
        raise AssertionError("unreachable")  # pragma: no cover

    async def invoke(self, function: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Call an edge function and return its decoded JSON object.

        Raises:
            EdgeFunctionError: non-2xx status or a non-object JSON body.
            httpx.TransportError: unsent-request errors after the final retry,
                any other transport error immediately.
        """
        logger.info(
            "edge_function_invoke",
            extra={"function": function, "action": body.get("action")},
        )

        response = await self._post(function, body)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            detail = payload.get("error") if isinstance(payload, dict) else None
            logger.error(
                "edge_function_failed",
                extra={
                    "function": function,
                    "status_code": response.status_code,
                },
            )
            raise EdgeFunctionError(
                function,
                str(detail) if detail else f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(payload, dict):
            raise EdgeFunctionError(
                function,
                "response body is not a JSON object",
                status_code=response.status_code,
            )

        return payload


# ----------------------------------------------------------------------
# Helpers shared by the port adapters
# ----------------------------------------------------------------------

def require(payload: Dict[str, Any], field: str, function: str) -> Any:
    value = payload.get(field)
    if value is None or value == "":
        raise EdgeFunctionError(function, f"response missing '{field}'")
    return value


def parse_model(model: Type[ModelT], data: Any, function: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise EdgeFunctionError(
            function, f"unexpected response shape for {model.__name__}"
        ) from exc


async def announce(emitter: DomainEventEmitter, event: DomainEvent) -> None:
    """Emit a domain event; failures are logged, never raised."""
    try:
        await emitter.emit(event)
    except Exception:
        logger.exception(
            "domain_event_emit_failed",
            extra={"event_type": event.type, "event_id": str(event.event_id)},
        )
