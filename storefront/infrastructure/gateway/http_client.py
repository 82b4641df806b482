"""HTTP client for the storefront services — the client gateway's transport.

Wraps httpx with a per-call timeout, JSON (de)serialization and a uniform
``ApiError`` classification. Each call is a single attempt: there is no
retry, backoff or circuit breaking.
"""

from typing import Any

import httpx

from storefront.domain.exceptions import ApiError, ApiErrorCode
from storefront.infrastructure.logging.colored_logger import GatewayLogger, GatewayStage


DEFAULT_TIMEOUT = 10.0
SERVICE_UNAVAILABLE_MESSAGE = "Service unavailable. Please check if the backend is running."


class ServiceHttpClient:
    """Infrastructure adapter — JSON-over-HTTP calls to one service.

    An ``httpx.AsyncClient`` may be injected (connection pooling, tests with
    ``httpx.MockTransport`` or ``httpx.ASGITransport``); otherwise a
    short-lived client is created for each call.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client
        self._log = GatewayLogger("ClientGateway")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            ApiError: TIMEOUT (408), SERVICE_UNAVAILABLE (503), HTTP_ERROR
                (the response status) or UNKNOWN_ERROR (500).
        """
        url = f"{self._base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            with self._log.timed_step(GatewayStage.REQUEST, f"{method} {url}") as outcome:
                return await self._send(client, method, url, body, query, outcome)
        finally:
            if should_close:
                await client.aclose()

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        body: Any,
        query: dict[str, Any],
        outcome: dict[str, Any],
    ) -> Any:
        try:
            response = await client.request(
                method,
                url,
                json=body,
                params=query or None,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            raise ApiError("Request timeout", 408, ApiErrorCode.TIMEOUT) from e
        except httpx.NetworkError as e:
            raise ApiError(SERVICE_UNAVAILABLE_MESSAGE, 503, ApiErrorCode.SERVICE_UNAVAILABLE) from e
        except Exception as e:
            raise ApiError(str(e) or type(e).__name__, 500, ApiErrorCode.UNKNOWN_ERROR) from e

        outcome["status"] = response.status_code
        if not response.is_success:
            raise self._http_error(response)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid JSON in response from {url}", 500, ApiErrorCode.UNKNOWN_ERROR
            ) from e

    @staticmethod
    def _http_error(response: httpx.Response) -> ApiError:
        """Build an ApiError from a non-2xx response, preferring the envelope message."""
        message = response.reason_phrase or f"HTTP Error: {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            message = str(data["message"])

        return ApiError(message, response.status_code, ApiErrorCode.HTTP_ERROR)
