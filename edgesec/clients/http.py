"""
HTTP layer shared by all services.

Wraps an `httpx` client that the caller pre-authenticates by supplying a
request-signing `httpx.Auth`. One call to `request()` sends exactly one HTTP
request; there are no retries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import TransportError, error_from_response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {"Accept": "application/json"}

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_model(model: type[ModelT], data: Any, *, operation: str) -> ModelT:
    """
    Decode a JSON body into `model`.

    Raises:
        TransportError: The body is missing, not an object, or does not fit `model`
    """
    if not isinstance(data, dict):
        kind = "empty" if data is None else type(data).__name__
        raise TransportError(
            f"{operation} response could not be decoded: expected a JSON object, got {kind}",
            operation=operation,
        )
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise TransportError(
            f"{operation} response could not be decoded: {e}", operation=operation
        ) from e


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for the HTTP layer.

    Either `host` (an API hostname, scheme optional) or `base_url` must be set.
    `auth` signs every request; transports may be injected for testing.
    """

    host: str | None = None
    base_url: str | None = None
    auth: httpx.Auth | None = None
    timeout: float = DEFAULT_TIMEOUT
    account_switch_key: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    log_requests: bool = False
    transport: httpx.BaseTransport | None = None
    async_transport: httpx.AsyncBaseTransport | None = None

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.host:
            host = self.host.strip().rstrip("/")
            if host.startswith(("http://", "https://")):
                return host
            return f"https://{host}"
        raise ValueError("Either 'host' or 'base_url' must be configured")


class _BaseHTTPClient:
    def __init__(self, config: ClientConfig):
        self.config = config
        self.base_url = config.resolved_base_url()
        self.headers = {**DEFAULT_HEADERS, **dict(config.headers)}

    def _build_params(self, params: Mapping[str, str] | None) -> dict[str, str]:
        query = dict(params or {})
        if self.config.account_switch_key:
            query["accountSwitchKey"] = self.config.account_switch_key
        return query

    def _log_response(self, response: httpx.Response) -> None:
        if self.config.log_requests:
            logger.info(
                "%s %s -> %s",
                response.request.method,
                response.request.url,
                response.status_code,
            )

    def _handle_response(
        self,
        response: httpx.Response,
        *,
        expected_status: int,
        operation: str,
    ) -> Any:
        if response.status_code != expected_status:
            logger.debug(
                "%s: expected HTTP %s, got %s", operation, expected_status, response.status_code
            )
            raise error_from_response(response)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"{operation} response could not be decoded: {e}", operation=operation
            ) from e


class HTTPClient(_BaseHTTPClient):
    """Synchronous HTTP client."""

    def __init__(self, config: ClientConfig):
        super().__init__(config)
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=config.auth,
            headers=self.headers,
            timeout=config.timeout,
            transport=config.transport,
        )

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        expected_status: int = 200,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: API path, appended to the base URL
            operation: Name used to prefix transport errors and log lines
            expected_status: The single status code that counts as success
            params: Query parameters
            json: Request body

        Returns:
            Decoded JSON, or None when the response has no body.

        Raises:
            TransportError: The request could not be sent or decoded
            APIError: Any status other than `expected_status`
        """
        query = self._build_params(params)
        try:
            response = self._client.request(method, path, params=query, json=json)
        except httpx.HTTPError as e:
            raise TransportError(f"{operation} request failed: {e}", operation=operation) from e
        self._log_response(response)
        return self._handle_response(
            response, expected_status=expected_status, operation=operation
        )


class AsyncHTTPClient(_BaseHTTPClient):
    """Asynchronous HTTP client."""

    def __init__(self, config: ClientConfig):
        super().__init__(config)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=config.auth,
            headers=self.headers,
            timeout=config.timeout,
            transport=config.async_transport,
        )

    async def __aenter__(self) -> AsyncHTTPClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        expected_status: int = 200,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        """Async counterpart of `HTTPClient.request`."""
        query = self._build_params(params)
        try:
            response = await self._client.request(method, path, params=query, json=json)
        except httpx.HTTPError as e:
            raise TransportError(f"{operation} request failed: {e}", operation=operation) from e
        self._log_response(response)
        return self._handle_response(
            response, expected_status=expected_status, operation=operation
        )
