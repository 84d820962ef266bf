"""
Main edgesec API client.

Provides a unified interface to the network list, application security and
property manager APIs over one signed HTTP session.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .clients.http import DEFAULT_TIMEOUT, AsyncHTTPClient, ClientConfig, HTTPClient
from .services.appsec import AppSecService, AsyncAppSecService
from .services.network_lists import AsyncNetworkListService, NetworkListService
from .services.property_manager import AsyncPropertyService, PropertyService


class EdgeClient:
    """
    Synchronous edgesec API client.

    The caller provides an `httpx.Auth` that signs each request; this client
    never reads credential files itself.

    Example:
        ```python
        from edgesec import EdgeClient
        from edgesec.models import GetNetworkListRequest

        with EdgeClient(host="akab-xxxx.luna.akamaiapis.net", auth=signer) as client:
            nl = client.network_lists.get(
                GetNetworkListRequest(network_list_id="12345_TESTLIST", include_elements=True)
            )
            print(nl.sync_point, nl.elements)
        ```

    Attributes:
        network_lists: Network list operations
        appsec: Security configuration, policy and rule operations
        property_manager: Contract, group and product lookups
    """

    def __init__(
        self,
        host: str | None = None,
        *,
        base_url: str | None = None,
        auth: httpx.Auth | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        account_switch_key: str | None = None,
        headers: Mapping[str, str] | None = None,
        log_requests: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            host: API hostname (scheme optional)
            base_url: Full base URL; takes precedence over `host`
            auth: Request signer
            timeout: Request timeout in seconds
            account_switch_key: Sent as `accountSwitchKey` on every request
            headers: Extra headers for every request
            log_requests: Log every request/response status line
            transport: Custom httpx transport (tests)
        """
        config = ClientConfig(
            host=host,
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            account_switch_key=account_switch_key,
            headers=dict(headers or {}),
            log_requests=log_requests,
            transport=transport,
        )
        self._http = HTTPClient(config)

        self._network_lists: NetworkListService | None = None
        self._appsec: AppSecService | None = None
        self._property_manager: PropertyService | None = None

    def __enter__(self) -> EdgeClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http.close()

    # =========================================================================
    # Service Properties (lazy initialization)
    # =========================================================================

    @property
    def network_lists(self) -> NetworkListService:
        """Network list operations."""
        if self._network_lists is None:
            self._network_lists = NetworkListService(self._http)
        return self._network_lists

    @property
    def appsec(self) -> AppSecService:
        """Application security operations."""
        if self._appsec is None:
            self._appsec = AppSecService(self._http)
        return self._appsec

    @property
    def property_manager(self) -> PropertyService:
        """Property manager lookups."""
        if self._property_manager is None:
            self._property_manager = PropertyService(self._http)
        return self._property_manager


class AsyncEdgeClient:
    """
    Asynchronous edgesec API client.

    Same interface as EdgeClient but with async/await support.

    Example:
        ```python
        async with AsyncEdgeClient(host="...", auth=signer) as client:
            configs = await client.appsec.get_configs()
        ```
    """

    def __init__(
        self,
        host: str | None = None,
        *,
        base_url: str | None = None,
        auth: httpx.Auth | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        account_switch_key: str | None = None,
        headers: Mapping[str, str] | None = None,
        log_requests: bool = False,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = ClientConfig(
            host=host,
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            account_switch_key=account_switch_key,
            headers=dict(headers or {}),
            log_requests=log_requests,
            async_transport=async_transport,
        )
        self._http = AsyncHTTPClient(config)
        self._network_lists: AsyncNetworkListService | None = None
        self._appsec: AsyncAppSecService | None = None
        self._property_manager: AsyncPropertyService | None = None

    @property
    def network_lists(self) -> AsyncNetworkListService:
        if self._network_lists is None:
            self._network_lists = AsyncNetworkListService(self._http)
        return self._network_lists

    @property
    def appsec(self) -> AsyncAppSecService:
        if self._appsec is None:
            self._appsec = AsyncAppSecService(self._http)
        return self._appsec

    @property
    def property_manager(self) -> AsyncPropertyService:
        if self._property_manager is None:
            self._property_manager = AsyncPropertyService(self._http)
        return self._property_manager

    async def __aenter__(self) -> AsyncEdgeClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http.close()
