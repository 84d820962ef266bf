"""
Property Manager service (read-only).

Only the lookups needed to choose a contract and group for new network lists
are exposed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..clients.http import parse_model
from ..models.papi import ContractList, GetProductsRequest, GroupList, ProductList
from ..models.types import PAPI_PATH
from ..validation import ensure_valid

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient

logger = logging.getLogger(__name__)


class PropertyService:
    def __init__(self, client: HTTPClient):
        self._client = client

    def get_contracts(self) -> ContractList:
        logger.debug("get_contracts")
        data = self._client.request("GET", f"{PAPI_PATH}/contracts", operation="get_contracts")
        return parse_model(ContractList, data, operation="get_contracts")

    def get_groups(self) -> GroupList:
        logger.debug("get_groups")
        data = self._client.request("GET", f"{PAPI_PATH}/groups", operation="get_groups")
        return parse_model(GroupList, data, operation="get_groups")

    def get_products(self, request: GetProductsRequest) -> ProductList:
        """List products available on a contract."""
        ensure_valid(request, operation="get_products")
        logger.debug("get_products %s", request.contract_id)
        data = self._client.request(
            "GET",
            f"{PAPI_PATH}/products",
            operation="get_products",
            params=request.query_params(),
        )
        return parse_model(ProductList, data, operation="get_products")


class AsyncPropertyService:
    """Async version of PropertyService."""

    def __init__(self, client: AsyncHTTPClient):
        self._client = client

    async def get_contracts(self) -> ContractList:
        logger.debug("get_contracts")
        data = await self._client.request(
            "GET", f"{PAPI_PATH}/contracts", operation="get_contracts"
        )
        return parse_model(ContractList, data, operation="get_contracts")

    async def get_groups(self) -> GroupList:
        logger.debug("get_groups")
        data = await self._client.request("GET", f"{PAPI_PATH}/groups", operation="get_groups")
        return parse_model(GroupList, data, operation="get_groups")

    async def get_products(self, request: GetProductsRequest) -> ProductList:
        ensure_valid(request, operation="get_products")
        logger.debug("get_products %s", request.contract_id)
        data = await self._client.request(
            "GET",
            f"{PAPI_PATH}/products",
            operation="get_products",
            params=request.query_params(),
        )
        return parse_model(ProductList, data, operation="get_products")
