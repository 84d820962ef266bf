"""
Network list service.

Provides CRUD, element management and activation for IP and geography
network lists (Network Lists API v2).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..clients.http import parse_model
from ..models.network_lists import (
    ActivateNetworkListRequest,
    ActivationResponse,
    ActivationStatusRequest,
    AddElementRequest,
    AppendListRequest,
    CreateNetworkListRequest,
    DeleteNetworkListRequest,
    GetNetworkListRequest,
    GetSnapshotRequest,
    ListNetworkListsRequest,
    NetworkListCollection,
    NetworkListResponse,
    RemoveElementRequest,
    UpdateDetailsRequest,
    UpdateNetworkListRequest,
)
from ..models.types import NETWORK_LISTS_PATH, Environment
from ..validation import ensure_valid

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient

logger = logging.getLogger(__name__)


def _list_path(network_list_id: str) -> str:
    return f"{NETWORK_LISTS_PATH}/{network_list_id}"


def _environment_path(network_list_id: str, environment: Environment | None, action: str) -> str:
    env = environment.value if environment is not None else ""
    return f"{_list_path(network_list_id)}/environments/{env}/{action}"


def _snapshot_path(network_list_id: str, sync_point: int | None) -> str:
    return f"{_list_path(network_list_id)}/sync-points/{sync_point}/history"


class NetworkListService:
    """
    Service for managing network lists.

    Mutating calls return the list as stored after the change, including the
    new sync point the server assigned.
    """

    def __init__(self, client: HTTPClient):
        self._client = client

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list(self, request: ListNetworkListsRequest | None = None) -> NetworkListCollection:
        """
        List network lists visible to the account.

        Args:
            request: Filters; `extended` and `includeElements` are always sent

        Returns:
            Collection of network lists
        """
        request = request or ListNetworkListsRequest()
        ensure_valid(request, operation="list_network_lists")
        logger.debug("list_network_lists")
        data = self._client.request(
            "GET",
            NETWORK_LISTS_PATH,
            operation="list_network_lists",
            params=request.query_params(),
        )
        return parse_model(NetworkListCollection, data, operation="list_network_lists")

    def get(self, request: GetNetworkListRequest) -> NetworkListResponse:
        """Get a single network list by ID."""
        ensure_valid(request, operation="get_network_list")
        logger.debug("get_network_list %s", request.network_list_id)
        data = self._client.request(
            "GET",
            _list_path(request.network_list_id),
            operation="get_network_list",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="get_network_list")

    def get_snapshot(self, request: GetSnapshotRequest) -> NetworkListResponse:
        """Get a network list as it was at a past sync point."""
        ensure_valid(request, operation="get_snapshot")
        logger.debug("get_snapshot %s@%s", request.network_list_id, request.sync_point)
        data = self._client.request(
            "GET",
            _snapshot_path(request.network_list_id, request.sync_point),
            operation="get_snapshot",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="get_snapshot")

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, request: CreateNetworkListRequest) -> NetworkListResponse:
        """
        Create a network list.

        Returns:
            The created list (HTTP 201)
        """
        ensure_valid(request, operation="create_network_list")
        logger.debug("create_network_list %s", request.name)
        data = self._client.request(
            "POST",
            NETWORK_LISTS_PATH,
            operation="create_network_list",
            expected_status=201,
            json=request.to_body(),
        )
        return parse_model(NetworkListResponse, data, operation="create_network_list")

    def update(self, request: UpdateNetworkListRequest) -> NetworkListResponse:
        """
        Replace a network list.

        The request's sync point is sent as-is; a stale value is rejected by
        the server with a conflict error.
        """
        ensure_valid(request, operation="update_network_list")
        logger.debug("update_network_list %s", request.network_list_id)
        data = self._client.request(
            "PUT",
            _list_path(request.network_list_id),
            operation="update_network_list",
            params=request.query_params(),
            json=request.to_body(),
        )
        return parse_model(NetworkListResponse, data, operation="update_network_list")

    def update_details(self, request: UpdateDetailsRequest) -> None:
        """Rename a network list or change its description (HTTP 204, no body)."""
        ensure_valid(request, operation="update_details")
        logger.debug("update_details %s", request.network_list_id)
        self._client.request(
            "PUT",
            f"{_list_path(request.network_list_id)}/details",
            operation="update_details",
            expected_status=204,
            json=request.to_body(),
        )

    def delete(self, request: DeleteNetworkListRequest) -> NetworkListResponse:
        """Delete a network list."""
        ensure_valid(request, operation="delete_network_list")
        logger.debug("delete_network_list %s", request.network_list_id)
        data = self._client.request(
            "DELETE",
            _list_path(request.network_list_id),
            operation="delete_network_list",
        )
        return parse_model(NetworkListResponse, data, operation="delete_network_list")

    def append(self, request: AppendListRequest) -> NetworkListResponse:
        """Append elements to a list (HTTP 202, processed asynchronously)."""
        ensure_valid(request, operation="append_list")
        logger.debug("append_list %s (+%d)", request.network_list_id, len(request.elements))
        data = self._client.request(
            "POST",
            f"{_list_path(request.network_list_id)}/append",
            operation="append_list",
            expected_status=202,
            json=request.to_body(),
        )
        return parse_model(NetworkListResponse, data, operation="append_list")

    def add_element(self, request: AddElementRequest) -> NetworkListResponse:
        """Add a single element to a list."""
        ensure_valid(request, operation="add_element")
        logger.debug("add_element %s", request.network_list_id)
        data = self._client.request(
            "PUT",
            f"{_list_path(request.network_list_id)}/elements",
            operation="add_element",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="add_element")

    def remove_element(self, request: RemoveElementRequest) -> NetworkListResponse:
        """Remove a single element from a list."""
        ensure_valid(request, operation="remove_element")
        logger.debug("remove_element %s", request.network_list_id)
        data = self._client.request(
            "DELETE",
            f"{_list_path(request.network_list_id)}/elements",
            operation="remove_element",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="remove_element")

    # =========================================================================
    # Activation
    # =========================================================================

    def activate(self, request: ActivateNetworkListRequest) -> ActivationResponse:
        """Start activating a list on staging or production."""
        ensure_valid(request, operation="activate_network_list")
        logger.debug("activate_network_list %s -> %s", request.network_list_id, request.environment)
        data = self._client.request(
            "POST",
            _environment_path(request.network_list_id, request.environment, "activate"),
            operation="activate_network_list",
            json=request.to_body(),
        )
        return parse_model(ActivationResponse, data, operation="activate_network_list")

    def get_activation_status(self, request: ActivationStatusRequest) -> ActivationResponse:
        """Get the activation status of a list on one environment."""
        ensure_valid(request, operation="get_activation_status")
        logger.debug("get_activation_status %s %s", request.network_list_id, request.environment)
        data = self._client.request(
            "GET",
            _environment_path(request.network_list_id, request.environment, "status"),
            operation="get_activation_status",
        )
        return parse_model(ActivationResponse, data, operation="get_activation_status")


class AsyncNetworkListService:
    """Async version of NetworkListService."""

    def __init__(self, client: AsyncHTTPClient):
        self._client = client

    async def list(self, request: ListNetworkListsRequest | None = None) -> NetworkListCollection:
        request = request or ListNetworkListsRequest()
        ensure_valid(request, operation="list_network_lists")
        logger.debug("list_network_lists")
        data = await self._client.request(
            "GET",
            NETWORK_LISTS_PATH,
            operation="list_network_lists",
            params=request.query_params(),
        )
        return parse_model(NetworkListCollection, data, operation="list_network_lists")

    async def get(self, request: GetNetworkListRequest) -> NetworkListResponse:
        ensure_valid(request, operation="get_network_list")
        logger.debug("get_network_list %s", request.network_list_id)
        data = await self._client.request(
            "GET",
            _list_path(request.network_list_id),
            operation="get_network_list",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="get_network_list")

    async def get_snapshot(self, request: GetSnapshotRequest) -> NetworkListResponse:
        ensure_valid(request, operation="get_snapshot")
        logger.debug("get_snapshot %s@%s", request.network_list_id, request.sync_point)
        data = await self._client.request(
            "GET",
            _snapshot_path(request.network_list_id, request.sync_point),
            operation="get_snapshot",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="get_snapshot")

    async def create(self, request: CreateNetworkListRequest) -> NetworkListResponse:
        ensure_valid(request, operation="create_network_list")
        logger.debug("create_network_list %s", request.name)
        data = await self._client.request(
            "POST",
            NETWORK_LISTS_PATH,
            operation="create_network_list",
            expected_status=201,
            json=request.to_body(),
        )
        return parse_model(NetworkListResponse, data, operation="create_network_list")

    async def update(self, request: UpdateNetworkListRequest) -> NetworkListResponse:
        ensure_valid(request, operation="update_network_list")
        logger.debug("update_network_list %s", request.network_list_id)
        data = await self._client.request(
            "PUT",
            _list_path(request.network_list_id),
            operation="update_network_list",
            params=request.query_params(),
            json=request.to_body(),
        )
        return parse_model(NetworkListResponse, data, operation="update_network_list")

    async def update_details(self, request: UpdateDetailsRequest) -> None:
        ensure_valid(request, operation="update_details")
        logger.debug("update_details %s", request.network_list_id)
        await self._client.request(
            "PUT",
            f"{_list_path(request.network_list_id)}/details",
            operation="update_details",
            expected_status=204,
            json=request.to_body(),
        )

    async def delete(self, request: DeleteNetworkListRequest) -> NetworkListResponse:
        ensure_valid(request, operation="delete_network_list")
        logger.debug("delete_network_list %s", request.network_list_id)
        data = await self._client.request(
            "DELETE",
            _list_path(request.network_list_id),
            operation="delete_network_list",
        )
        return parse_model(NetworkListResponse, data, operation="delete_network_list")

    async def append(self, request: AppendListRequest) -> NetworkListResponse:
        ensure_valid(request, operation="append_list")
        logger.debug("append_list %s (+%d)", request.network_list_id, len(request.elements))
        data = await self._client.request(
            "POST",
            f"{_list_path(request.network_list_id)}/append",
            operation="append_list",
            expected_status=202,
            json=request.to_body(),
        )
        return parse_model(NetworkListResponse, data, operation="append_list")

    async def add_element(self, request: AddElementRequest) -> NetworkListResponse:
        ensure_valid(request, operation="add_element")
        logger.debug("add_element %s", request.network_list_id)
        data = await self._client.request(
            "PUT",
            f"{_list_path(request.network_list_id)}/elements",
            operation="add_element",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="add_element")

    async def remove_element(self, request: RemoveElementRequest) -> NetworkListResponse:
        ensure_valid(request, operation="remove_element")
        logger.debug("remove_element %s", request.network_list_id)
        data = await self._client.request(
            "DELETE",
            f"{_list_path(request.network_list_id)}/elements",
            operation="remove_element",
            params=request.query_params(),
        )
        return parse_model(NetworkListResponse, data, operation="remove_element")

    async def activate(self, request: ActivateNetworkListRequest) -> ActivationResponse:
        ensure_valid(request, operation="activate_network_list")
        logger.debug("activate_network_list %s -> %s", request.network_list_id, request.environment)
        data = await self._client.request(
            "POST",
            _environment_path(request.network_list_id, request.environment, "activate"),
            operation="activate_network_list",
            json=request.to_body(),
        )
        return parse_model(ActivationResponse, data, operation="activate_network_list")

    async def get_activation_status(self, request: ActivationStatusRequest) -> ActivationResponse:
        ensure_valid(request, operation="get_activation_status")
        logger.debug("get_activation_status %s %s", request.network_list_id, request.environment)
        data = await self._client.request(
            "GET",
            _environment_path(request.network_list_id, request.environment, "status"),
            operation="get_activation_status",
        )
        return parse_model(ActivationResponse, data, operation="get_activation_status")
