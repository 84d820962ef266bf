from __future__ import annotations

import json

import httpx
import pytest

from edgesec import (
    APIError,
    AsyncEdgeClient,
    NetworkListType,
    NotFoundError,
    TransportError,
    ValidationError,
)
from edgesec.clients.http import AsyncHTTPClient, ClientConfig
from edgesec.models import (
    ActivateNetworkListRequest,
    ActivationStatusRequest,
    AddElementRequest,
    AppendListRequest,
    CreateNetworkListRequest,
    DeleteNetworkListRequest,
    GetNetworkListRequest,
    GetSnapshotRequest,
    ListNetworkListsRequest,
    RemoveElementRequest,
    UpdateDetailsRequest,
    UpdateNetworkListRequest,
)
from edgesec.services.network_lists import AsyncNetworkListService

LISTS = "/network-list/v2/network-lists"


@pytest.mark.asyncio
async def test_async_client_creates_and_reads_list() -> None:
    calls: list[tuple[str, str]] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path))
        if request.method == "POST":
            body = json.loads(request.content)
            return httpx.Response(
                201,
                json={"uniqueId": "1_NEW", "name": body["name"], "type": body["type"], "syncPoint": 0},
                request=request,
            )
        return httpx.Response(
            200,
            json={"uniqueId": "1_NEW", "type": "IP", "list": ["10.0.0.0/8"], "syncPoint": 1},
            request=request,
        )

    client = AsyncEdgeClient(
        base_url="https://edge.example", async_transport=httpx.MockTransport(handler)
    )
    try:
        created = await client.network_lists.create(
            CreateNetworkListRequest(name="Office", type=NetworkListType.IP)
        )
        assert created.unique_id == "1_NEW"
        assert created.sync_point == 0

        fetched = await client.network_lists.get(
            GetNetworkListRequest(network_list_id=created.unique_id, include_elements=True)
        )
        assert fetched.elements == ["10.0.0.0/8"]
    finally:
        await client.close()

    assert calls == [
        ("POST", "/network-list/v2/network-lists"),
        ("GET", "/network-list/v2/network-lists/1_NEW"),
    ]


async def test_async_service_maps_404_to_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            404,
            json={"title": "Not Found", "detail": "Network list 1_GONE not found", "status": 404},
            request=request,
        )

    http = AsyncHTTPClient(
        ClientConfig(base_url="https://edge.example", async_transport=httpx.MockTransport(handler))
    )
    try:
        svc = AsyncNetworkListService(http)
        with pytest.raises(NotFoundError) as exc_info:
            await svc.add_element(AddElementRequest(network_list_id="1_GONE", element="GB"))
        assert exc_info.value.status == 404
        assert exc_info.value.problem is not None
        assert exc_info.value.problem.detail == "Network list 1_GONE not found"
    finally:
        await http.close()


async def test_async_update_details_and_validation() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(204, request=request)

    async with AsyncEdgeClient(
        base_url="https://edge.example", async_transport=httpx.MockTransport(handler)
    ) as client:
        assert (
            await client.network_lists.update_details(
                UpdateDetailsRequest(network_list_id="1_X", name="Renamed")
            )
            is None
        )
        with pytest.raises(ValidationError):
            await client.network_lists.update_details(UpdateDetailsRequest(name="Renamed"))

    assert calls == ["/network-list/v2/network-lists/1_X/details"]


def _list_body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {"uniqueId": "1_X", "type": "IP", "list": ["10.0.0.1"], "syncPoint": 4}
    body.update(overrides)
    return body


@pytest.mark.parametrize(
    ("call", "method", "path", "params", "status", "body"),
    [
        (
            lambda s: s.list(ListNetworkListsRequest(search="office", list_type="IP")),
            "GET",
            LISTS,
            {"extended": "false", "includeElements": "false", "search": "office", "listType": "IP"},
            200,
            {"networkLists": [_list_body()]},
        ),
        (
            lambda s: s.update(
                UpdateNetworkListRequest(
                    network_list_id="1_X", name="n", type="IP", sync_point=4, include_elements=True
                )
            ),
            "PUT",
            f"{LISTS}/1_X",
            {"extended": "false", "includeElements": "true"},
            200,
            _list_body(syncPoint=5),
        ),
        (
            lambda s: s.delete(DeleteNetworkListRequest.for_list("1_X")),
            "DELETE",
            f"{LISTS}/1_X",
            {},
            200,
            {"status": 200, "uniqueId": "1_X"},
        ),
        (
            lambda s: s.append(AppendListRequest(network_list_id="1_X", elements=["10.0.0.2"])),
            "POST",
            f"{LISTS}/1_X/append",
            {},
            202,
            _list_body(),
        ),
        (
            lambda s: s.remove_element(RemoveElementRequest.for_element("1_X", "10.0.0.1")),
            "DELETE",
            f"{LISTS}/1_X/elements",
            {"element": "10.0.0.1"},
            200,
            _list_body(list=[]),
        ),
        (
            lambda s: s.activate(
                ActivateNetworkListRequest(network_list_id="1_X", environment="PRODUCTION")
            ),
            "POST",
            f"{LISTS}/1_X/environments/PRODUCTION/activate",
            {},
            200,
            {"activationId": 7, "activationStatus": "PENDING_ACTIVATION", "environment": "PRODUCTION"},
        ),
        (
            lambda s: s.get_activation_status(
                ActivationStatusRequest(network_list_id="1_X", environment="STAGING")
            ),
            "GET",
            f"{LISTS}/1_X/environments/STAGING/status",
            {},
            200,
            {"activationStatus": "ACTIVE", "environment": "STAGING"},
        ),
        (
            lambda s: s.get_snapshot(GetSnapshotRequest(network_list_id="1_X", sync_point=2)),
            "GET",
            f"{LISTS}/1_X/sync-points/2/history",
            {"extended": "false"},
            200,
            _list_body(syncPoint=2),
        ),
    ],
)
async def test_async_operations_build_requests(
    call, method: str, path: str, params: dict[str, str], status: int, body: dict[str, object]
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status, json=body, request=request)

    async with AsyncEdgeClient(
        base_url="https://edge.example", async_transport=httpx.MockTransport(handler)
    ) as client:
        result = await call(client.network_lists)

    (request,) = seen
    assert request.method == method
    assert request.url.path == path
    assert dict(request.url.params) == params
    assert result is not None


async def test_async_append_rejects_200() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_list_body(), request=request)

    async with AsyncEdgeClient(
        base_url="https://edge.example", async_transport=httpx.MockTransport(handler)
    ) as client:
        with pytest.raises(APIError) as exc_info:
            await client.network_lists.append(
                AppendListRequest(network_list_id="1_X", elements=["10.0.0.2"])
            )

    assert exc_info.value.status == 200


async def test_async_activation_and_decode_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/status"):
            return httpx.Response(200, json={"environment": "staging"}, request=request)
        return httpx.Response(200, json=[], request=request)

    async with AsyncEdgeClient(
        base_url="https://edge.example", async_transport=httpx.MockTransport(handler)
    ) as client:
        status = await client.network_lists.get_activation_status(
            ActivationStatusRequest(network_list_id="1_X", environment="STAGING")
        )
        with pytest.raises(TransportError) as exc_info:
            await client.network_lists.delete(DeleteNetworkListRequest.for_list("1_X"))

    assert status.environment == "staging"
    assert status.target_environment is None
    assert exc_info.value.operation == "delete_network_list"
