from __future__ import annotations

import logging

import httpx
import pytest

from edgesec import APIError, EdgeClient, ErrorKind, NotFoundError, TransportError
from edgesec.clients.http import ClientConfig, HTTPClient, parse_model
from edgesec.exceptions import error_from_response
from edgesec.models import ConfigList, GetNetworkListRequest


def test_client_config_base_url_resolution() -> None:
    assert ClientConfig(host="akab-x.luna.example.net").resolved_base_url() == (
        "https://akab-x.luna.example.net"
    )
    assert ClientConfig(host="http://localhost:8080/").resolved_base_url() == (
        "http://localhost:8080"
    )
    assert (
        ClientConfig(host="ignored", base_url="https://edge.example/").resolved_base_url()
        == "https://edge.example"
    )
    with pytest.raises(ValueError):
        ClientConfig().resolved_base_url()


def test_account_switch_key_added_to_every_request(make_client) -> None:
    seen: list[dict[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json={"configurations": []}, request=request)

    client = make_client(handler, account_switch_key="1-ABCDE:1-2RBL")
    client.appsec.get_configs()
    client.network_lists.get(GetNetworkListRequest(network_list_id="1_X"))

    assert seen == [
        {"accountSwitchKey": "1-ABCDE:1-2RBL"},
        {"extended": "false", "includeElements": "false", "accountSwitchKey": "1-ABCDE:1-2RBL"},
    ]


def test_auth_is_applied_to_requests() -> None:
    class StaticSigner(httpx.Auth):
        def auth_flow(self, request: httpx.Request):
            request.headers["Authorization"] = "EG1-HMAC-SHA256 client_token=t;signature=s"
            yield request

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Authorization"].startswith("EG1-HMAC-SHA256")
        assert request.headers["Accept"] == "application/json"
        return httpx.Response(200, json={"configurations": []}, request=request)

    with EdgeClient(
        base_url="https://edge.example", auth=StaticSigner(), transport=httpx.MockTransport(handler)
    ) as client:
        assert client.appsec.get_configs().configurations == []


def test_transport_failure_is_wrapped_with_operation(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.appsec.get_configs()

    assert exc_info.value.kind is ErrorKind.TRANSPORT
    assert exc_info.value.operation == "get_configs"
    assert str(exc_info.value).startswith("get_configs request failed:")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_undecodable_body_is_a_transport_error(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError, match="get_configs response could not be decoded"):
        client.appsec.get_configs()


def test_error_from_response_keeps_problem_details() -> None:
    request = httpx.Request("PUT", "https://edge.example/network-list/v2/network-lists/1_X")
    response = httpx.Response(
        409,
        json={
            "type": "https://problems.example/network-lists/conflict",
            "title": "Conflict",
            "detail": "syncPoint 7 is stale, current is 8",
            "status": 409,
            "errors": [{"title": "stale sync point"}],
            "warnings": [{"title": "list is shared"}],
        },
        request=request,
    )

    error = error_from_response(response)

    assert type(error) is APIError
    assert error.status == 409
    assert error.kind is ErrorKind.API
    assert "syncPoint 7 is stale" in str(error)
    assert error.errors == [{"title": "stale sync point"}]
    assert error.warnings == [{"title": "list is shared"}]
    assert error.to_dict()["problem"]["title"] == "Conflict"


def test_error_from_response_with_plain_text_body() -> None:
    request = httpx.Request("GET", "https://edge.example/appsec/v1/configs")
    response = httpx.Response(404, text="no such thing", request=request)

    error = error_from_response(response)

    assert isinstance(error, NotFoundError)
    assert error.kind is ErrorKind.NOT_FOUND
    assert error.problem is None
    assert error.response_text == "no such thing"


def test_log_requests_logs_status_line(caplog: pytest.LogCaptureFixture) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"configurations": []}, request=request)

    caplog.set_level(logging.INFO, logger="edgesec.clients.http")
    with HTTPClient(
        ClientConfig(
            base_url="https://edge.example",
            log_requests=True,
            transport=httpx.MockTransport(handler),
        )
    ) as http:
        http.request("GET", "/appsec/v1/configs", operation="get_configs")

    assert "GET https://edge.example/appsec/v1/configs -> 200" in caplog.text


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (None, "expected a JSON object, got empty"),
        ([], "expected a JSON object, got list"),
        ("ok", "expected a JSON object, got str"),
        ({"configurations": [{"name": "no id"}]}, "could not be decoded"),
    ],
)
def test_parse_model_wraps_bad_bodies(data: object, expected: str) -> None:
    with pytest.raises(TransportError, match=expected) as exc_info:
        parse_model(ConfigList, data, operation="get_configs")

    assert exc_info.value.operation == "get_configs"
    assert str(exc_info.value).startswith("get_configs response could not be decoded")


def test_parse_model_accepts_object() -> None:
    configs = parse_model(ConfigList, {"configurations": []}, operation="get_configs")

    assert configs.configurations == []
