"""JSON-RPC Tool Protocol Tests."""

import json

import pytest

from apps.mcp_server.protocol import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    PROTOCOL_VERSION,
    McpProtocolHandler,
    tool_result_content,
)
from zeal_tools.registry import ToolRegistry


def rpc(method, params=None, request_id=1):
    message = {"jsonrpc": "2.0", "method": method, "id": request_id}
    if params is not None:
        message["params"] = params
    return message


# ============================================================================
# OVER HTTP
# ============================================================================


def test_initialize(app_client):
    response = app_client.post("/mcp", json=rpc("initialize", {"protocolVersion": "2025-03-26"}))

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["protocolVersion"] == "2025-03-26"
    assert result["capabilities"] == {"tools": {"listChanged": False}}
    assert result["serverInfo"] == {"name": "Zeal", "version": "1.0.0"}


def test_initialize_defaults_protocol_version(app_client):
    result = app_client.post("/mcp", json=rpc("initialize")).json()["result"]

    assert result["protocolVersion"] == PROTOCOL_VERSION


def test_ping(app_client):
    assert app_client.post("/mcp", json=rpc("ping", request_id="p")).json() == {
        "jsonrpc": "2.0",
        "id": "p",
        "result": {},
    }


def test_tools_list(app_client):
    tools = app_client.post("/mcp", json=rpc("tools/list")).json()["result"]["tools"]

    assert [t["name"] for t in tools] == ["get_employees", "create_company", "echo"]
    assert tools[0]["inputSchema"]["required"] == ["companyID"]


def test_tools_call(app_client):
    body = app_client.post(
        "/mcp", json=rpc("tools/call", {"name": "echo", "arguments": {"x": "y"}})
    ).json()

    result = body["result"]
    assert result["isError"] is False
    payload = json.loads(result["content"][0]["text"])
    assert payload["echo"] == {"x": "y"}
    assert payload["ctx"]["request_id"]


def test_tools_call_error_value_sets_flag(app_client):
    body = app_client.post(
        "/mcp", json=rpc("tools/call", {"name": "get_employees", "arguments": {}})
    ).json()

    assert body["result"]["isError"] is True
    assert "companyID" in json.loads(body["result"]["content"][0]["text"])["error"]


def test_tools_call_unknown_tool(app_client):
    body = app_client.post("/mcp", json=rpc("tools/call", {"name": "nope"})).json()

    assert body["error"]["code"] == INVALID_PARAMS
    assert "nope" in body["error"]["message"]


def test_tools_call_non_object_arguments(app_client):
    body = app_client.post(
        "/mcp", json=rpc("tools/call", {"name": "echo", "arguments": [1]})
    ).json()

    assert body["error"]["code"] == INVALID_PARAMS


def test_notification_gets_no_body(app_client):
    response = app_client.post(
        "/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"}
    )

    assert response.status_code == 202
    assert response.content == b""


def test_null_id_request_gets_response(app_client):
    response = app_client.post("/mcp", json={"jsonrpc": "2.0", "method": "ping", "id": None})

    assert response.status_code == 200
    assert response.json() == {"jsonrpc": "2.0", "id": None, "result": {}}


def test_unknown_method(app_client):
    body = app_client.post("/mcp", json=rpc("resources/list")).json()

    assert body["error"]["code"] == METHOD_NOT_FOUND
    assert body["id"] == 1


def test_parse_error(app_client):
    response = app_client.post(
        "/mcp", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.json()["error"]["code"] == PARSE_ERROR
    assert response.json()["id"] is None


def test_batch_is_invalid_request(app_client):
    body = app_client.post("/mcp", json=[rpc("ping")]).json()

    assert body["error"]["code"] == INVALID_REQUEST


def test_wrong_version_is_invalid_request(app_client):
    body = app_client.post("/mcp", json={"jsonrpc": "1.0", "method": "ping", "id": 7}).json()

    assert body["error"]["code"] == INVALID_REQUEST
    assert body["id"] == 7


# ============================================================================
# HANDLER
# ============================================================================


@pytest.mark.asyncio
async def test_handler_without_http(settings, echo_tool):
    registry = await ToolRegistry.discover([echo_tool("echo")], settings=settings)
    handler = McpProtocolHandler(registry, settings)

    response = await handler.handle(rpc("tools/call", {"name": "echo"}), {"request_id": "r"})

    assert json.loads(response["result"]["content"][0]["text"]) == {
        "echo": {},
        "ctx": {"request_id": "r"},
    }


@pytest.mark.asyncio
async def test_handler_unknown_method_notification_is_silent(settings):
    handler = McpProtocolHandler(ToolRegistry(), settings)

    assert await handler.handle({"jsonrpc": "2.0", "method": "something/else"}) is None


@pytest.mark.asyncio
async def test_handler_answers_explicit_null_id(settings):
    handler = McpProtocolHandler(ToolRegistry(), settings)

    response = await handler.handle({"jsonrpc": "2.0", "method": "ping", "id": None})

    assert response == {"jsonrpc": "2.0", "id": None, "result": {}}


def test_tool_result_content_serializes_non_json_values():
    content = tool_result_content({"when": object})

    assert content["isError"] is False
    assert "class" in json.loads(content["content"][0]["text"])["when"]
