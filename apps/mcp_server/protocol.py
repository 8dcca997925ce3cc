"""
Minimal JSON-RPC 2.0 tool protocol.

Handles the subset of the Model Context Protocol a host needs to use the
registry: ``initialize``, ``ping``, ``tools/list``, ``tools/call`` and
``notifications/*``. Transport is left to the caller (see routers/mcp.py).
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from zeal_config.settings import Settings
from zeal_obs.logging import get_logger
from zeal_tools.registry import ToolNotFoundError, ToolRegistry

logger = get_logger(__name__)

PROTOCOL_VERSION = "2024-11-05"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcError(Exception):
    """Error reported to the client as a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any | None = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"JSON-RPC error {code}: {message}")


class JsonRpcRequest(BaseModel):
    """Incoming JSON-RPC 2.0 request or notification."""

    jsonrpc: Literal["2.0"]
    method: str
    params: dict[str, Any] | None = None
    id: str | int | None = None

    @property
    def is_notification(self) -> bool:
        # An explicit "id": null is a request and still gets a response
        return "id" not in self.model_fields_set


def jsonrpc_result(request_id: str | int | None, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def jsonrpc_error(
    request_id: str | int | None, code: int, message: str, data: Any | None = None
) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


def tool_result_content(result: Any) -> dict[str, Any]:
    """Wrap a tool's return value as MCP ``content`` with an error flag."""
    is_error = isinstance(result, dict) and "error" in result
    return {
        "content": [{"type": "text", "text": json.dumps(result, default=str)}],
        "isError": is_error,
    }


class McpProtocolHandler:
    """Dispatches JSON-RPC requests against a tool registry.

    Supported methods:
    - initialize: Server info and capabilities
    - ping: Liveness
    - tools/list: Every named tool with its input schema
    - tools/call: Invoke a tool by name with an arguments object
    - notifications/*: Accepted, never answered
    """

    def __init__(self, registry: ToolRegistry, settings: Settings):
        self.registry = registry
        self.settings = settings

        self._method_handlers = {
            "initialize": self._handle_initialize,
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }

    async def handle(
        self, payload: Any, ctx: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Handle one decoded JSON-RPC message.

        Returns:
            Response object, or None for notifications
        """
        if not isinstance(payload, dict):
            return jsonrpc_error(None, INVALID_REQUEST, "Request must be a JSON object")

        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValidationError as e:
            request_id = payload.get("id")
            if not isinstance(request_id, (str, int)):
                request_id = None
            return jsonrpc_error(
                request_id, INVALID_REQUEST, "Invalid request", data=e.errors(include_url=False)
            )

        if request.method.startswith("notifications/"):
            logger.debug("mcp_notification", method=request.method)
            return None

        handler = self._method_handlers.get(request.method)
        if handler is None:
            if request.is_notification:
                return None
            return jsonrpc_error(
                request.id, METHOD_NOT_FOUND, f"Method '{request.method}' not found"
            )

        try:
            result = await handler(request.params or {}, ctx or {})
        except JsonRpcError as e:
            logger.warning("mcp_request_failed", method=request.method, code=e.code, error=e.message)
            response = jsonrpc_error(request.id, e.code, e.message, e.data)
        except Exception:
            logger.exception("mcp_request_crashed", method=request.method)
            response = jsonrpc_error(request.id, INTERNAL_ERROR, "Internal server error")
        else:
            response = jsonrpc_result(request.id, result)

        return None if request.is_notification else response

    async def _handle_initialize(self, params: dict[str, Any], ctx: dict[str, Any]) -> dict:
        return {
            "protocolVersion": params.get("protocolVersion") or PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {
                "name": self.settings.SERVER_NAME,
                "version": self.settings.SERVER_VERSION,
            },
        }

    async def _handle_ping(self, params: dict[str, Any], ctx: dict[str, Any]) -> dict:
        return {}

    async def _handle_tools_list(self, params: dict[str, Any], ctx: dict[str, Any]) -> dict:
        return {
            "tools": [
                {
                    "name": descriptor.name,
                    "description": descriptor.description,
                    "inputSchema": descriptor.parameters,
                }
                for descriptor in self.registry.descriptors()
            ]
        }

    async def _handle_tools_call(self, params: dict[str, Any], ctx: dict[str, Any]) -> dict:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise JsonRpcError(INVALID_PARAMS, "Missing tool name")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise JsonRpcError(INVALID_PARAMS, "Tool arguments must be an object")

        try:
            result = await self.registry.invoke(name, arguments, ctx)
        except ToolNotFoundError:
            raise JsonRpcError(INVALID_PARAMS, f"Unknown tool: {name}") from None

        return tool_result_content(result)
