"""
/mcp Router - JSON-RPC tool protocol over HTTP POST.

One JSON-RPC message per request. Notifications get 202 with no body.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from apps.mcp_server.deps import get_protocol_handler
from apps.mcp_server.protocol import PARSE_ERROR, McpProtocolHandler, jsonrpc_error

router = APIRouter()


@router.post("/mcp")
async def mcp_endpoint(
    request: Request,
    handler: McpProtocolHandler = Depends(get_protocol_handler),
) -> Any:
    """Handle one JSON-RPC request."""
    try:
        payload = json.loads(await request.body())
    except ValueError as e:
        return JSONResponse(content=jsonrpc_error(None, PARSE_ERROR, f"Invalid JSON: {e}"))

    ctx = {"request_id": getattr(request.state, "request_id", None)}
    response = await handler.handle(payload, ctx)

    if response is None:
        return Response(status_code=status.HTTP_202_ACCEPTED)
    return JSONResponse(content=response)
