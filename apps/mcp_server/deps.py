"""
FastAPI Dependency Injection.

Provides:
- Application settings
- The tool registry built at startup
- The JSON-RPC protocol handler
- Per-request tool context (request ID, dry run)
"""

from typing import Any

from fastapi import HTTPException, Request, status

from apps.mcp_server.protocol import McpProtocolHandler
from zeal_config.settings import Settings
from zeal_tools.registry import ToolRegistry


def get_settings(request: Request) -> Settings:
    """Dependency: Application settings."""
    return request.app.state.settings


def get_registry(request: Request) -> ToolRegistry:
    """
    Dependency: Tool registry.

    Raises:
        HTTPException: 503 if discovery has not run yet
    """
    registry = getattr(request.app.state, "tool_registry", None)
    if registry is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Tool registry not initialized",
        )
    return registry


def get_protocol_handler(request: Request) -> McpProtocolHandler:
    """Dependency: JSON-RPC handler bound to the current registry."""
    return McpProtocolHandler(get_registry(request), get_settings(request))


def get_tool_context(request: Request, dry_run: bool = False) -> dict[str, Any]:
    """
    Dependency: Execution context passed to tools.

    Args:
        dry_run: ``?dry_run=true`` query flag
    """
    return {
        "request_id": getattr(request.state, "request_id", None),
        "dry_run": dry_run,
    }
