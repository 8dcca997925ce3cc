"""
/tools Router - REST access to the tool registry.

Handles:
- GET /tools: Function definitions of every tool (optional ?capability=)
- GET /tools/{name}: One tool's definition, metadata and source
- POST /tools/{name}/invoke: Run a tool with a JSON object of arguments
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from apps.mcp_server.deps import get_registry, get_tool_context
from zeal_tools.base import ToolModule
from zeal_tools.registry import ToolNotFoundError, ToolRegistry

router = APIRouter()


def _require_tool(registry: ToolRegistry, name: str) -> ToolModule:
    module = registry.get(name)
    if module is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown tool: {name}")
    return module


@router.get("")
async def list_tools(
    capability: str | None = None,
    registry: ToolRegistry = Depends(get_registry),
) -> list[dict[str, Any]]:
    """List tools as ``{"type": "function", "function": {...}}`` definitions."""
    modules = registry.filter_by_capability(capability) if capability else list(registry)
    return [m.descriptor.to_function_definition() for m in modules if m.name]


@router.get("/{name}")
async def get_tool(name: str, registry: ToolRegistry = Depends(get_registry)) -> dict[str, Any]:
    """Get a single tool's definition and metadata."""
    module = _require_tool(registry, name)
    return {
        "definition": module.descriptor.to_function_definition(),
        "metadata": module.metadata.model_dump(),
        "source": module.source_path,
    }


@router.post("/{name}/invoke")
async def invoke_tool(
    name: str,
    arguments: dict[str, Any] | None = Body(default=None),
    registry: ToolRegistry = Depends(get_registry),
    ctx: dict[str, Any] = Depends(get_tool_context),
) -> Any:
    """
    Invoke a tool.

    The response body is exactly what the tool returned, including
    ``{"error": ...}`` values, which are still served with 200.
    """
    try:
        return await registry.invoke(name, arguments or {}, ctx)
    except ToolNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
