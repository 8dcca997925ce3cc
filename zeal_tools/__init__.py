"""Zeal MCP Tool System.

Tool interface, discovery & registry.
"""

from zeal_tools.base import Tool, ToolDescriptor, ToolMetadata, ToolModule
from zeal_tools.registry import (
    ToolLoadError,
    ToolNotFoundError,
    ToolRegistry,
    deduplicate_tool_names,
    discover_tools,
)

__all__ = [
    "Tool",
    "ToolDescriptor",
    "ToolMetadata",
    "ToolModule",
    "ToolLoadError",
    "ToolNotFoundError",
    "ToolRegistry",
    "deduplicate_tool_names",
    "discover_tools",
]
