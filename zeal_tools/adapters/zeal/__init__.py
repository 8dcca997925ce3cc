"""Zeal adapter for Zeal MCP.

Provides one tool per Zeal payroll/HR API endpoint:
- Companies, employees, contractors (domestic and international)
- Employee checks, shifts, payroll previews and reporting periods
- Deductions, accruals, bank and customer accounts, wallets
- Tax parameters, locations, paperwork, worker links and reports

Usage:
    from zeal_tools.adapters.zeal import discover_zeal_tools

    registry = await discover_zeal_tools(settings)
    result = await registry.invoke("get_employees", {"companyID": "co_1"})
"""

from zeal_config.settings import Settings
from zeal_tools.registry import ToolRegistry

from .client import ZealClientWrapper
from .exceptions import (
    ZealAPIError,
    ZealAuthError,
    ZealNotFoundError,
    ZealRateLimitError,
    ZealValidationError,
)
from .paths import TOOL_PATHS
from .schemas import Endpoint, Param, ZealRequest, ZealResponse, param
from .tool import ZealEndpointTool

__all__ = [
    # Client
    "ZealClientWrapper",
    # Exceptions
    "ZealAPIError",
    "ZealAuthError",
    "ZealNotFoundError",
    "ZealRateLimitError",
    "ZealValidationError",
    # Schemas
    "Endpoint",
    "Param",
    "ZealRequest",
    "ZealResponse",
    "param",
    # Tools
    "ZealEndpointTool",
    "TOOL_PATHS",
    "discover_zeal_tools",
]


async def discover_zeal_tools(settings: Settings | None = None) -> ToolRegistry:
    """Discover every catalog tool listed in TOOL_PATHS.

    Args:
        settings: Settings carrying the Zeal credential; read from the
            environment when omitted

    Returns:
        Registry with one tool per endpoint that loaded
    """
    return await ToolRegistry.discover(TOOL_PATHS, settings=settings)
