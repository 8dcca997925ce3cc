"""
Zeal MCP Applications Package.

Contains:
- mcp_server: FastAPI application exposing the Zeal tool registry
"""

__version__ = "1.0.0"
