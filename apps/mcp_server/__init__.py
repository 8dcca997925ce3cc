"""
Zeal MCP Server.

FastAPI application providing:
- POST /mcp: JSON-RPC tool protocol (initialize, tools/list, tools/call)
- /tools: REST tool listing and invocation
- /healthz, /readyz: Health checks
- /metrics: Prometheus metrics
"""

__all__ = ["app", "create_app"]
