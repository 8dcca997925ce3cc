"""
FastAPI Routers.

Contains:
- health: GET /healthz, /readyz
- metrics: GET /metrics
- tools: GET /tools, /tools/{name}, POST /tools/{name}/invoke
- mcp: POST /mcp (JSON-RPC)
"""

__all__ = ["health", "metrics", "tools", "mcp"]
