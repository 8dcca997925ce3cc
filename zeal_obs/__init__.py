"""
Zeal MCP Observability Package.

Provides:
- Metrics (Prometheus)
- Structured logging (structlog)
"""

__all__ = ["metrics", "logging"]
