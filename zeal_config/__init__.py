"""
Zeal MCP Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from zeal_config.settings import Settings

__all__ = ["Settings"]
