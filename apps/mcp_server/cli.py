"""Zeal MCP server command line.

Usage:
    zeal-mcp --port=8000
    zeal-mcp --list-tools
"""

import argparse
import asyncio

import uvicorn

from zeal_config.settings import Settings
from zeal_obs.logging import setup_logging
from zeal_tools.adapters.zeal import discover_zeal_tools


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zeal-mcp", description="Serve the Zeal API as language-model tools"
    )
    parser.add_argument("--host", default=settings.API_HOST)
    parser.add_argument("--port", type=int, default=settings.API_PORT)
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Discover tools, print their names and exit",
    )
    return parser


def list_tools(settings: Settings) -> int:
    """Print one discovered tool name per line."""
    registry = asyncio.run(discover_zeal_tools(settings))
    for name in registry.names():
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the server, or list tools with --list-tools."""
    settings = Settings()
    args = build_parser(settings).parse_args(argv)

    if args.list_tools:
        setup_logging(settings)
        return list_tools(settings)

    uvicorn.run(
        "apps.mcp_server.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
