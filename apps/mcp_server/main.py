"""
Zeal MCP FastAPI Application Entry Point.

This module initializes the FastAPI application with:
- CORS middleware
- Request ID injection and request logging
- Lifespan context management (tool discovery)
- Router mounting
"""

from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.mcp_server.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from apps.mcp_server.routers import health, mcp, metrics, tools
from zeal_config.settings import Settings
from zeal_obs.logging import get_logger, setup_logging
from zeal_tools.adapters.zeal.paths import TOOL_PATHS
from zeal_tools.registry import ToolRegistry

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    sources: Sequence[str] | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use, read from the environment when omitted
        sources: Tool identifiers to discover, defaults to TOOL_PATHS
    """
    settings = settings or Settings()
    sources = list(TOOL_PATHS if sources is None else sources)

    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application lifespan context manager.

        Discovers every tool once, before the first request is served.
        """
        logger.info(
            "server_starting",
            environment=settings.ENVIRONMENT,
            tool_sources=len(sources),
        )

        if settings.uses_legacy_api_key:
            logger.warning(
                "legacy_api_key_in_use",
                variable="ZEAL_PUBLIC_API_API_KEY",
                preferred="ZEAL_API_KEY",
            )
        elif not settings.api_key:
            logger.warning("api_key_missing", variable="ZEAL_API_KEY")

        registry = await ToolRegistry.discover(sources, settings=settings)
        app.state.tool_registry = registry

        logger.info("server_ready", tools=len(registry))

        yield

        logger.info("server_stopping")

    app = FastAPI(
        title=f"{settings.SERVER_NAME} MCP Server",
        description="Zeal payroll/HR API exposed as language-model tools",
        version=settings.SERVER_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ========================================================================
    # MIDDLEWARE
    # ========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.API_CORS_ORIGINS.split(",") if settings.API_CORS_ORIGINS else ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Added last so it runs first and the logging middleware sees the request ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ========================================================================
    # EXCEPTION HANDLERS
    # ========================================================================

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logger.exception("unhandled_exception", path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": getattr(request.state, "request_id", None),
            },
        )

    # ========================================================================
    # ROUTERS
    # ========================================================================

    app.include_router(mcp.router, prefix="", tags=["mcp"])
    app.include_router(tools.router, prefix="/tools", tags=["tools"])
    app.include_router(health.router, prefix="", tags=["health"])
    app.include_router(metrics.router, prefix="", tags=["metrics"])

    @app.get("/", tags=["root"])
    async def root():
        """
        Root endpoint - API information.

        Returns:
            API metadata and available endpoints
        """
        return {
            "name": settings.SERVER_NAME,
            "version": settings.SERVER_VERSION,
            "description": "Zeal payroll/HR API exposed as language-model tools",
            "docs": "/docs",
            "health": "/healthz",
            "metrics": "/metrics",
            "endpoints": {
                "mcp": "POST /mcp",
                "tools": "GET /tools",
                "tool_detail": "GET /tools/{name}",
                "tool_invoke": "POST /tools/{name}/invoke",
            },
        }

    return app


app = create_app()

