"""
Health Check Endpoints.

- GET /healthz: Liveness probe (API running)
- GET /readyz: Readiness probe (tool registry discovered and non-empty)
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/healthz")
async def healthz():
    """
    Liveness probe - is the API process running?

    Returns 200 OK if server is alive.
    """
    return {"status": "healthy", "service": "zeal-mcp"}


@router.get("/readyz")
async def readyz(request: Request):
    """
    Readiness probe - is the API ready to serve traffic?

    Returns:
        200 OK with the tool count once discovery produced at least one tool
        503 Service Unavailable otherwise
    """
    registry = getattr(request.app.state, "tool_registry", None)
    tool_count = len(registry) if registry is not None else 0

    if tool_count == 0:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "checks": {"tools": "none loaded"}},
        )

    return {"status": "ready", "checks": {"tools": "ok"}, "tool_count": tool_count}
