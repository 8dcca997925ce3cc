"""
Prometheus Metrics Endpoint.

Exposes /metrics for Prometheus scraping.
"""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics():
    """
    Prometheus metrics endpoint.

    Exposes metrics in Prometheus text format:
    - Tool execution counters and durations (from zeal_obs.metrics)
    - Tool load failures and registered tool count

    Example metrics:
    ```
    # HELP tool_executions_total Total tool executions
    # TYPE tool_executions_total counter
    tool_executions_total{tool_name="get_employees",status="success"} 15.0
    ```
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
