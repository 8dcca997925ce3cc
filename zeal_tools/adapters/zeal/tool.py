"""Zeal Endpoint Tool."""

import time
from typing import Any

from jsonschema import Draft7Validator

from zeal_obs.logging import get_logger
from zeal_obs.metrics import tool_execution_duration, tool_executions_total
from zeal_tools.base import ToolDescriptor, ToolMetadata

from .client import ZealClientWrapper
from .schemas import Endpoint

logger = get_logger(__name__)


class ZealEndpointTool:
    """Tool that calls one Zeal API endpoint."""

    def __init__(self, endpoint: Endpoint, client: ZealClientWrapper):
        """Initialize endpoint tool.

        Args:
            endpoint: Endpoint description from the catalog
            client: Configured Zeal client
        """
        self.endpoint = endpoint
        self.client = client

        # Tool interface properties
        self.name = endpoint.name
        self.description = endpoint.description
        self.descriptor = ToolDescriptor(
            name=endpoint.name,
            description=endpoint.description,
            parameters=endpoint.parameter_schema(),
        )
        self.metadata = ToolMetadata(
            requires_approval=False,
            dry_run_supported=True,
            idempotent=endpoint.is_read_only,
            capabilities=["zeal.read"] if endpoint.is_read_only else ["zeal.write"],
            risk_level=self._risk_level(endpoint),
        )
        self._validator = Draft7Validator(self.descriptor.parameters)

    @staticmethod
    def _risk_level(endpoint: Endpoint) -> str:
        if endpoint.method == "DELETE":
            return "high"
        return "low" if endpoint.is_read_only else "medium"

    async def execute(
        self,
        input_data: dict[str, Any],
        ctx: dict[str, Any] | None = None,
    ) -> Any:
        """Execute the endpoint call.

        Args:
            input_data: Tool arguments matching the descriptor's parameter schema
            ctx: Execution context (dry_run, request_id)

        Returns:
            Parsed upstream JSON on success, ``{"error": ...}`` otherwise
        """
        ctx = ctx or {}
        started = time.perf_counter()

        try:
            result, status = await self._execute(input_data, ctx)
        except Exception as e:
            result = self._error(str(e))
            status = "error"
            logger.exception("tool_execution_failed", tool=self.name)

        tool_executions_total.labels(tool_name=self.name, status=status).inc()
        tool_execution_duration.labels(tool_name=self.name).observe(time.perf_counter() - started)
        return result

    async def _execute(self, input_data: Any, ctx: dict[str, Any]) -> tuple[Any, str]:
        validation_error = self._validate_input(input_data)
        if validation_error:
            logger.warning("tool_validation_failed", tool=self.name, error=validation_error)
            return self._error(f"Input validation failed: {validation_error}"), "error"

        request = self.endpoint.build_request(input_data)

        if ctx.get("dry_run", False):
            return {
                "status": "dry_run",
                "message": f"Would call Zeal endpoint: {self.name}",
                "would_execute": {
                    "method": request.method,
                    "url": self.client.url_for(request.path),
                    "params": request.params,
                    "json": request.body,
                },
            }, "dry_run"

        response = await self.client.request(request)

        if response.success:
            return response.data, "success"

        logger.error(
            "zeal_request_failed",
            tool=self.name,
            status_code=response.status_code,
            error=response.error,
            request_id=ctx.get("request_id"),
        )
        return self._error(response.error or "unknown error"), "error"

    def _error(self, cause: str) -> dict[str, str]:
        return {"error": f"An error occurred while {self.endpoint.error_action}: {cause}"}

    def _validate_input(self, input_data: Any) -> str | None:
        """Validate input against the descriptor's JSON schema.

        Returns:
            Error message if validation fails, None if valid
        """
        if not isinstance(input_data, dict):
            return f"arguments must be an object, got {type(input_data).__name__}"

        errors = sorted(self._validator.iter_errors(input_data), key=lambda e: [str(p) for p in e.path])
        if not errors:
            return None
        return "; ".join(
            f"{'.'.join(str(p) for p in e.path)}: {e.message}" if e.path else e.message
            for e in errors
        )
