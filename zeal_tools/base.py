"""Tool Interface & Metadata.

Descriptor, metadata and the immutable ToolModule pairing produced by discovery.
"""

from typing import Any, Awaitable, Callable, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field


def _empty_parameters() -> dict[str, Any]:
    return {"type": "object", "properties": {}, "required": []}


class ToolMetadata(BaseModel):
    """Tool capability metadata."""

    model_config = ConfigDict(frozen=True)

    requires_approval: bool = False
    dry_run_supported: bool = False
    idempotent: bool = False
    capabilities: list[str] = []
    risk_level: str = "low"


class ToolDescriptor(BaseModel):
    """Declarative description of a tool as advertised to a host.

    ``name`` may be missing on a malformed descriptor; discovery passes such
    tools through untouched.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["function"] = "function"
    name: str | None = None
    description: str = ""
    parameters: dict[str, Any] = Field(default_factory=_empty_parameters)

    def to_function_definition(self) -> dict[str, Any]:
        """Render as ``{"type": "function", "function": {...}}``."""
        return {
            "type": self.type,
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


class Tool(Protocol):
    """Tool interface."""

    descriptor: ToolDescriptor
    metadata: ToolMetadata

    async def execute(
        self, input_data: dict[str, Any], ctx: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Execute tool action. Must return an ``{"error": ...}`` value instead of raising."""
        ...


ToolOperation = Callable[..., Awaitable[Any]]


class ToolModule(BaseModel):
    """A discovered tool: its operation, descriptor and where it came from."""

    model_config = ConfigDict(frozen=True)

    operation: ToolOperation
    descriptor: ToolDescriptor
    metadata: ToolMetadata = ToolMetadata()
    source_path: str

    @property
    def name(self) -> str | None:
        return self.descriptor.name

    def renamed(self, name: str) -> "ToolModule":
        """Copy of this module with a different descriptor name."""
        return self.model_copy(
            update={"descriptor": self.descriptor.model_copy(update={"name": name})}
        )
