"""Zeal adapter Pydantic schemas.

Declarative endpoint descriptions plus the request/response shapes exchanged
with the client.
"""

import re
from typing import TYPE_CHECKING, Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, model_validator

if TYPE_CHECKING:
    from zeal_config.settings import Settings
    from zeal_tools.adapters.zeal.tool import ZealEndpointTool

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
ParamLocation = Literal["path", "query", "body"]
JsonType = Literal["string", "number", "integer", "boolean", "array", "object"]

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# Leading verb of a tool name -> phrase used in error messages
_ACTION_VERBS = {
    "add": "adding",
    "create": "creating",
    "delete": "deleting",
    "download": "downloading",
    "generate": "generating",
    "get": "retrieving",
    "list": "listing",
    "preview": "previewing",
    "resolve": "resolving",
    "send": "sending",
    "set": "setting",
    "setup": "setting up",
    "sign": "signing",
    "transfer": "transferring",
    "trigger": "triggering",
    "update": "updating",
    "upload": "uploading",
    "verify": "verifying",
}


# ============================================================================
# REQUEST / RESPONSE
# ============================================================================


class ZealRequest(BaseModel):
    """A fully resolved upstream call."""

    method: HttpMethod
    path: str
    params: dict[str, Any] = {}
    body: dict[str, Any] | None = None


class ZealResponse(BaseModel):
    """Outcome of one upstream call: data on success, error message otherwise."""

    success: bool
    data: Any = None
    error: str | None = None
    status_code: int | None = None


# ============================================================================
# ENDPOINT DESCRIPTION
# ============================================================================


class Param(BaseModel):
    """One tool parameter and where it goes in the HTTP request."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: JsonType = "string"
    description: str = ""
    required: bool = False
    location: ParamLocation | None = None  # None: inferred from the endpoint
    enum: list[Any] | None = None
    items: dict[str, Any] | None = None
    properties: dict[str, Any] | None = None
    default: Any = None  # sent when the argument is absent

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = self.enum
        if self.items is not None:
            schema["items"] = self.items
        if self.properties is not None:
            schema["properties"] = self.properties
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def as_optional(self) -> "Param":
        return self.model_copy(update={"required": False})

    def as_required(self) -> "Param":
        return self.model_copy(update={"required": True})

    def described(self, description: str) -> "Param":
        return self.model_copy(update={"description": description})

    def defaulting(self, value: Any) -> "Param":
        return self.model_copy(update={"default": value})


def param(
    name: str,
    type: JsonType = "string",
    description: str = "",
    required: bool = False,
    **extra: Any,
) -> Param:
    """Shorthand constructor used by the endpoint catalog."""
    return Param(name=name, type=type, description=description, required=required, **extra)


class Endpoint(BaseModel):
    """One Zeal API operation exposed as a tool.

    Path placeholders (``/customer-accounts/{customerAccountID}``) are filled
    from the parameter of the same name. Remaining parameters go to the query
    string for GET and to the JSON body otherwise, unless ``param_location``
    or a parameter's own ``location`` says differently.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    method: HttpMethod
    path: str
    params: list[Param] = []
    param_location: Literal["query", "body"] | None = None
    action: str | None = None

    @model_validator(mode="after")
    def _check_params(self) -> "Endpoint":
        names = [p.name for p in self.params]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(f"{self.name}: duplicate parameters {sorted(duplicates)}")

        by_name = {p.name: p for p in self.params}
        for placeholder in self.path_params:
            if placeholder not in by_name:
                raise ValueError(f"{self.name}: path placeholder {{{placeholder}}} has no parameter")
            if not by_name[placeholder].required:
                raise ValueError(f"{self.name}: path parameter {placeholder} must be required")
        return self

    @property
    def path_params(self) -> list[str]:
        return _PLACEHOLDER.findall(self.path)

    @property
    def is_read_only(self) -> bool:
        return self.method == "GET"

    @property
    def error_action(self) -> str:
        """Phrase for error messages, e.g. ``retrieving employees``."""
        if self.action:
            return self.action
        verb, _, rest = self.name.partition("_")
        if verb in _ACTION_VERBS and rest:
            return f"{_ACTION_VERBS[verb]} {rest.replace('_', ' ')}"
        return f"calling {self.name}"

    def location_of(self, p: Param) -> ParamLocation:
        if p.name in self.path_params:
            return "path"
        if p.location:
            return p.location
        if self.param_location:
            return self.param_location
        return "query" if self.method == "GET" else "body"

    def parameter_schema(self) -> dict[str, Any]:
        """JSON schema for the tool's argument object."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }

    def build_request(self, input_data: dict[str, Any]) -> ZealRequest:
        """Place arguments into path, query string and body.

        Absent or None arguments fall back to the parameter default and are
        left out when there is none; unknown keys are ignored.
        """
        path = self.path
        query: dict[str, Any] = {}
        body: dict[str, Any] = {}

        for p in self.params:
            value = input_data.get(p.name)
            if value is None:
                value = p.default
            if value is None:
                continue

            location = self.location_of(p)
            if location == "path":
                path = path.replace(f"{{{p.name}}}", quote(str(value), safe=""))
            elif location == "query":
                query[p.name] = value
            else:
                body[p.name] = value

        sends_body = self.method != "GET" and any(
            self.location_of(p) == "body" for p in self.params
        )
        return ZealRequest(
            method=self.method,
            path=path,
            params=query,
            body=body if sends_body else None,
        )

    def build_tool(self, settings: "Settings") -> "ZealEndpointTool":
        """Create the executable tool for this endpoint (discovery hook)."""
        from zeal_tools.adapters.zeal.client import ZealClientWrapper
        from zeal_tools.adapters.zeal.tool import ZealEndpointTool

        return ZealEndpointTool(endpoint=self, client=ZealClientWrapper.shared(settings))
