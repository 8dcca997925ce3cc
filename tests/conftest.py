"""Pytest fixtures."""

import importlib
import textwrap
import uuid

import httpx
import pytest
from fastapi.testclient import TestClient

from apps.mcp_server.main import create_app
from zeal_config.settings import Settings
from zeal_tools.adapters.zeal.client import ZealClientWrapper

ECHO_TOOL = '''
from zeal_tools.base import ToolDescriptor, ToolMetadata


class EchoTool:
    descriptor = ToolDescriptor(name="{name}", description="Echo the arguments back")
    metadata = ToolMetadata(capabilities=["test.echo"])

    async def execute(self, input_data, ctx=None):
        return {{"echo": input_data, "ctx": ctx}}


tool = EchoTool()
'''


@pytest.fixture
def settings():
    """Settings with a test credential, independent of the local .env file."""
    return Settings(
        _env_file=None,
        ZEAL_API_KEY="test-key",
        ZEAL_PUBLIC_API_API_KEY="",
        LOG_FORMAT="text",
    )


@pytest.fixture
def settings_without_key():
    return Settings(_env_file=None, ZEAL_API_KEY="", ZEAL_PUBLIC_API_API_KEY="", LOG_FORMAT="text")


@pytest.fixture
def tool_package(tmp_path, monkeypatch):
    """Write throwaway tool modules into a fresh package on sys.path.

    Returns a ``write(module, source) -> "package.module"`` helper.
    """
    package = f"tooltest_{uuid.uuid4().hex}"
    root = tmp_path / package
    root.mkdir()
    (root / "__init__.py").write_text("")
    monkeypatch.syspath_prepend(str(tmp_path))

    def write(module: str, source: str) -> str:
        (root / f"{module}.py").write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        return f"{package}.{module}"

    return write


@pytest.fixture
def echo_tool(tool_package):
    """Factory for ``module:tool`` identifiers of an echo tool with the given name."""

    def make(name: str = "echo", module: str | None = None) -> str:
        return tool_package(module or f"echo_{uuid.uuid4().hex[:8]}", ECHO_TOOL.format(name=name))

    return make


@pytest.fixture
def mock_zeal():
    """Zeal client backed by httpx.MockTransport.

    Returns ``(client, calls)``; set ``mock_zeal.response`` to change the reply.
    """
    calls: list[httpx.Request] = []
    state = {"response": httpx.Response(200, json={"ok": True})}

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        reply = state["response"]
        if isinstance(reply, Exception):
            raise reply
        return reply

    client = ZealClientWrapper(
        api_key="test-key",
        rate_limit_per_second=1000,
        transport=httpx.MockTransport(handler),
    )

    class MockZeal:
        def __init__(self):
            self.client = client
            self.calls = calls

        def respond(self, reply):
            state["response"] = reply

    return MockZeal()


@pytest.fixture
def app_client(settings, echo_tool):
    """Test client over an app serving two catalog endpoints and an echo tool."""
    sources = [
        "zeal_tools.adapters.zeal.tools.employees:GET_EMPLOYEES",
        "zeal_tools.adapters.zeal.tools.companies:CREATE_COMPANY",
        echo_tool("echo"),
    ]
    with TestClient(create_app(settings, sources)) as client:
        yield client
