"""Command Line Tests."""

from unittest.mock import patch

from apps.mcp_server import cli
from zeal_tools.registry import ToolRegistry


def test_list_tools_prints_names(capsys, settings, echo_tool):
    sources = [echo_tool("alpha"), echo_tool("beta")]

    async def discover(_settings):
        return await ToolRegistry.discover(sources, settings=settings)

    with patch.object(cli, "discover_zeal_tools", discover):
        assert cli.main(["--list-tools"]) == 0

    assert capsys.readouterr().out.splitlines() == ["alpha", "beta"]


def test_serve_runs_uvicorn():
    with patch.object(cli.uvicorn, "run") as run:
        assert cli.main(["--host", "127.0.0.1", "--port", "9001"]) == 0

    run.assert_called_once()
    args, kwargs = run.call_args
    assert args == ("apps.mcp_server.main:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
