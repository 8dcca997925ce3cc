"""Tool Registry & Discovery Tests."""

import os
from unittest.mock import patch

import pytest

from zeal_tools.base import ToolDescriptor, ToolModule
from zeal_tools.registry import (
    ToolNotFoundError,
    ToolRegistry,
    deduplicate_tool_names,
    discover_tools,
)

SLOW_FACTORY = '''
import asyncio

from zeal_tools.base import ToolDescriptor


class SlowTool:
    descriptor = ToolDescriptor(name="{name}", description="Loads slowly")

    async def execute(self, input_data, ctx=None):
        return {{"slow": True}}


async def tool(settings):
    await asyncio.sleep({delay})
    return SlowTool()
'''

BROKEN_IMPORT = '''
raise RuntimeError("module exploded on import")
'''

NAMELESS_TOOL = '''
class NamelessTool:
    descriptor = {"description": "No name given"}

    async def execute(self, input_data, ctx=None):
        return {}


tool = NamelessTool()
'''

SYNC_FACTORY = '''
from zeal_tools.base import ToolDescriptor


class ConfiguredTool:
    def __init__(self, settings):
        self.descriptor = ToolDescriptor(name="configured", description=settings.SERVER_NAME)

    async def execute(self, input_data, ctx=None):
        return {"server": self.descriptor.description}


def make_tool(settings):
    return ConfiguredTool(settings)
'''

RAISING_TOOL = '''
from zeal_tools.base import ToolDescriptor


class RaisingTool:
    descriptor = ToolDescriptor(name="raiser", description="Always raises")

    async def execute(self, input_data, ctx=None):
        raise ValueError("kaboom")


tool = RaisingTool()
'''

HANGING_IMPORT = '''
import time

time.sleep(3)
'''


async def _noop(input_data, ctx=None):
    return {}


def _module(name, source="test:tool"):
    return ToolModule(
        operation=_noop,
        descriptor=ToolDescriptor(name=name, description=""),
        source_path=source,
    )


# ============================================================================
# DEDUPLICATION
# ============================================================================


def test_deduplicate_renames_repeats_in_order():
    modules = [_module("a"), _module("b"), _module("a"), _module("a")]

    result = deduplicate_tool_names(modules)

    assert [m.name for m in result] == ["a", "b", "a_2", "a_3"]


def test_deduplicate_leaves_unique_names_alone():
    modules = [_module("foo"), _module("bar"), _module("baz")]

    result = deduplicate_tool_names(modules)

    assert [m.name for m in result] == ["foo", "bar", "baz"]
    assert result == modules


def test_deduplicate_second_of_two():
    result = deduplicate_tool_names([_module("foo"), _module("foo"), _module("bar")])

    assert [m.name for m in result] == ["foo", "foo_2", "bar"]


def test_deduplicate_passes_nameless_through_uncounted():
    modules = [_module(None), _module("a"), _module(None), _module("a")]

    result = deduplicate_tool_names(modules)

    assert [m.name for m in result] == [None, "a", None, "a_2"]


def test_deduplicate_keeps_source_path():
    result = deduplicate_tool_names([_module("a", "x:one"), _module("a", "x:two")])

    assert result[1].source_path == "x:two"
    assert result[1].descriptor.description == ""


# ============================================================================
# DISCOVERY
# ============================================================================


@pytest.mark.asyncio
async def test_discovery_preserves_source_order(settings, tool_package, echo_tool):
    """A slow first identifier still comes first."""
    slow = tool_package("slow", SLOW_FACTORY.format(name="slow", delay=0.2))
    fast = echo_tool("fast")

    modules = await discover_tools([slow, fast], settings=settings)

    assert [m.name for m in modules] == ["slow", "fast"]


@pytest.mark.asyncio
async def test_discovery_isolates_failures(settings, tool_package, echo_tool):
    broken = tool_package("broken", BROKEN_IMPORT)
    sources = [
        echo_tool("first"),
        broken,
        "zeal_tools.no_such_module:tool",
        f"{echo_tool('x')}:missing_attribute",
        echo_tool("last"),
    ]

    modules = await discover_tools(sources, settings=settings)

    assert [m.name for m in modules] == ["first", "last"]


@pytest.mark.asyncio
async def test_discovery_times_out_slow_loads(settings, tool_package, echo_tool):
    slow = tool_package("very_slow", SLOW_FACTORY.format(name="very_slow", delay=5))

    modules = await discover_tools([slow, echo_tool("quick")], settings=settings, load_timeout=0.1)

    assert [m.name for m in modules] == ["quick"]


@pytest.mark.asyncio
async def test_hung_imports_do_not_starve_other_loads(settings, tool_package, echo_tool):
    """More hung imports than the default thread pool has workers."""
    default_pool_size = min(32, (os.cpu_count() or 1) + 4)
    hung = [tool_package(f"hung_{i}", HANGING_IMPORT) for i in range(default_pool_size + 1)]

    modules = await discover_tools(
        [*hung, echo_tool("healthy")], settings=settings, load_timeout=1.0
    )

    assert [m.name for m in modules] == ["healthy"]


@pytest.mark.asyncio
async def test_discovery_deduplicates_names(settings, echo_tool):
    sources = [echo_tool("dup"), echo_tool("dup"), echo_tool("dup")]

    modules = await discover_tools(sources, settings=settings)

    assert [m.name for m in modules] == ["dup", "dup_2", "dup_3"]
    assert [m.source_path for m in modules] == sources


@pytest.mark.asyncio
async def test_renamed_duplicates_stay_invocable(settings, echo_tool):
    first = echo_tool("get_employees")
    second = echo_tool("get_employees")
    registry = await ToolRegistry.discover([first, second], settings=settings)

    assert registry.names() == ["get_employees", "get_employees_2"]
    assert await registry.invoke("get_employees", {"n": 1}) == {"echo": {"n": 1}, "ctx": None}
    assert await registry.invoke("get_employees_2", {"n": 2}) == {"echo": {"n": 2}, "ctx": None}
    assert registry.get("get_employees_2").source_path == second


@pytest.mark.asyncio
async def test_discovery_keeps_nameless_tools(settings, tool_package, echo_tool):
    nameless = tool_package("nameless", NAMELESS_TOOL)

    registry = await ToolRegistry.discover([nameless, echo_tool("named")], settings=settings)

    assert len(registry) == 2
    assert registry.names() == ["named"]


@pytest.mark.asyncio
async def test_discovery_calls_factories_with_settings(settings, tool_package):
    factory = tool_package("factory", SYNC_FACTORY)

    registry = await ToolRegistry.discover([f"{factory}:make_tool"], settings=settings)

    assert await registry.invoke("configured", {}) == {"server": settings.SERVER_NAME}


@pytest.mark.asyncio
async def test_discovery_builds_endpoint_tools(settings):
    registry = await ToolRegistry.discover(
        ["zeal_tools.adapters.zeal.tools.employees:GET_EMPLOYEES"], settings=settings
    )

    module = registry.get("get_employees")
    assert module is not None
    assert module.source_path == "zeal_tools.adapters.zeal.tools.employees:GET_EMPLOYEES"
    assert "companyID" in module.descriptor.parameters["required"]


@pytest.mark.asyncio
async def test_discovery_of_nothing_is_empty(settings):
    registry = await ToolRegistry.discover([], settings=settings)

    assert len(registry) == 0
    assert registry.names() == []


# ============================================================================
# REGISTRY
# ============================================================================


@pytest.mark.asyncio
async def test_invoke_passes_arguments_and_context(settings, echo_tool):
    registry = await ToolRegistry.discover([echo_tool("echo")], settings=settings)

    result = await registry.invoke("echo", {"a": 1}, {"request_id": "r-1"})

    assert result == {"echo": {"a": 1}, "ctx": {"request_id": "r-1"}}


@pytest.mark.asyncio
async def test_invoke_unknown_tool_raises(settings, echo_tool):
    registry = await ToolRegistry.discover([echo_tool("echo")], settings=settings)

    with pytest.raises(ToolNotFoundError):
        await registry.invoke("nope", {})


@pytest.mark.asyncio
async def test_invoke_turns_tool_exceptions_into_error_values(settings, tool_package):
    raiser = tool_package("raiser", RAISING_TOOL)
    registry = await ToolRegistry.discover([raiser], settings=settings)

    result = await registry.invoke("raiser", {})

    assert "kaboom" in result["error"]


@pytest.mark.asyncio
async def test_filter_by_capability(settings, echo_tool):
    """Test capability-based filtering."""
    registry = await ToolRegistry.discover(
        [echo_tool("echo"), "zeal_tools.adapters.zeal.tools.employees:GET_EMPLOYEES"],
        settings=settings,
    )

    assert [m.name for m in registry.filter_by_capability("test.echo")] == ["echo"]
    assert [m.name for m in registry.filter_by_capability("zeal.read")] == ["get_employees"]
    assert "echo" in registry
    assert "missing" not in registry


def test_shadowed_name_is_logged():
    """A rename can collide with an original name; the first one wins."""
    modules = deduplicate_tool_names(
        [_module("foo", "x:one"), _module("foo", "x:two"), _module("foo_2", "x:three")]
    )

    with patch("zeal_tools.registry.logger") as logger:
        registry = ToolRegistry(modules)

    assert [m.name for m in modules] == ["foo", "foo_2", "foo_2"]
    assert registry.get("foo_2").source_path == "x:two"
    logger.warning.assert_called_once_with(
        "tool_name_shadowed", name="foo_2", source="x:three", kept_source="x:two"
    )
