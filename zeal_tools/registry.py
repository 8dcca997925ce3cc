"""Tool Registry & Discovery.

Turns an ordered list of tool identifiers into a deduplicated, read-only
registry. Identifiers use entry-point syntax, ``"package.module:attribute"``;
without an attribute part the module's ``tool`` attribute is used.

The attribute may be:
- a tool instance (has ``descriptor`` and ``execute``)
- an object with ``build_tool(settings)`` (e.g. a Zeal ``Endpoint``)
- a factory ``factory(settings)``, sync or async, returning a tool

Every identifier is loaded as its own task. A failure in one load is logged
and that identifier is left out; it never aborts the others.
"""

import asyncio
import importlib
import inspect
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any

from zeal_config.settings import Settings
from zeal_obs.logging import get_logger
from zeal_obs.metrics import tool_load_failures_total, tools_registered
from zeal_tools.base import ToolDescriptor, ToolMetadata, ToolModule

logger = get_logger(__name__)

DEFAULT_ATTRIBUTE = "tool"


class ToolLoadError(Exception):
    """Identifier does not resolve to a usable tool."""

    pass


class ToolNotFoundError(LookupError):
    """No registered tool has the requested name."""

    pass


# ============================================================================
# LOADING
# ============================================================================


def _split_identifier(identifier: str) -> tuple[str, str]:
    module_name, _, attribute = identifier.partition(":")
    if not module_name:
        raise ToolLoadError(f"Invalid tool identifier: {identifier!r}")
    return module_name, attribute or DEFAULT_ATTRIBUTE


def _is_tool(target: Any) -> bool:
    return (
        not isinstance(target, type)
        and hasattr(target, "descriptor")
        and callable(getattr(target, "execute", None))
    )


async def _build_tool(target: Any, settings: Settings) -> Any:
    if hasattr(target, "build_tool"):
        tool = target.build_tool(settings)
    elif _is_tool(target):
        return target
    elif callable(target):
        tool = target(settings)
    else:
        raise ToolLoadError(f"{type(target).__name__} is not a tool, tool factory or endpoint")

    if inspect.isawaitable(tool):
        tool = await tool
    if not _is_tool(tool):
        raise ToolLoadError(f"Factory returned {type(tool).__name__}, not a tool")
    return tool


def _to_module(tool: Any, identifier: str) -> ToolModule:
    descriptor = tool.descriptor
    if isinstance(descriptor, dict):
        descriptor = ToolDescriptor.model_validate(descriptor)
    elif not isinstance(descriptor, ToolDescriptor):
        raise ToolLoadError(f"Unsupported descriptor type {type(descriptor).__name__}")

    return ToolModule(
        operation=tool.execute,
        descriptor=descriptor,
        metadata=getattr(tool, "metadata", None) or ToolMetadata(),
        source_path=identifier,
    )


async def load_tool(
    identifier: str, settings: Settings, executor: Executor | None = None
) -> ToolModule:
    """Load one identifier into a ToolModule.

    The module import runs on ``executor`` (the loop default when None) so
    slow module top-level code does not stall the loop.

    Raises:
        ToolLoadError: identifier resolves to something that is not a tool
        Exception: anything the module raises while importing
    """
    module_name, attribute = _split_identifier(identifier)
    loop = asyncio.get_running_loop()
    module = await loop.run_in_executor(executor, importlib.import_module, module_name)

    try:
        target = getattr(module, attribute)
    except AttributeError:
        raise ToolLoadError(f"Module {module_name!r} has no attribute {attribute!r}") from None

    tool = await _build_tool(target, settings)
    return _to_module(tool, identifier)


async def _load_isolated(
    identifier: str, settings: Settings, timeout: float, executor: Executor
) -> ToolModule | None:
    try:
        return await asyncio.wait_for(
            load_tool(identifier, settings, executor), timeout=timeout
        )
    except Exception as e:
        logger.error(
            "tool_load_failed",
            source=identifier,
            error=str(e) or repr(e),
            error_type=type(e).__name__,
        )
        tool_load_failures_total.inc()
        return None


# ============================================================================
# DEDUPLICATION
# ============================================================================


def deduplicate_tool_names(modules: Iterable[ToolModule]) -> list[ToolModule]:
    """Rename repeated descriptor names to ``<name>_<n>``.

    The first occurrence keeps its name; the n-th occurrence becomes
    ``<name>_<n>``. Modules without a name are passed through and not counted.
    """
    name_counts: dict[str, int] = {}
    result = []

    for module in modules:
        name = module.name
        if not name:
            result.append(module)
            continue

        name_counts[name] = name_counts.get(name, 0) + 1
        count = name_counts[name]

        if count > 1:
            new_name = f"{name}_{count}"
            logger.warning(
                "tool_renamed", source=module.source_path, name=name, new_name=new_name
            )
            module = module.renamed(new_name)

        result.append(module)

    return result


# ============================================================================
# DISCOVERY
# ============================================================================


async def discover_tools(
    sources: Sequence[str],
    settings: Settings | None = None,
    load_timeout: float | None = None,
) -> list[ToolModule]:
    """Load every identifier concurrently and return the deduplicated successes.

    Output order follows ``sources``, not load completion order.
    """
    settings = settings or Settings()
    timeout = load_timeout if load_timeout is not None else settings.TOOL_LOAD_TIMEOUT_SECONDS
    sources = list(sources)

    # One import thread per identifier
    executor = ThreadPoolExecutor(
        max_workers=max(len(sources), 1), thread_name_prefix="tool-load"
    )
    try:
        results = await asyncio.gather(
            *(_load_isolated(identifier, settings, timeout, executor) for identifier in sources)
        )
    finally:
        # Hung imports keep running; do not wait for them
        executor.shutdown(wait=False)

    loaded = [module for module in results if module is not None]
    modules = deduplicate_tool_names(loaded)

    logger.info(
        "tools_discovered",
        requested=len(sources),
        loaded=len(modules),
        failed=len(sources) - len(loaded),
    )
    tools_registered.set(len(modules))
    return modules


# ============================================================================
# REGISTRY
# ============================================================================


class ToolRegistry:
    """Ordered, read-only collection of discovered tools."""

    def __init__(self, modules: Iterable[ToolModule] = ()):
        self._modules: tuple[ToolModule, ...] = tuple(modules)
        self._by_name: dict[str, ToolModule] = {}
        for module in self._modules:
            if not module.name:
                continue
            existing = self._by_name.get(module.name)
            if existing is None:
                self._by_name[module.name] = module
            else:
                # e.g. "foo", "foo", "foo_2": the renamed "foo_2" collides with the original
                logger.warning(
                    "tool_name_shadowed",
                    name=module.name,
                    source=module.source_path,
                    kept_source=existing.source_path,
                )

    @classmethod
    async def discover(
        cls,
        sources: Sequence[str],
        settings: Settings | None = None,
        load_timeout: float | None = None,
    ) -> "ToolRegistry":
        """Run discovery and wrap the result."""
        return cls(await discover_tools(sources, settings=settings, load_timeout=load_timeout))

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[ToolModule]:
        return iter(self._modules)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> ToolModule | None:
        """Get tool by name."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        """Names of all invocable tools, in registry order."""
        return [m.name for m in self._modules if m.name]

    def descriptors(self) -> list[ToolDescriptor]:
        """Descriptors of all invocable tools, in registry order."""
        return [m.descriptor for m in self._modules if m.name]

    def filter_by_capability(self, capability: str) -> list[ToolModule]:
        """Filter tools by capability tag."""
        return [m for m in self._modules if capability in m.metadata.capabilities]

    async def invoke(
        self,
        name: str,
        input_data: dict[str, Any] | None = None,
        ctx: dict[str, Any] | None = None,
    ) -> Any:
        """Invoke a tool by name.

        Raises:
            ToolNotFoundError: no tool with that name
        """
        module = self.get(name)
        if module is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")

        input_data = input_data or {}
        try:
            if ctx is None:
                return await module.operation(input_data)
            return await module.operation(input_data, ctx)
        except Exception as e:
            # Zeal endpoint tools never raise; tools loaded from elsewhere might
            logger.exception("tool_raised", tool=name, source=module.source_path)
            return {"error": f"Tool {name} failed: {e}"}
