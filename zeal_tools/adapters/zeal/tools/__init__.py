"""Zeal endpoint catalog.

One module per resource group. Each module-level ``Endpoint`` constant is a
tool; ``zeal_tools.adapters.zeal.paths.TOOL_PATHS`` lists them for discovery.
"""
