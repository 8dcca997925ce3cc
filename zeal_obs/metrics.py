"""
Prometheus Metrics Registration.

Custom metrics for tool discovery and execution.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

tool_executions_total = Counter(
    "tool_executions_total",
    "Total tool executions",
    ["tool_name", "status"],  # success, error, dry_run
)

tool_load_failures_total = Counter(
    "tool_load_failures_total",
    "Tool identifiers that failed to load during discovery",
)

# ============================================================================
# GAUGES
# ============================================================================

tools_registered = Gauge(
    "tools_registered",
    "Number of tools in the most recently discovered registry",
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_execution_duration = Histogram(
    "tool_execution_duration_seconds",
    "Tool execution duration",
    ["tool_name"],
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)
