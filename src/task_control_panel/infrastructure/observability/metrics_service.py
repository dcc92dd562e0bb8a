"""Prometheus metrics declarations for the task control panel.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never task ids.
"""

from prometheus_client import Counter, Gauge

TASK_MUTATIONS_TOTAL = Counter(
    "task_panel_mutations_total",
    "Task list mutations applied in memory",
    ["operation"],
)

PERSISTENCE_FAILURES_TOTAL = Counter(
    "task_panel_persistence_failures_total",
    "Mutations whose file write failed",
    ["operation"],
)

AUTH_FAILURES_TOTAL = Counter(
    "task_panel_auth_failures_total",
    "API requests rejected for a missing or wrong bearer token",
)

TASKS_STORED = Gauge(
    "task_panel_tasks_stored",
    "Tasks currently held by the store",
)
