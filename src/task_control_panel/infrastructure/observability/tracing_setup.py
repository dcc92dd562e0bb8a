"""OpenTelemetry tracing configuration for the task control panel.

Provides:
- configure_tracing(): one-shot TracerProvider setup with BatchSpanProcessor
- get_tracer(): returns a named Tracer instance
- trace_operation(): decorator wrapping a sync function in a span
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

_CONFIGURED = False

P = ParamSpec("P")
R = TypeVar("R")


def configure_tracing() -> None:
    """One-shot OTel TracerProvider setup. Safe to call multiple times."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    resource = Resource.create(
        {
            "service.name": os.environ.get("SERVICE_NAME", "task-control-panel"),
            "deployment.environment": os.environ.get("APP_ENV", "local"),
        }
    )
    provider = TracerProvider(resource=resource)
    if os.environ.get("OTEL_CONSOLE_EXPORT", "").lower() in ("1", "true", "yes"):
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def get_tracer(name: str = "task-control-panel") -> trace.Tracer:
    return trace.get_tracer(name)


def trace_operation(span_name: str, attributes: dict[str, str] | None = None) -> Callable:
    """Decorator that wraps a sync function in an OTel span.

    Usage:
        @trace_operation("task_file.save")
        def save(self, tasks): ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with get_tracer().start_as_current_span(span_name) as span:
                if attributes:
                    for k, v in attributes.items():
                        span.set_attribute(k, v)
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator
