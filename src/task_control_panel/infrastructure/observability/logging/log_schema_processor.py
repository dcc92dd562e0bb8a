"""Structlog processor that turns a flat event dict into the panel log record.

The record keeps the ids and message at the top level and groups the prefixed
keys the panel emits (context_*, error_*, processing_*) into their own blocks.
Whatever is left over lands under "extra".
"""

from __future__ import annotations

import os
from typing import Any

from opentelemetry import trace

BLOCK_PREFIXES = ("context", "error", "processing")


def _pop_block(event_dict: dict[str, Any], prefix: str) -> dict[str, Any]:
    marker = f"{prefix}_"
    keys = [key for key in event_dict if key.startswith(marker)]
    return {key[len(marker):]: event_dict.pop(key) for key in keys}


def _duration_ms(value: Any) -> float | None:
    try:
        return round(float(value), 2)
    except (TypeError, ValueError):
        return None


def _current_span_ids() -> dict[str, str]:
    span = trace.get_current_span()
    if not span.is_recording():
        return {}
    ctx = span.get_span_context()
    return {"trace_id": format(ctx.trace_id, "032x"), "span_id": format(ctx.span_id, "016x")}


def log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.update(_current_span_ids())
    record: dict[str, Any] = {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "task-control-panel"),
        "message": event_dict.pop("event", ""),
    }
    for key in ("correlation_id", "trace_id", "span_id"):
        if key in event_dict:
            record[key] = event_dict.pop(key)

    for prefix in BLOCK_PREFIXES:
        block = _pop_block(event_dict, prefix)
        if block:
            record[prefix] = block

    if "duration_ms" in record.get("processing", {}):
        record["processing"]["duration_ms"] = _duration_ms(record["processing"]["duration_ms"])

    if event_dict:
        record["extra"] = dict(event_dict)
    return record
