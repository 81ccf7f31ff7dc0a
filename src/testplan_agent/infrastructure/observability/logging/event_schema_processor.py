"""Structlog processor that reshapes flat event dicts into a nested schema.

All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, environment, ids."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "testplan-agent"),
        "environment": os.environ.get("APP_ENV", "local"),
        "ticket_id": event_dict.pop("ticket_id", None),
        "message": event_dict.pop("event", ""),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "status_code": event_dict.pop("status_code", None),
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract execution context block."""
    source = event_dict.pop("source_system", None)
    event_type = event_dict.pop("event_type", None)
    if source is None and event_type is None:
        return None
    return {
        "source_system": source,
        "event_type": event_type,
    }


def event_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    # Renderers expect the message under "event".
    result = _build_root_fields(event_dict)
    result["event"] = result.pop("message")

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    # Underscore keys belong to structlog's stdlib bridge and must stay top-level.
    for key in [k for k in event_dict if k.startswith("_")]:
        result[key] = event_dict.pop(key)

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
