"""
datatable Kernel — Interaction Events

Factory and structural validation for table interactions.
Used by hosts that route clicks and keystrokes through the reducer as data,
and by tests to build events concisely.

Validation is structural (well-formed?) not semantic (does the column exist?).
Unknown column names are legal; the projection degrades them to empty strings.
"""

from __future__ import annotations

from typing import Any

from datatable.kernel.types import EVENT_TYPES, Event


def make_event(type: str, **payload: Any) -> Event:
    """
    Build an Event from a type and keyword payload.

        make_event("table.sort", column="Year")
        make_event("table.filter", column="Name", text="john")
    """
    return Event(type=type, payload=payload)


def validate_event(type: str, payload: dict[str, Any]) -> list[str]:
    """
    Validate an event's type and payload structure.
    Returns a list of error strings. Empty list = valid.
    """
    errors: list[str] = []

    if type not in EVENT_TYPES:
        errors.append(f"Unknown event type: {type}")
        return errors

    if not isinstance(payload, dict):
        errors.append("Payload must be a non-null object")
        return errors

    validator = _VALIDATORS.get(type)
    if validator:
        errors.extend(validator(payload))

    return errors


# ---------------------------------------------------------------------------
# Per-event validators
# ---------------------------------------------------------------------------


def _require_column(type: str, p: dict) -> list[str]:
    if "column" not in p:
        return [f"{type} requires 'column'"]
    if not isinstance(p["column"], str):
        return ["'column' must be a string"]
    return []


def _validate_sort(p: dict) -> list[str]:
    return _require_column("table.sort", p)


def _validate_hide(p: dict) -> list[str]:
    return _require_column("table.hide", p)


def _validate_filter(p: dict) -> list[str]:
    errors = _require_column("table.filter", p)
    if "text" not in p:
        errors.append("table.filter requires 'text'")
    elif not isinstance(p["text"], str):
        errors.append("'text' must be a string")
    return errors


_VALIDATORS: dict[str, Any] = {
    "table.sort": _validate_sort,
    "table.filter": _validate_filter,
    "table.hide": _validate_hide,
}
