"""
datatable Kernel — Reducer

Pure functions: (interaction, state) → state
No side effects. No IO. Deterministic.

The three transitions are usable directly by a host. `reduce` and `replay`
wrap them for hosts that keep interactions as serialized events.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from datatable.kernel.events import validate_event
from datatable.kernel.types import DisplayState, Event, SortOrder, TransitionResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def initial_state(sort_by: str, sort_order: SortOrder = SortOrder.ASCENDING) -> DisplayState:
    """The state a host starts a table with: no filters, nothing hidden."""
    return DisplayState(sort_by=sort_by, sort_order=sort_order)


def request_hide(column_name: str, state: DisplayState) -> DisplayState:
    """
    Hide a column by appending its name.
    No de-duplication: hiding twice appends twice. Membership is what counts.
    """
    return replace(state, hidden_columns=state.hidden_columns + (column_name,))


def request_sort(column_name: str, state: DisplayState) -> DisplayState:
    """Same column flips the order; a different column sorts ascending."""
    if column_name == state.sort_by:
        return replace(state, sort_order=state.sort_order.flipped())
    return replace(state, sort_by=column_name, sort_order=SortOrder.ASCENDING)


def request_filter(column_name: str, text: str, state: DisplayState) -> DisplayState:
    """
    Set the filter text for one column.
    Filters are folded into a mapping (later duplicates win), updated, and flattened back.
    """
    filters = dict(state.filters)
    filters[column_name] = text
    return replace(state, filters=tuple(filters.items()))


def reduce(state: DisplayState, event: Event) -> TransitionResult:
    """
    Apply one interaction event to the current state.
    Never raises. Malformed events leave the state untouched with applied=False.
    """
    errors = validate_event(event.type, event.payload)
    if errors:
        code = "UNKNOWN_EVENT" if event.type not in _HANDLERS else "INVALID_PAYLOAD"
        logger.warning("reducer: rejected %s: %s", event.type, "; ".join(errors))
        return _reject(state, code, "; ".join(errors))

    handler = _HANDLERS[event.type]
    return _ok(handler(state, event.payload))


def replay(events: list[Event], state: DisplayState) -> DisplayState:
    """
    Fold a sequence of events over a starting state, skipping rejected ones.
    replay([e1, e2], s) == reduce(reduce(s, e1).state, e2).state
    """
    for event in events:
        result = reduce(state, event)
        if result.applied:
            state = result.state
    return state


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _reject(state: DisplayState, code: str, msg: str) -> TransitionResult:
    return TransitionResult(state=state, applied=False, error=f"{code}: {msg}")


def _ok(state: DisplayState) -> TransitionResult:
    return TransitionResult(state=state, applied=True)


def _handle_sort(state: DisplayState, p: dict) -> DisplayState:
    return request_sort(p["column"], state)


def _handle_filter(state: DisplayState, p: dict) -> DisplayState:
    return request_filter(p["column"], p["text"], state)


def _handle_hide(state: DisplayState, p: dict) -> DisplayState:
    return request_hide(p["column"], state)


_HANDLERS = {
    "table.sort": _handle_sort,
    "table.filter": _handle_filter,
    "table.hide": _handle_hide,
}
