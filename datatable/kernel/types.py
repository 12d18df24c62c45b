"""
datatable Kernel — Shared Types

Data classes used across columns, reducer, projection, and renderer.
These are the contracts that bind the kernel together.

- `Column` is how a record is stringified and displayed
- `DisplayState` is the only value that changes; every transition returns a new one
- `ViewConfig` is fixed per table instance and owned by the host
- `Projection` is what the projection step hands to the renderer

Records are opaque. The kernel only touches them through the functions a
column carries, so structs, tuples and lists all work the same way.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

R = TypeVar("R")
M = TypeVar("M")

# ---------------------------------------------------------------------------
# Interaction type registry
# ---------------------------------------------------------------------------

EVENT_TYPES: set[str] = {
    "table.sort",
    "table.filter",
    "table.hide",
}


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> SortOrder:
        if self == SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


@dataclass(frozen=True)
class Column(Generic[R]):
    """
    One column of a table.

    `name` is the only handle used for sort/filter/hide.
    `stringify` is the comparable and searchable projection of a record.
    `formatter` turns a record into an HTML fragment for the cell.
    `sort_key` is an opt-in replacement for stringify when sorting (numeric columns).
    """

    name: str
    stringify: Callable[[R], str]
    formatter: Callable[[R], str]
    sort_key: Callable[[R], Any] | None = None


@dataclass(frozen=True)
class Capability:
    """An (enabled, label) pair. Presentational only."""

    enabled: bool = True
    label: str = ""


@dataclass(frozen=True)
class DisplayState:
    """
    The table's display state: sort column/order, active filters, hidden columns.

    Immutable. Transitions in the reducer build new values.
    `sort_by` and the filter keys may name columns that do not exist.
    """

    sort_by: str
    sort_order: SortOrder = SortOrder.ASCENDING
    filters: tuple[tuple[str, str], ...] = ()
    hidden_columns: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "sort_by": self.sort_by,
            "sort_order": self.sort_order.value,
            "filters": [[name, text] for name, text in self.filters],
            "hidden_columns": list(self.hidden_columns),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DisplayState:
        return cls(
            sort_by=d.get("sort_by", ""),
            sort_order=SortOrder(d.get("sort_order", SortOrder.ASCENDING.value)),
            filters=tuple((name, text) for name, text in d.get("filters", [])),
            hidden_columns=tuple(d.get("hidden_columns", [])),
        )


def _state_to_dict(state: DisplayState) -> dict[str, Any]:
    return state.to_dict()


@dataclass(frozen=True)
class ViewConfig(Generic[R, M]):
    """
    Per-table configuration, supplied once by the host.

    `to_message` maps a new DisplayState to whatever the host's update loop
    understands. The renderer attaches its output to interactive controls.
    """

    columns: Sequence[Column[R]]
    can_hide: Capability = field(default_factory=lambda: Capability(True, "Hide"))
    can_sort: Capability = field(default_factory=lambda: Capability(True, "Sort"))
    can_filter: Capability = field(default_factory=lambda: Capability(True, "Filter"))
    to_message: Callable[[DisplayState], M] = _state_to_dict


@dataclass(frozen=True)
class Projection(Generic[R]):
    """Visible columns paired with the filtered and sorted rows."""

    columns: list[Column[R]]
    rows: list[R]


@dataclass(frozen=True)
class Event:
    """
    A user interaction (header click, filter keystroke) in serializable form.
    The reducer reads only `type` and `payload`.
    """

    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": dict(self.payload)}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Event:
        return cls(type=d["type"], payload=d.get("payload", {}))


@dataclass
class TransitionResult:
    """
    Result of applying one event to a display state.
    The reducer never raises; it always returns one of these.
    """

    state: DisplayState
    applied: bool
    error: str | None = None


@dataclass
class RenderOptions:
    """Options controlling what the renderer includes in output."""

    channel: str = "html"  # "html" or "text"
    title: str | None = None
    empty_text: str = "No matching rows."
