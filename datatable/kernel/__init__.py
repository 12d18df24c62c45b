"""
datatable Kernel — the pure engine.

Components:
  columns     — int/float/string column constructors
  reducer     — (interaction, state) → state  (pure, deterministic)
  projection  — (view, state, data) → visible columns + filtered/sorted rows
  renderer    — projection → HTML or text (thin glue)

Query helpers (from projection):
  apply_hide, apply_filter, apply_sort, build_filter_pattern
"""

from datatable.kernel.columns import float_column, int_column, string_column
from datatable.kernel.events import make_event, validate_event
from datatable.kernel.projection import (
    apply_filter,
    apply_hide,
    apply_sort,
    build_filter_pattern,
    project,
)
from datatable.kernel.reducer import (
    initial_state,
    reduce,
    replay,
    request_filter,
    request_hide,
    request_sort,
)
from datatable.kernel.renderer import render, render_table, render_text
from datatable.kernel.types import Capability, Column, DisplayState, SortOrder, ViewConfig

__all__ = [
    "int_column",
    "float_column",
    "string_column",
    "make_event",
    "validate_event",
    "initial_state",
    "request_hide",
    "request_sort",
    "request_filter",
    "reduce",
    "replay",
    "project",
    "apply_hide",
    "apply_filter",
    "apply_sort",
    "build_filter_pattern",
    "render",
    "render_table",
    "render_text",
    "Capability",
    "Column",
    "DisplayState",
    "SortOrder",
    "ViewConfig",
]
