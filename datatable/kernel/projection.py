"""
datatable Kernel — Projection

Pure function: (view, state, data) → Projection
No side effects. No IO. Deterministic: same input → same output, always.

Pipeline, in fixed order:
  hide    — drop hidden columns from what gets rendered
  filter  — keep records matching every filter (against ALL columns, hidden or not)
  sort    — stable ascending sort on the sort column's key, reversed for descending

Unknown column names never raise. They behave like a column whose every
record stringifies to "".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from datatable.kernel.types import Column, DisplayState, Projection, SortOrder, ViewConfig

logger = logging.getLogger(__name__)

_SPACES_RE = re.compile(r" +")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def project(view: ViewConfig, state: DisplayState, data: Iterable[Any]) -> Projection:
    """
    Compute the columns and rows to render.
    The input list is never modified.
    """
    columns = apply_hide(view.columns, state.hidden_columns)
    rows = apply_filter(list(data), view.columns, state.filters)
    rows = apply_sort(rows, view.columns, state.sort_by, state.sort_order)
    return Projection(columns=columns, rows=rows)


def column_lookup(columns: Sequence[Column]) -> dict[str, Column]:
    """
    Name → Column mapping, built fresh from the ordered list.
    With duplicate names the last column wins.
    """
    return {column.name: column for column in columns}


def apply_hide(columns: Sequence[Column], hidden_columns: Iterable[str]) -> list[Column]:
    hidden = set(hidden_columns)
    return [column for column in columns if column.name not in hidden]


def build_filter_pattern(text: str) -> re.Pattern[str]:
    """
    Case-insensitive pattern for a filter box.

    Literal text is escaped; each run of spaces becomes a lazy wildcard,
    so "james k" matches "James K. Polk".
    """
    pieces = _SPACES_RE.split(text)
    return re.compile(".*?".join(re.escape(piece) for piece in pieces), re.IGNORECASE)


def apply_filter(
    rows: Sequence[Any],
    columns: Sequence[Column],
    filters: Iterable[tuple[str, str]],
) -> list[Any]:
    """Keep rows that match every (column, text) pair."""
    lookup = column_lookup(columns)
    checks = [(_stringifier(lookup, name), build_filter_pattern(text)) for name, text in filters]
    if not checks:
        return list(rows)

    return [row for row in rows if all(pattern.search(stringify(row)) for stringify, pattern in checks)]


def apply_sort(
    rows: Sequence[Any],
    columns: Sequence[Column],
    sort_by: str,
    sort_order: SortOrder,
) -> list[Any]:
    """
    Stable ascending sort, then reverse the whole list for descending.
    Ties therefore come out in reverse input order under descending.
    """
    lookup = column_lookup(columns)
    column = lookup.get(sort_by)
    if column is not None and column.sort_key is not None:
        key = column.sort_key
    else:
        key = _stringifier(lookup, sort_by)

    result = sorted(rows, key=key)
    if sort_order == SortOrder.DESCENDING:
        result.reverse()
    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _empty(record: Any) -> str:
    return ""


def _stringifier(lookup: dict[str, Column], name: str) -> Callable[[Any], str]:
    column = lookup.get(name)
    if column is None:
        logger.debug("projection: unknown column %r, using empty string", name)
        return _empty
    return column.stringify
