"""
datatable Kernel — Renderer

Pure function: (view, state, data, options?) → HTML string (or text string)
No IO. Deterministic: same input → same output, always.

Thin glue over the projection:
- Header cells carry sort/hide buttons when the view enables them
- Each button carries `data-message`: the JSON of view.to_message(next_state),
  i.e. the message the host receives if the control is activated
- Filter inputs carry the column name and current text
- Body cells are column.formatter(record), inserted as-is
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from html import escape as _html_escape
from typing import Any

import chevron

from datatable.kernel.projection import project
from datatable.kernel.reducer import request_hide, request_sort
from datatable.kernel.types import (
    Column,
    DisplayState,
    Projection,
    RenderOptions,
    SortOrder,
    ViewConfig,
)

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

TABLE_TEMPLATE = """<table class="dt-table">
  <thead>
    <tr>
{{#headers}}
      <th class="{{css_class}}" data-column="{{name}}">
        <span class="dt-header-name">{{name}}</span>
{{#sort}}
        <button type="button" class="dt-sort" data-message="{{message}}">{{label}}</button>
{{/sort}}
{{#hide}}
        <button type="button" class="dt-hide" data-message="{{message}}">{{label}}</button>
{{/hide}}
      </th>
{{/headers}}
    </tr>
{{#has_filters}}
    <tr class="dt-filters">
{{/has_filters}}
{{#filter_inputs}}
      <th><input type="search" class="dt-filter" data-column="{{column}}" placeholder="{{label}}" value="{{value}}"></th>
{{/filter_inputs}}
{{#has_filters}}
    </tr>
{{/has_filters}}
  </thead>
  <tbody>
{{#rows}}
    <tr>{{#cells}}<td>{{{html}}}</td>{{/cells}}</tr>
{{/rows}}
{{^rows}}
    <tr class="dt-empty"><td colspan="{{colspan}}">{{empty_text}}</td></tr>
{{/rows}}
  </tbody>
</table>"""

PAGE_CSS = """
body { font-family: system-ui, sans-serif; margin: 32px; color: #1a1a1a; }
.dt-table { border-collapse: collapse; width: 100%; }
.dt-table th, .dt-table td { padding: 6px 10px; border-bottom: 1px solid #e2e2e2; text-align: left; }
.dt-sorted-asc .dt-header-name::after { content: " \\25B2"; }
.dt-sorted-desc .dt-header-name::after { content: " \\25BC"; }
.dt-empty td { color: #888; font-style: italic; }
"""

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render(
    view: ViewConfig,
    state: DisplayState,
    data: Iterable[Any],
    options: RenderOptions | None = None,
) -> str:
    """
    Render a complete HTML page (or a text grid) for one table.
    Pure function. No side effects. No IO.
    """
    opts = options or RenderOptions()

    if opts.channel == "text":
        return render_text(view, state, data)

    title = escape(opts.title or "datatable")
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1">',
        f"  <title>{title}</title>",
        "  <style>",
        PAGE_CSS,
        "  </style>",
        "</head>",
        "<body>",
        f"  <h1>{title}</h1>",
        render_table(view, state, data, opts),
        "</body>",
        "</html>",
    ]
    return "\n".join(parts)


def render_table(
    view: ViewConfig,
    state: DisplayState,
    data: Iterable[Any],
    options: RenderOptions | None = None,
) -> str:
    """Render the <table> fragment for the projected rows and visible columns."""
    opts = options or RenderOptions()
    projection = project(view, state, data)
    context = _build_table_context(view, state, projection, opts)
    return chevron.render(TABLE_TEMPLATE, context)


def render_text(view: ViewConfig, state: DisplayState, data: Iterable[Any]) -> str:
    """Render the projection as an aligned plain-text grid (terminal, logs)."""
    projection = project(view, state, data)
    if not projection.columns:
        return ""

    header = [column.name for column in projection.columns]
    body = [[column.stringify(row) for column in projection.columns] for row in projection.rows]
    widths = [max(len(cell) for cell in col) for col in zip(header, *body)]

    def _line(cells: list[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [_line(header), _line(["-" * width for width in widths])]
    lines.extend(_line(cells) for cells in body)
    return "\n".join(lines)


def encode_message(message: Any) -> str:
    """Serialize a host message for a data attribute. Deterministic."""
    return json.dumps(message, sort_keys=True, ensure_ascii=False, default=_json_default)


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def _build_table_context(
    view: ViewConfig,
    state: DisplayState,
    projection: Projection,
    opts: RenderOptions,
) -> dict[str, Any]:
    headers = [_header_context(view, state, column) for column in projection.columns]

    filter_inputs: list[dict[str, Any]] = []
    if view.can_filter.enabled:
        current = dict(state.filters)
        filter_inputs = [
            {"column": column.name, "label": view.can_filter.label, "value": current.get(column.name, "")}
            for column in projection.columns
        ]

    rows = [
        {"cells": [{"html": column.formatter(row)} for column in projection.columns]}
        for row in projection.rows
    ]

    return {
        "headers": headers,
        "filter_inputs": filter_inputs,
        "has_filters": bool(filter_inputs),
        "rows": rows,
        "colspan": str(max(len(projection.columns), 1)),
        "empty_text": opts.empty_text,
    }


def _header_context(view: ViewConfig, state: DisplayState, column: Column) -> dict[str, Any]:
    css_class = "dt-header"
    if column.name == state.sort_by:
        suffix = "desc" if state.sort_order == SortOrder.DESCENDING else "asc"
        css_class += f" dt-sorted-{suffix}"

    ctx: dict[str, Any] = {"name": column.name, "css_class": css_class, "sort": None, "hide": None}

    if view.can_sort.enabled:
        ctx["sort"] = {
            "label": view.can_sort.label,
            "message": encode_message(view.to_message(request_sort(column.name, state))),
        }
    if view.can_hide.enabled:
        ctx["hide"] = {
            "label": view.can_hide.label,
            "message": encode_message(view.to_message(request_hide(column.name, state))),
        }

    return ctx


def _json_default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return str(value)
