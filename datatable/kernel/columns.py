"""
datatable Kernel — Column Model

Three constructors, one per value type, all producing the same Column shape.

Every column is compared and searched through its stringify function, so the
projection never branches on value type. Numbers therefore sort as text
("10" before "2") unless a column opts in with numeric=True.
"""

from __future__ import annotations

from collections.abc import Callable
from html import escape as _html_escape
from typing import Any

from datatable.kernel.types import Column


def text_formatter(stringify: Callable[[Any], str]) -> Callable[[Any], str]:
    """Default cell formatter: the stringified value as escaped plain text."""

    def _format(record: Any) -> str:
        return _html_escape(stringify(record), quote=True)

    return _format


def int_column(
    name: str,
    extract: Callable[[Any], int],
    formatter: Callable[[Any], str] | None = None,
    *,
    numeric: bool = False,
) -> Column:
    def stringify(record: Any) -> str:
        return str(int(extract(record)))

    return _build(name, stringify, formatter, extract if numeric else None)


def float_column(
    name: str,
    extract: Callable[[Any], float],
    formatter: Callable[[Any], str] | None = None,
    *,
    numeric: bool = False,
) -> Column:
    # str() on a float is the shortest round-trip repr, independent of locale
    def stringify(record: Any) -> str:
        return str(float(extract(record)))

    return _build(name, stringify, formatter, extract if numeric else None)


def string_column(
    name: str,
    extract: Callable[[Any], str],
    formatter: Callable[[Any], str] | None = None,
) -> Column:
    return _build(name, extract, formatter, None)


def _build(
    name: str,
    stringify: Callable[[Any], str],
    formatter: Callable[[Any], str] | None,
    sort_key: Callable[[Any], Any] | None,
) -> Column:
    return Column(
        name=name,
        stringify=stringify,
        formatter=formatter if formatter is not None else text_formatter(stringify),
        sort_key=sort_key,
    )
