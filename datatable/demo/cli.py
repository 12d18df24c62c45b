"""
datatable CLI — render a table to HTML or text from the command line.

Examples:
  datatable --sort Year --filter State=virginia
  datatable --shape tuple --sort Year --sort Year --hide City --format text
  datatable --data inventory.json --output inventory.html

Repeating --sort on the same column flips the order, exactly like clicking
the header twice.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from datatable import __version__
from datatable.config import settings
from datatable.demo.loader import TableSpecError, load_table
from datatable.demo.presidents import SHAPES, dataset
from datatable.kernel.reducer import initial_state, request_filter, request_hide, request_sort
from datatable.kernel.renderer import render
from datatable.kernel.types import RenderOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="datatable", description="Render a sortable, filterable table")
    p.add_argument("--data", type=Path, help="JSON table file (default: built-in presidents data)")
    p.add_argument("--shape", choices=SHAPES, default="struct", help="record shape for the built-in data")
    p.add_argument("--sort", action="append", default=[], metavar="COLUMN", help="sort by column (repeat to flip)")
    p.add_argument("--filter", action="append", default=[], metavar="COLUMN=TEXT", help="filter a column")
    p.add_argument("--hide", action="append", default=[], metavar="COLUMN", help="hide a column")
    p.add_argument("--format", choices=("html", "text"), default="html")
    p.add_argument("--title", default=None, help="page title (HTML only)")
    p.add_argument("--output", "-o", type=Path, help="write to file instead of stdout")
    p.add_argument("--version", action="version", version=f"datatable {__version__}")
    return p


def parse_filter(raw: str) -> tuple[str, str]:
    """Split COLUMN=TEXT. Only the first '=' separates."""
    column, sep, text = raw.partition("=")
    if not sep or not column:
        raise ValueError(f"expected COLUMN=TEXT, got {raw!r}")
    return column, text


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        filters = [parse_filter(raw) for raw in args.filter]
    except ValueError as e:
        parser.error(str(e))

    title = args.title
    if args.data is not None:
        try:
            table = load_table(args.data)
        except TableSpecError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        view, records, default_sort = table.view, table.records, table.sort_by
        title = title or table.title
    else:
        view, records = dataset(args.shape)
        default_sort = "Name"

    if args.sort:
        state = initial_state(args.sort[0])
        for column in args.sort[1:]:
            state = request_sort(column, state)
    else:
        state = initial_state(default_sort)

    for column, text in filters:
        state = request_filter(column, text, state)
    for column in args.hide:
        state = request_hide(column, state)

    logger.info("cli: rendering %d records with state %s", len(records), state.to_dict())

    options = RenderOptions(channel=args.format, title=title or settings.PAGE_TITLE)
    output = render(view, state, records, options)

    if args.output is not None:
        args.output.write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
