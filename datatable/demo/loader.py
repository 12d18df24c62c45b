"""
Load a table definition from JSON.

File format:
  {
    "title": "Inventory",            (optional)
    "sort_by": "Name",               (optional, defaults to the first column)
    "columns": [
      {"name": "Name", "field": "name"},
      {"name": "Qty", "field": "qty", "type": "int", "numeric": true}
    ],
    "records": [{"name": "bolts", "qty": 12}, ...]
  }

Records stay plain dicts; columns read them by `field`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, model_validator

from datatable.config import settings
from datatable.kernel.columns import float_column, int_column, string_column
from datatable.kernel.types import Capability, Column, ViewConfig

logger = logging.getLogger(__name__)


class TableSpecError(Exception):
    """The table file is missing, unreadable, or does not validate."""


class ColumnSpec(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1)
    field: str = Field(min_length=1)
    type: Literal["int", "float", "string"] = "string"
    numeric: bool = False

    @model_validator(mode="after")
    def _numeric_only_for_numbers(self) -> ColumnSpec:
        if self.numeric and self.type == "string":
            raise ValueError(f"column {self.name!r}: numeric ordering needs type int or float")
        return self


class TableSpec(BaseModel):
    model_config = {"extra": "forbid"}

    title: str | None = None
    sort_by: str | None = None
    columns: list[ColumnSpec] = Field(min_length=1)
    records: list[dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_columns_and_records(self) -> TableSpec:
        names = [column.name for column in self.columns]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate column names: {', '.join(duplicates)}")

        for index, record in enumerate(self.records):
            for column in self.columns:
                if column.field not in record:
                    raise ValueError(f"record {index}: missing field {column.field!r}")
                value = record[column.field]
                if column.type == "int" and (isinstance(value, bool) or not isinstance(value, int)):
                    raise ValueError(f"record {index}: field {column.field!r} is not an int")
                if column.type == "float" and (isinstance(value, bool) or not isinstance(value, (int, float))):
                    raise ValueError(f"record {index}: field {column.field!r} is not a number")
                if column.type == "string" and not isinstance(value, str):
                    raise ValueError(f"record {index}: field {column.field!r} is not a string")
        return self


@dataclass
class LoadedTable:
    view: ViewConfig
    records: list[dict[str, Any]]
    sort_by: str
    title: str | None = None


def load_table(path: str | Path) -> LoadedTable:
    """Read and validate a table file. Raises TableSpecError."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise TableSpecError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TableSpecError(f"{path} is not valid JSON: {e}") from e

    return build_table(raw)


def build_table(raw: Any) -> LoadedTable:
    """Validate an already-parsed table definition."""
    try:
        spec = TableSpec.model_validate(raw)
    except ValidationError as e:
        raise TableSpecError(str(e)) from e

    view = ViewConfig(
        columns=[_build_column(column) for column in spec.columns],
        can_hide=Capability(True, settings.HIDE_LABEL),
        can_sort=Capability(True, settings.SORT_LABEL),
        can_filter=Capability(True, settings.FILTER_LABEL),
    )
    logger.debug("loader: %d columns, %d records", len(spec.columns), len(spec.records))

    return LoadedTable(
        view=view,
        records=spec.records,
        sort_by=spec.sort_by or spec.columns[0].name,
        title=spec.title,
    )


def _build_column(spec: ColumnSpec) -> Column:
    def extract(record: dict[str, Any]) -> Any:
        return record[spec.field]

    if spec.type == "int":
        return int_column(spec.name, extract, numeric=spec.numeric)
    if spec.type == "float":
        return float_column(spec.name, extract, numeric=spec.numeric)
    return string_column(spec.name, extract)
