"""
Tests for datatable/demo/loader.py
"""

from __future__ import annotations

import json

import pytest

from datatable.demo.loader import TableSpecError, build_table, load_table
from datatable.kernel.projection import project
from datatable.kernel.reducer import initial_state
from datatable.kernel.types import SortOrder


def write_table(tmp_path, spec):
    path = tmp_path / "table.json"
    path.write_text(json.dumps(spec), encoding="utf-8")
    return path


INVENTORY = {
    "title": "Inventory",
    "columns": [
        {"name": "Item", "field": "item"},
        {"name": "Qty", "field": "qty", "type": "int"},
        {"name": "Price", "field": "price", "type": "float"},
    ],
    "records": [
        {"item": "bolts", "qty": 10, "price": 0.25},
        {"item": "nuts", "qty": 2, "price": 0.1},
        {"item": "washers", "qty": 100, "price": 1},
    ],
}


class TestLoadTable:
    def test_valid_file(self, tmp_path):
        table = load_table(write_table(tmp_path, INVENTORY))
        assert table.title == "Inventory"
        assert table.sort_by == "Item"
        assert [c.name for c in table.view.columns] == ["Item", "Qty", "Price"]
        assert len(table.records) == 3

    def test_columns_read_fields(self, tmp_path):
        table = load_table(write_table(tmp_path, INVENTORY))
        item, qty, price = table.view.columns
        record = table.records[2]
        assert (item.stringify(record), qty.stringify(record), price.stringify(record)) == ("washers", "100", "1.0")

    def test_explicit_sort_by(self, tmp_path):
        table = load_table(write_table(tmp_path, {**INVENTORY, "sort_by": "Qty"}))
        assert table.sort_by == "Qty"

    def test_int_column_sorts_as_text_by_default(self, tmp_path):
        table = load_table(write_table(tmp_path, INVENTORY))
        rows = project(table.view, initial_state("Qty"), table.records).rows
        assert [r["qty"] for r in rows] == [10, 100, 2]

    def test_numeric_opt_in(self, tmp_path):
        spec = json.loads(json.dumps(INVENTORY))
        spec["columns"][1]["numeric"] = True
        table = load_table(write_table(tmp_path, spec))
        rows = project(table.view, initial_state("Qty", SortOrder.DESCENDING), table.records).rows
        assert [r["qty"] for r in rows] == [100, 10, 2]

    def test_missing_file(self, tmp_path):
        with pytest.raises(TableSpecError, match="cannot read"):
            load_table(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TableSpecError, match="not valid JSON"):
            load_table(path)


class TestBuildTableValidation:
    def test_no_columns(self):
        with pytest.raises(TableSpecError):
            build_table({"columns": []})

    def test_unknown_key_forbidden(self):
        with pytest.raises(TableSpecError):
            build_table({**INVENTORY, "pagination": True})

    def test_unknown_column_type(self):
        with pytest.raises(TableSpecError):
            build_table({"columns": [{"name": "A", "field": "a", "type": "date"}]})

    def test_duplicate_column_names(self):
        spec = {"columns": [{"name": "A", "field": "a"}, {"name": "A", "field": "b"}]}
        with pytest.raises(TableSpecError, match="duplicate column names: A"):
            build_table(spec)

    def test_missing_field_in_record(self):
        spec = {"columns": [{"name": "A", "field": "a"}], "records": [{"b": "x"}]}
        with pytest.raises(TableSpecError, match="record 0: missing field 'a'"):
            build_table(spec)

    def test_wrong_int_type(self):
        spec = {"columns": [{"name": "N", "field": "n", "type": "int"}], "records": [{"n": 1}, {"n": "2"}]}
        with pytest.raises(TableSpecError, match="record 1: field 'n' is not an int"):
            build_table(spec)

    def test_bool_is_not_a_number(self):
        spec = {"columns": [{"name": "N", "field": "n", "type": "float"}], "records": [{"n": True}]}
        with pytest.raises(TableSpecError, match="is not a number"):
            build_table(spec)

    def test_wrong_string_type(self):
        spec = {"columns": [{"name": "S", "field": "s"}], "records": [{"s": 3}]}
        with pytest.raises(TableSpecError, match="is not a string"):
            build_table(spec)

    def test_numeric_string_column_rejected(self):
        spec = {"columns": [{"name": "S", "field": "s", "numeric": True}]}
        with pytest.raises(TableSpecError, match="numeric ordering"):
            build_table(spec)

    def test_no_records_is_fine(self):
        table = build_table({"columns": [{"name": "A", "field": "a"}]})
        assert table.records == []
