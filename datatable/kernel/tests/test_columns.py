"""
datatable Columns — Constructor Tests

Tests verify:
  - int/float/string stringify
  - Default formatter is escaped plain text of the stringified value
  - A custom formatter fully replaces the default and gets the raw record
  - Numeric ordering is opt-in only
"""

from datatable.kernel.columns import float_column, int_column, string_column, text_formatter


class TestIntColumn:
    def test_stringify_is_decimal(self):
        column = int_column("Qty", lambda r: r["qty"])
        assert column.stringify({"qty": 42}) == "42"
        assert column.stringify({"qty": -7}) == "-7"

    def test_default_formatter_is_text(self):
        column = int_column("Qty", lambda r: r["qty"])
        assert column.formatter({"qty": 42}) == "42"

    def test_no_sort_key_by_default(self):
        """Ints sort as text unless asked otherwise."""
        column = int_column("Qty", lambda r: r["qty"])
        assert column.sort_key is None

    def test_numeric_sets_sort_key(self):
        column = int_column("Qty", lambda r: r["qty"], numeric=True)
        assert column.sort_key({"qty": 10}) == 10


class TestFloatColumn:
    def test_stringify_uses_repr(self):
        column = float_column("Price", lambda r: r)
        assert column.stringify(2.5) == "2.5"
        assert column.stringify(1.0) == "1.0"
        assert column.stringify(0.1 + 0.2) == "0.30000000000000004"

    def test_int_input_is_stringified_as_float(self):
        column = float_column("Price", lambda r: r)
        assert column.stringify(3) == "3.0"

    def test_numeric_sets_sort_key(self):
        column = float_column("Price", lambda r: r, numeric=True)
        assert column.sort_key(2.5) == 2.5


class TestStringColumn:
    def test_stringify_is_identity(self):
        column = string_column("Name", lambda r: r[0])
        assert column.stringify(("Ada", 1815)) == "Ada"

    def test_default_formatter_escapes(self):
        column = string_column("Name", lambda r: r)
        assert column.formatter("<b>Ada & Co</b>") == "&lt;b&gt;Ada &amp; Co&lt;/b&gt;"

    def test_custom_formatter_receives_record(self):
        seen = []

        def fmt(record):
            seen.append(record)
            return f"<strong>{record['name']}</strong>"

        column = string_column("Name", lambda r: r["name"], fmt)
        assert column.formatter({"name": "Ada"}) == "<strong>Ada</strong>"
        assert seen == [{"name": "Ada"}]

    def test_custom_formatter_does_not_change_stringify(self):
        column = string_column("Name", lambda r: r, lambda r: "<i>x</i>")
        assert column.stringify("Ada") == "Ada"


class TestTextFormatter:
    def test_wraps_stringify(self):
        fmt = text_formatter(lambda r: f"{r} \"quoted\"")
        assert fmt("a") == "a &quot;quoted&quot;"
