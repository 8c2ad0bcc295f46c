"""
Tests for spreadsheet cell coercion.
"""

import datetime as dt

import numpy as np
import pytest
from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.formula import ArrayFormula

from teamgen.cells import coerce_cell, coerce_value


@pytest.fixture
def ws():
    return Workbook().active


class TestCoerceValue:
    """Raw values, as delivered by CSV sources."""

    def test_text_is_returned_verbatim(self):
        assert coerce_value("  Alice  ") == "  Alice  "
        assert coerce_value(coerce_value("Alice")) == "Alice"

    def test_whole_numbers_have_no_decimal_point(self):
        assert coerce_value(42.0) == "42"
        assert coerce_value(42) == "42"
        assert coerce_value(np.float64(1001.0)) == "1001"

    def test_fractions_keep_native_repr(self):
        assert coerce_value(3.5) == "3.5"
        assert coerce_value(0.1) == "0.1"

    def test_booleans_are_lowercase(self):
        assert coerce_value(True) == "true"
        assert coerce_value(False) == "false"
        assert coerce_value(np.bool_(True)) == "true"

    def test_dates(self):
        assert coerce_value(dt.datetime(2024, 3, 1, 8, 30)) == "2024-03-01 08:30:00"
        assert coerce_value(dt.date(2024, 3, 1)) == "2024-03-01"

    def test_blank_and_unsupported(self):
        assert coerce_value(None) == ""
        assert coerce_value(float("nan")) == ""
        assert coerce_value(object()) == ""
        assert coerce_value(b"bytes") == ""


class TestCoerceCell:
    """openpyxl cells, where the cell type decides the rendering."""

    def test_missing_cell(self):
        assert coerce_cell(None) == ""

    def test_text_cell(self, ws):
        ws["A1"] = "Bob"
        assert coerce_cell(ws["A1"]) == "Bob"

    def test_numeric_cells(self, ws):
        ws["A1"] = 42.0
        ws["A2"] = 2.25
        assert coerce_cell(ws["A1"]) == "42"
        assert coerce_cell(ws["A2"]) == "2.25"

    def test_boolean_cell(self, ws):
        ws["A1"] = False
        assert coerce_cell(ws["A1"]) == "false"

    def test_formula_cell_yields_expression(self, ws):
        ws["A1"] = "=SUM(B1:B3)"
        assert ws["A1"].data_type == "f"
        assert coerce_cell(ws["A1"]) == "SUM(B1:B3)"

    def test_array_formula_cell(self, ws):
        ws["A1"] = ArrayFormula("A1", "=SUM(B1:B3*C1:C3)")
        assert coerce_cell(ws["A1"]) == "SUM(B1:B3*C1:C3)"

    def test_date_cell(self, ws):
        ws["A1"] = dt.datetime(2023, 9, 1)
        assert coerce_cell(ws["A1"]) == "2023-09-01 00:00:00"

    def test_error_cell_is_blank(self, ws):
        ws["A1"] = "#DIV/0!"
        assert ws["A1"].data_type == "e"
        assert coerce_cell(ws["A1"]) == ""

    def test_empty_cell(self, ws):
        assert coerce_cell(ws["C7"]) == ""

    def test_read_only_cells(self, tmp_path):
        wb = Workbook()
        sheet = wb.active
        sheet.append(["text", 42.0, 7.5, True, "=A1&B1", dt.datetime(2024, 1, 2)])
        path = tmp_path / "cells.xlsx"
        wb.save(path)

        ro = load_workbook(path, read_only=True, data_only=False)
        try:
            row = next(ro.active.iter_rows())
            assert [coerce_cell(c) for c in row] == [
                "text", "42", "7.5", "true", "A1&B1", "2024-01-02 00:00:00",
            ]
        finally:
            ro.close()
