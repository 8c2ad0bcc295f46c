from __future__ import annotations
import datetime as dt
import math
import numbers
from typing import Any

import numpy as np
from openpyxl.worksheet.formula import ArrayFormula

# openpyxl data_type codes
_FORMULA = "f"
_ERROR = "e"
_DATE = "d"


def _formula_text(value: Any) -> str:
    # "=SUM(A1:A3)" -> "SUM(A1:A3)"; array formulas keep their text in .text
    if isinstance(value, ArrayFormula):
        value = value.text
    if not isinstance(value, str):
        return ""
    return value[1:] if value.startswith("=") else value


def _date_text(value: Any) -> str:
    # str() of datetime/date/time: "2024-03-01 00:00:00", "2024-03-01", "08:30:00"
    return str(value)


def _number_text(value: Any) -> str:
    if isinstance(value, numbers.Integral):
        return str(int(value))
    f = float(value)
    if math.isnan(f):
        # pandas marks blank cells with NaN
        return ""
    if f.is_integer():
        return str(int(f))
    return repr(f)


def coerce_value(value: Any) -> str:
    """
    Render a raw cell value (no cell metadata available) as a string.

    Used directly for CSV/pandas sources and as the fallback for workbook
    cells whose type carries no extra meaning.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return _date_text(value)
    if isinstance(value, numbers.Real):
        return _number_text(value)
    if isinstance(value, ArrayFormula):
        return _formula_text(value)
    return ""


def coerce_cell(cell: Any) -> str:
    """
    Normalize a spreadsheet cell into a string.

    `cell` may be an openpyxl cell (regular, read-only or empty), a bare value
    or None. Formula cells yield their expression, not the cached result.
    Never raises: unknown and error cells become "".
    """
    if cell is None:
        return ""

    data_type = getattr(cell, "data_type", None)
    if data_type is None or not hasattr(cell, "value"):
        return coerce_value(cell)

    value = cell.value
    if value is None:
        return ""
    if data_type == _FORMULA:
        return _formula_text(value)
    if data_type == _ERROR:
        return ""
    if data_type == _DATE or getattr(cell, "is_date", False):
        if isinstance(value, (dt.datetime, dt.date, dt.time, dt.timedelta)):
            return _date_text(value)
    return coerce_value(value)
