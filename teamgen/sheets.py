from __future__ import annotations
import csv
import logging
import os
import zipfile
from contextlib import contextmanager
from io import BytesIO, StringIO
from pathlib import Path
from typing import Any, BinaryIO, Iterator, List, Optional, Sequence, Tuple, Union

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .errors import ReadIOError, SheetNotFoundError
from .utils import norm_text

logger = logging.getLogger(__name__)

# path, raw bytes or a binary file object (e.g. a Streamlit upload)
Source = Union[str, os.PathLike, bytes, bytearray, BinaryIO]

CSV_SHEET = "CSV"

_WORKBOOK_ERRORS = (OSError, zipfile.BadZipFile, InvalidFileException, KeyError, ValueError)


class Sheet:
    """
    Read-only matrix view of one sheet.

    Rows and columns are zero-based. Cells are whatever the backend produced:
    openpyxl cells for workbooks, plain strings for CSV.
    """

    def __init__(self, name: str, rows: Sequence[Sequence[Any]]):
        self.name = name
        self._rows = list(rows)

    def __repr__(self) -> str:
        return f"Sheet(name={self.name!r}, rows={len(self._rows)})"

    def row_count(self) -> int:
        return len(self._rows)

    def row(self, index: int) -> Optional[Sequence[Any]]:
        # None for rows that do not exist or carry no values at all
        if index < 0 or index >= len(self._rows):
            return None
        cells = self._rows[index]
        if not cells or all(_is_blank(c) for c in cells):
            return None
        return cells

    def cell(self, row: int, col: int) -> Any:
        if row < 0 or row >= len(self._rows):
            return None
        cells = self._rows[row]
        if col < 0 or col >= len(cells):
            return None
        return cells[col]


def _is_blank(cell: Any) -> bool:
    value = getattr(cell, "value", cell)
    if isinstance(value, float) and value != value:
        # NaN: pandas fills short CSV lines with it
        return True
    return value is None or (isinstance(value, str) and value == "")


def source_label(source: Source, filename: Optional[str]) -> str:
    if filename:
        return filename
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return getattr(source, "name", None) or "<upload>"


def _is_csv(source: Source, filename: Optional[str]) -> bool:
    name = filename
    if name is None and isinstance(source, (str, os.PathLike)):
        name = os.fspath(source)
    return bool(name) and str(name).lower().endswith(".csv")


def _as_bytes(source: Source, label: str) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        try:
            return Path(source).read_bytes()
        except OSError as exc:
            raise ReadIOError(label, exc.strerror or str(exc)) from exc
    if hasattr(source, "getvalue"):
        return source.getvalue()
    if hasattr(source, "read"):
        if hasattr(source, "seek"):
            source.seek(0)
        return source.read()
    raise ReadIOError(label, f"unsupported source type {type(source).__name__}")
# =========================

# CSV: tolerant reading of exported rosters
# =========================
def _decode_sample(data: bytes, enc: str, limit: int = 65536) -> str:
    return data[:limit].decode(enc, errors="replace")


def _guess_delimiter(sample_text: str) -> str:
    # ',' for en-US exports, ';' for most European locales, sometimes tabs
    try:
        dialect = csv.Sniffer().sniff(sample_text, delimiters=";,\t|")
        if dialect.delimiter:
            return dialect.delimiter
    except csv.Error:
        pass

    # fallback: count separators in the first lines
    candidates = [";", ",", "\t", "|"]
    lines = [ln for ln in sample_text.splitlines() if ln.strip()][:20]
    if not lines:
        return ","

    scores = {}
    for d in candidates:
        cnts = [ln.count(d) for ln in lines]
        scores[d] = sum(cnts) / max(1, len(cnts))

    best = max(scores.items(), key=lambda x: x[1])[0]
    return best if scores.get(best, 0) > 0 else ","


def _max_fields(text: str, delim: str) -> int:
    return max((len(r) for r in csv.reader(StringIO(text), delimiter=delim)), default=0)


def _read_csv_frame(text: str, delim: str) -> pd.DataFrame:
    # rosters are often ragged (header narrower than the data rows), so the
    # frame is sized to the widest line instead of the first one
    width = _max_fields(text, delim)
    if width == 0:
        return pd.DataFrame()
    # header=None keeps the header line as row 0, same as a workbook sheet
    return pd.read_csv(
        StringIO(text),
        header=None,
        names=range(width),
        sep=delim,
        engine="python",
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
    )


def _read_csv_text(text: str) -> pd.DataFrame:
    delim = _guess_delimiter(text[:65536])
    df = _read_csv_frame(text, delim)

    # a single column usually means the sniffer picked the wrong separator
    if df.shape[1] == 1:
        for d2 in [";", ",", "\t", "|"]:
            if d2 == delim:
                continue
            df2 = _read_csv_frame(text, d2)
            if df2.shape[1] > 1:
                return df2
    return df


def _read_csv_bytes(data: bytes, label: str) -> pd.DataFrame:
    encodings = ["utf-8-sig", "utf-8", "cp1251"]
    last_err: Optional[Exception] = None

    for enc in encodings:
        try:
            return _read_csv_text(data.decode(enc))
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except (UnicodeDecodeError, pd.errors.ParserError, csv.Error) as e:
            last_err = e
            continue

    # last resort: decode with replacement characters
    try:
        return _read_csv_text(_decode_sample(data, "utf-8", limit=len(data)))
    except (pd.errors.ParserError, csv.Error) as e:
        raise ReadIOError(label, str(last_err or e)) from e


def _csv_rows(frame: pd.DataFrame) -> List[Tuple[Any, ...]]:
    return list(frame.itertuples(index=False, name=None))
# =========================

# Workbook: openpyxl in read-only mode, formulas kept as text
# =========================
def _load_workbook(source: Source, label: str):
    if isinstance(source, (bytes, bytearray)):
        source = BytesIO(source)
    try:
        return load_workbook(source, read_only=True, data_only=False)
    except _WORKBOOK_ERRORS as exc:
        raise ReadIOError(label, str(exc) or type(exc).__name__) from exc


def _select_worksheet(wb, sheet_name: Optional[str]):
    worksheets = list(wb.worksheets)
    titles = [ws.title for ws in worksheets]
    if sheet_name is None:
        if not worksheets:
            raise SheetNotFoundError("<first sheet>", titles)
        return worksheets[0]

    for ws in worksheets:
        if ws.title == sheet_name:
            return ws
    # tolerate case and stray whitespace in the requested name
    wanted = norm_text(sheet_name)
    for ws in worksheets:
        if norm_text(ws.title) == wanted:
            return ws
    raise SheetNotFoundError(sheet_name, titles)


@contextmanager
def open_sheet(
    source: Source,
    sheet_name: Optional[str] = None,
    *,
    filename: Optional[str] = None,
) -> Iterator[Sheet]:
    """
    Open one sheet of a roster source.

    `source` is a path, raw bytes or a binary file object. `filename` names
    uploaded content so its format can be told apart (".csv" or workbook).
    Without `sheet_name` the first sheet in document order is used.

    Raises SheetNotFoundError for an unknown sheet name and ReadIOError when
    the source cannot be opened or parsed. The underlying workbook is closed
    on every exit path.
    """
    label = source_label(source, filename)

    if _is_csv(source, filename):
        if sheet_name is not None and norm_text(sheet_name) != norm_text(CSV_SHEET):
            raise SheetNotFoundError(sheet_name, [CSV_SHEET])
        frame = _read_csv_bytes(_as_bytes(source, label), label)
        logger.debug("Loaded CSV %s (%d rows)", label, len(frame))
        yield Sheet(CSV_SHEET, _csv_rows(frame))
        return

    if not isinstance(source, (str, os.PathLike, bytes, bytearray)):
        source = _as_bytes(source, label)

    wb = _load_workbook(source, label)
    try:
        ws = _select_worksheet(wb, sheet_name)
        try:
            rows = [tuple(r) for r in ws.iter_rows()]
        except _WORKBOOK_ERRORS as exc:
            raise ReadIOError(label, str(exc) or type(exc).__name__) from exc
        logger.debug("Loaded sheet %r from %s (%d rows)", ws.title, label, len(rows))
        yield Sheet(ws.title, rows)
    finally:
        wb.close()


def list_sheet_names(source: Source, *, filename: Optional[str] = None) -> List[str]:
    label = source_label(source, filename)
    if _is_csv(source, filename):
        return [CSV_SHEET]
    if not isinstance(source, (str, os.PathLike, bytes, bytearray)):
        source = _as_bytes(source, label)
    wb = _load_workbook(source, label)
    try:
        return [ws.title for ws in wb.worksheets]
    finally:
        wb.close()
