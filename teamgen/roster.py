from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from .cells import coerce_cell
from .sheets import Sheet, Source, open_sheet, source_label
from .student import Student

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnMap:
    """Zero-based column positions of the roster fields."""
    id: int = 0
    name: int = 1
    registration_number: Optional[int] = 2
    department: Optional[int] = 3
    team: Optional[int] = None


DEFAULT_COLUMNS = ColumnMap()
# layout produced by export.write_teams
WRITTEN_COLUMNS = ColumnMap(team=4)


def _field(sheet: Sheet, row: int, col: Optional[int]) -> str:
    # out-of-range columns read as blank (two-column legacy rosters)
    if col is None:
        return ""
    return coerce_cell(sheet.cell(row, col)).strip()


def iter_students(sheet: Sheet, columns: ColumnMap = DEFAULT_COLUMNS) -> Iterator[Student]:
    """
    Yield a Student for every usable data row of `sheet`, in sheet order.

    Row 0 is the header and is always skipped, whatever it contains. Rows
    without an id or a name are dropped silently.
    """
    for i in range(1, sheet.row_count()):
        if not sheet.row(i):
            continue

        sid = _field(sheet, i, columns.id)
        name = _field(sheet, i, columns.name)
        if not sid or not name:
            logger.debug("Skipping row %d of %r: missing id or name", i + 1, sheet.name)
            continue

        yield Student(
            id=sid,
            name=name,
            registration_number=_field(sheet, i, columns.registration_number),
            department=_field(sheet, i, columns.department),
            team=_field(sheet, i, columns.team),
        )


def read_roster(
    source: Source,
    sheet_name: Optional[str] = None,
    *,
    columns: ColumnMap = DEFAULT_COLUMNS,
    filename: Optional[str] = None,
) -> List[Student]:
    """
    Read the student roster from a workbook or CSV file.

    Raises SheetNotFoundError / ReadIOError (see sheets.open_sheet).
    """
    with open_sheet(source, sheet_name, filename=filename) as sheet:
        logger.info("Reading students from sheet: %s", sheet.name)
        students = list(iter_students(sheet, columns))

    logger.info("Read %d students from %s", len(students), source_label(source, filename))
    return students


def dedupe_students(students: Sequence[Student]) -> Tuple[List[Student], List[Student]]:
    """
    Drop repeated student ids, keeping the first occurrence.

    Returns:
      - kept: roster without repeats, original order
      - duplicates: the dropped records, for reporting
    """
    kept: List[Student] = []
    duplicates: List[Student] = []
    seen: Set[str] = set()

    for s in students:
        if s.id in seen:
            duplicates.append(s)
            continue
        seen.add(s.id)
        kept.append(s)

    if duplicates:
        logger.warning(
            "Dropped %d duplicate student ids: %s",
            len(duplicates),
            ", ".join(sorted({d.id for d in duplicates})),
        )
    return kept, duplicates
