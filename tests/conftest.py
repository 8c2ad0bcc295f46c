from typing import Dict, List, Sequence

import pytest
from openpyxl import Workbook

from teamgen.student import Student

HEADER = ["Student ID", "Student Name", "RegId", "Dept"]


def write_workbook(path, sheets: Dict[str, Sequence[Sequence]]):
    """Create an .xlsx file with one sheet per entry, rows written as given."""
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(list(row))
    wb.save(path)
    return path


def roster_rows(n: int) -> List[List]:
    rows: List[List] = [HEADER]
    for i in range(1, n + 1):
        rows.append([f"S{i:03d}", f"Student {i}", f"REG-{i}", "CS" if i % 2 else "EE"])
    return rows


def make_students(n: int) -> List[Student]:
    return [Student(id=f"S{i:03d}", name=f"Student {i}") for i in range(1, n + 1)]


@pytest.fixture
def roster_xlsx(tmp_path):
    return write_workbook(tmp_path / "students.xlsx", {"Roster": roster_rows(25)})


@pytest.fixture
def empty_roster_xlsx(tmp_path):
    return write_workbook(tmp_path / "empty.xlsx", {"Roster": [HEADER]})


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for var in ("TEAMGEN_CONFIG", "TEAMGEN_TEAM_SIZE", "TEAMGEN_LOG_LEVEL", "TEAMGEN_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
