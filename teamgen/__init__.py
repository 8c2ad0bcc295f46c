"""
This package contains:
- cell coercion for spreadsheet values
- roster reading (XLSX/CSV)
- splitting the roster into teams
- team statistics
- writing the team assignment back to a workbook
"""
from .cells import coerce_cell, coerce_value
from .errors import TeamGenError, SheetNotFoundError, ReadIOError, WriteError
from .student import Student, Team
from .sheets import open_sheet, list_sheet_names
from .roster import ColumnMap, DEFAULT_COLUMNS, WRITTEN_COLUMNS, read_roster, iter_students, dedupe_students
from .partition import DEFAULT_TEAM_SIZE, split_into_teams, shuffle_students
from .stats import NO_TEAMS, TeamStats, summarize_teams
from .export import teams_to_frame, write_teams, export_teams_to_excel_bytes
from .pipeline import RunResult, RunStatus, generate_teams

__all__ = [
    "coerce_cell",
    "coerce_value",
    "TeamGenError",
    "SheetNotFoundError",
    "ReadIOError",
    "WriteError",
    "Student",
    "Team",
    "open_sheet",
    "list_sheet_names",
    "ColumnMap",
    "DEFAULT_COLUMNS",
    "WRITTEN_COLUMNS",
    "read_roster",
    "iter_students",
    "dedupe_students",
    "DEFAULT_TEAM_SIZE",
    "split_into_teams",
    "shuffle_students",
    "NO_TEAMS",
    "TeamStats",
    "summarize_teams",
    "teams_to_frame",
    "write_teams",
    "export_teams_to_excel_bytes",
    "RunResult",
    "RunStatus",
    "generate_teams",
]
