from __future__ import annotations
import logging
import os
from io import BytesIO
from typing import List, Optional, Sequence, Union

import pandas as pd
from xlsxwriter.exceptions import XlsxWriterException

from .errors import WriteError
from .stats import TeamStats
from .student import Team

logger = logging.getLogger(__name__)

TEAMS_SHEET = "Teams"
SUMMARY_SHEET = "Summary"
HEADERS = ["Student ID", "Student Name", "RegId", "Dept", "Team Name"]

# everything is written as plain text: no "=..." formulas, no hyperlinks, no numbers
_ENGINE_KWARGS = {"options": {"strings_to_formulas": False, "strings_to_urls": False, "strings_to_numbers": False}}


def teams_to_frame(teams: Sequence[Team]) -> pd.DataFrame:
    """Flatten teams into one row per student, team order then member order."""
    rows: List[List[str]] = []
    for team in teams:
        for s in team:
            rows.append([s.id, s.name, s.registration_number, s.department, s.team or team.label])
    return pd.DataFrame(rows, columns=HEADERS, dtype=object)


def _write_workbook(
    target: Union[str, "os.PathLike[str]", BytesIO],
    teams: Sequence[Team],
    *,
    split_sheets: bool,
    stats: Optional[TeamStats],
) -> List[str]:
    flat = teams_to_frame(teams)
    written: List[str] = []

    with pd.ExcelWriter(target, engine="xlsxwriter", engine_kwargs=_ENGINE_KWARGS) as writer:
        wb = writer.book
        fmt_header = wb.add_format({"bold": True, "bg_color": "#DDEBF7", "border": 1, "valign": "vcenter"})

        def format_df_sheet(sheet_name: str, df: pd.DataFrame, min_width: int = 10, max_width: int = 60):
            ws = writer.sheets.get(sheet_name)
            if ws is None:
                return
            ws.freeze_panes(1, 0)
            ws.autofilter(0, 0, max(1, len(df)), max(0, len(df.columns) - 1))
            for col, name in enumerate(df.columns):
                ws.write(0, col, name, fmt_header)
                longest = max([len(str(name))] + [len(str(v)) for v in df.iloc[:, col]])
                ws.set_column(col, col, max(min_width, min(max_width, longest + 2)))

        flat.to_excel(writer, index=False, sheet_name=TEAMS_SHEET)
        format_df_sheet(TEAMS_SHEET, flat)
        written.append(TEAMS_SHEET)

        if split_sheets:
            for team in teams:
                df = teams_to_frame([team])
                df.to_excel(writer, index=False, sheet_name=team.label)
                format_df_sheet(team.label, df)
                written.append(team.label)

        if stats is not None:
            summary = stats.to_frame()
            summary.to_excel(writer, index=False, sheet_name=SUMMARY_SHEET)
            format_df_sheet(SUMMARY_SHEET, summary, min_width=14)
            written.append(SUMMARY_SHEET)

    return written


def write_teams(
    teams: Sequence[Team],
    path: Union[str, "os.PathLike[str]"],
    *,
    split_sheets: bool = False,
    stats: Optional[TeamStats] = None,
) -> None:
    """
    Write the team assignment to an .xlsx file.

    The first sheet, "Teams", lists every student with its team label.
    `split_sheets` adds one sheet per team; `stats` adds a "Summary" sheet.
    Raises WriteError when the file cannot be created or finalized.
    """
    path = os.fspath(path)
    try:
        sheets = _write_workbook(path, teams, split_sheets=split_sheets, stats=stats)
    except (OSError, XlsxWriterException) as exc:
        raise WriteError(path, str(exc) or type(exc).__name__) from exc

    logger.info("Successfully wrote %d teams to Excel file: %s (sheets: %s)", len(teams), path, ", ".join(sheets))


def export_teams_to_excel_bytes(
    teams: Sequence[Team],
    *,
    split_sheets: bool = False,
    stats: Optional[TeamStats] = None,
) -> bytes:
    bio = BytesIO()
    try:
        _write_workbook(bio, teams, split_sheets=split_sheets, stats=stats)
    except XlsxWriterException as exc:
        raise WriteError("<memory>", str(exc) or type(exc).__name__) from exc
    return bio.getvalue()
