from __future__ import annotations
import enum
import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from .errors import TeamGenError
from .export import write_teams
from .partition import DEFAULT_TEAM_SIZE, split_into_teams
from .roster import dedupe_students, read_roster
from .stats import NO_TEAMS, TeamStats, summarize_teams

_logger = logging.getLogger(__name__)


class RunStatus(str, enum.Enum):
    COMPLETED = "completed"
    EMPTY_ROSTER = "empty_roster"
    FAILED = "failed"


@dataclass
class RunResult:
    status: RunStatus
    students_found: int = 0
    teams_created: int = 0
    output_path: Optional[str] = None
    stats: TeamStats = NO_TEAMS
    error: Optional[TeamGenError] = None

    @property
    def ok(self) -> bool:
        return self.status is not RunStatus.FAILED

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None


def generate_teams(
    input_path: Union[str, "os.PathLike[str]"],
    output_path: Union[str, "os.PathLike[str]"],
    sheet_name: Optional[str] = None,
    team_size: int = DEFAULT_TEAM_SIZE,
    *,
    shuffle: bool = True,
    seed: Optional[int] = None,
    dedupe: bool = False,
    split_sheets: bool = False,
    include_summary: bool = False,
    logger: Optional[logging.Logger] = None,
) -> RunResult:
    """
    Read the roster, split it into teams and write the assignment.

    Source and sink failures do not escape: they come back as a FAILED
    result carrying the error. A roster without a single usable row ends
    the run as EMPTY_ROSTER and no output file is created.
    """
    log = logger or _logger
    input_path = os.fspath(input_path)
    output_path = os.fspath(output_path)

    log.info("Starting student team generation process")
    log.info("Input file: %s", input_path)
    log.info("Output file: %s", output_path)
    log.info("Sheet name: %s", sheet_name if sheet_name is not None else "First sheet")
    log.info("Team size: %s", team_size)

    try:
        students = read_roster(input_path, sheet_name)
    except TeamGenError as exc:
        log.error("Reading roster failed: %s", exc.message)
        return RunResult(status=RunStatus.FAILED, error=exc)

    if dedupe:
        students, duplicates = dedupe_students(students)
        if duplicates:
            log.info("Removed %d duplicate rows", len(duplicates))

    if not students:
        log.warning("No students found in %s", input_path)
        return RunResult(status=RunStatus.EMPTY_ROSTER)

    teams = split_into_teams(students, team_size, shuffle, seed=seed)
    stats = summarize_teams(teams)
    log.info("%s", stats.render())

    try:
        write_teams(
            teams,
            output_path,
            split_sheets=split_sheets,
            stats=stats if include_summary else None,
        )
    except TeamGenError as exc:
        log.error("Writing teams failed: %s", exc.message)
        return RunResult(
            status=RunStatus.FAILED,
            students_found=len(students),
            teams_created=len(teams),
            stats=stats,
            error=exc,
        )

    return RunResult(
        status=RunStatus.COMPLETED,
        students_found=len(students),
        teams_created=len(teams),
        output_path=output_path,
        stats=stats,
    )
