from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .student import Team


@dataclass(frozen=True)
class TeamStats:
    team_count: int
    student_count: int
    min_size: int
    max_size: int
    mean_size: float

    @property
    def is_empty(self) -> bool:
        return self.team_count == 0

    def render(self) -> str:
        if self.is_empty:
            return "No teams created"
        return (
            "Team Statistics:\n"
            f"- Total Teams: {self.team_count}\n"
            f"- Total Students: {self.student_count}\n"
            f"- Min Team Size: {self.min_size}\n"
            f"- Max Team Size: {self.max_size}\n"
            f"- Average Team Size: {self.mean_size:.2f}"
        )

    def to_frame(self) -> pd.DataFrame:
        # two-column layout for the "Summary" sheet
        return pd.DataFrame({
            "Metric": ["Total Teams", "Total Students", "Min Team Size", "Max Team Size", "Average Team Size"],
            "Value": [
                self.team_count,
                self.student_count,
                self.min_size,
                self.max_size,
                round(self.mean_size, 2),
            ],
        })


NO_TEAMS = TeamStats(team_count=0, student_count=0, min_size=0, max_size=0, mean_size=0.0)


def summarize_teams(teams: Sequence[Team]) -> TeamStats:
    if not teams:
        return NO_TEAMS

    sizes = np.array([len(t) for t in teams], dtype=int)
    return TeamStats(
        team_count=int(sizes.size),
        student_count=int(sizes.sum()),
        min_size=int(sizes.min()),
        max_size=int(sizes.max()),
        mean_size=float(sizes.mean()),
    )
