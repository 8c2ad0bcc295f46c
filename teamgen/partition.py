from __future__ import annotations
import logging
from typing import List, Optional, Sequence

import numpy as np

from .student import Student, Team

logger = logging.getLogger(__name__)

DEFAULT_TEAM_SIZE = 10
TEAM_LABEL = "Team_{}"


def _make_rng(seed: Optional[int], rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def shuffle_students(
    students: Sequence[Student],
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Student]:
    """Return a uniformly random permutation of `students` (input untouched)."""
    order = _make_rng(seed, rng).permutation(len(students))
    shuffled = [students[i] for i in order]
    logger.debug("Shuffled %d students for random team assignment", len(shuffled))
    return shuffled


def split_into_teams(
    students: Sequence[Student],
    team_size: int = DEFAULT_TEAM_SIZE,
    shuffle: bool = True,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Team]:
    """
    Split the roster into consecutive teams of `team_size` students.

    The last team holds the remainder and may be smaller. `team_size <= 0`
    falls back to the default of 10. Teams are labelled Team_0, Team_1, ...
    in output order, and every member is a copy of the roster record with
    that label set; the roster itself is not modified.

    Shuffling is unseeded unless `seed` or `rng` is given; pass
    shuffle=False for source order.
    """
    if not students:
        logger.warning("No students provided for team creation")
        return []

    if team_size <= 0:
        team_size = DEFAULT_TEAM_SIZE

    ordered = shuffle_students(students, seed=seed, rng=rng) if shuffle else list(students)

    teams: List[Team] = []
    for start in range(0, len(ordered), team_size):
        label = TEAM_LABEL.format(start // team_size)
        chunk = ordered[start:start + team_size]
        teams.append(Team(label=label, members=tuple(s.assigned_to(label) for s in chunk)))

    logger.info(
        "Created %d teams from %d students (team size: %d)",
        len(teams), len(students), team_size,
    )
    for team in teams:
        logger.debug("%s has %d students", team.label, len(team))

    return teams
