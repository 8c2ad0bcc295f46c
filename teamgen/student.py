from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Student:
    """
    One roster member.

    Identity is the `id` alone: two records with the same id compare equal
    and hash the same, whatever their other fields say. Records are never
    mutated; `assigned_to` returns a copy carrying the team label.
    """
    id: str
    name: str = field(compare=False)
    registration_number: str = field(default="", compare=False)
    department: str = field(default="", compare=False)
    team: str = field(default="", compare=False)

    def __post_init__(self):
        for attr in ("id", "name", "registration_number", "department", "team"):
            if getattr(self, attr) is None:
                object.__setattr__(self, attr, "")
        if not self.id:
            raise ValueError("Student id must not be empty")
        if not self.name:
            raise ValueError("Student name must not be empty")

    def assigned_to(self, team: str) -> "Student":
        return replace(self, team=team)


@dataclass(frozen=True)
class Team:
    label: str
    members: Tuple[Student, ...]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.members)
