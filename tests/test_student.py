import dataclasses

import pytest

from teamgen.student import Student, Team


def test_identity_is_the_id():
    a = Student("S1", "Ann", "R1", "CS")
    b = Student("S1", "Annie", "R9", "EE", team="Team_3")

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Student("S2", "Ann")


def test_none_fields_become_empty_strings():
    s = Student("S1", "Ann", None, None, None)
    assert (s.registration_number, s.department, s.team) == ("", "", "")


@pytest.mark.parametrize("sid,name", [("", "Ann"), ("S1", ""), (None, "Ann")])
def test_id_and_name_are_required(sid, name):
    with pytest.raises(ValueError):
        Student(sid, name)


def test_records_are_immutable():
    s = Student("S1", "Ann")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.team = "Team_0"


def test_assigned_to_returns_a_copy():
    s = Student("S1", "Ann", "R1", "CS")
    t = s.assigned_to("Team_2")

    assert t.team == "Team_2"
    assert s.team == ""
    assert (t.id, t.name, t.registration_number, t.department) == ("S1", "Ann", "R1", "CS")


def test_team_len_and_iteration():
    members = (Student("S1", "Ann"), Student("S2", "Ben"))
    team = Team("Team_0", members)
    assert len(team) == 2
    assert list(team) == list(members)
