"""
Tests for the teamgen command line.
"""

import builtins

from openpyxl import load_workbook

from teamgen.cli import main


def test_argument_mode(tmp_path, roster_xlsx, capsys):
    out = tmp_path / "teams.xlsx"

    code = main([str(roster_xlsx), str(out), "Roster", "5", "--no-shuffle", "--stats"])

    assert code == 0
    printed = capsys.readouterr().out
    assert "Created 5 teams" in printed
    assert "Total Students: 25" in printed
    assert out.exists()


def test_missing_sheet_reports_without_traceback(tmp_path, roster_xlsx, capsys):
    code = main([str(roster_xlsx), str(tmp_path / "teams.xlsx"), "Missing"])

    assert code == 1
    err = capsys.readouterr().err
    assert "SheetNotFoundError" in err
    assert "Traceback" not in err


def test_empty_roster(tmp_path, empty_roster_xlsx, capsys):
    out = tmp_path / "teams.xlsx"

    assert main([str(empty_roster_xlsx), str(out)]) == 0
    assert "No students found" in capsys.readouterr().out
    assert not out.exists()


def test_interactive_mode(tmp_path, roster_xlsx, monkeypatch, capsys):
    out = tmp_path / "teams.xlsx"
    answers = iter([str(roster_xlsx), str(out), "", "12"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert main(["--split-sheets"]) == 0
    assert load_workbook(out).sheetnames == ["Teams", "Team_0", "Team_1", "Team_2"]


def test_interactive_bad_team_size(monkeypatch):
    answers = iter(["in.xlsx", "out.xlsx", "", "many"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert main([]) == 2
