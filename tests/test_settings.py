import json

import pytest

from teamgen.settings import Settings, load_settings


def test_defaults_when_file_missing(tmp_path):
    assert load_settings(tmp_path / "absent.json") == Settings()


def test_values_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "team_size": "4",
        "shuffle": False,
        "log_level": "debug",
        "unknown_key": 1,
    }))

    settings = load_settings(path)

    assert settings.team_size == 4
    assert settings.shuffle is False
    assert settings.log_level == "DEBUG"


def test_environment_overrides(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"team_size": 4}))
    monkeypatch.setenv("TEAMGEN_CONFIG", str(path))
    monkeypatch.setenv("TEAMGEN_TEAM_SIZE", "6")
    monkeypatch.setenv("TEAMGEN_LOG_LEVEL", "error")

    settings = load_settings()

    assert settings.team_size == 6
    assert settings.log_level == "ERROR"


def test_invalid_team_size(monkeypatch, tmp_path):
    monkeypatch.setenv("TEAMGEN_TEAM_SIZE", "ten")
    with pytest.raises(ValueError):
        load_settings(tmp_path / "absent.json")


def test_flags_accept_json_strings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"shuffle": "false", "split_sheets": "Yes", "include_summary": 0}))

    settings = load_settings(path)

    assert settings.shuffle is False
    assert settings.split_sheets is True
    assert settings.include_summary is False


def test_invalid_flag(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"shuffle": "sometimes"}))
    with pytest.raises(ValueError, match="shuffle"):
        load_settings(path)
