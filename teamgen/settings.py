from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .partition import DEFAULT_TEAM_SIZE
from .utils import load_json, settings_path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    team_size: int = DEFAULT_TEAM_SIZE
    shuffle: bool = True
    split_sheets: bool = False
    include_summary: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None


_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off", ""}


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name} must be true or false, got {value!r}")


def _from_mapping(data: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    values = {k: v for k, v in data.items() if k in known}
    if "team_size" in values:
        values["team_size"] = int(values["team_size"])
    for flag in ("shuffle", "split_sheets", "include_summary"):
        if flag in values:
            values[flag] = _as_bool(flag, values[flag])
    if "log_level" in values:
        values["log_level"] = str(values["log_level"]).upper()
    return Settings(**values)


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from a JSON file (data/settings.json unless `path` or the
    TEAMGEN_CONFIG variable says otherwise), then apply the TEAMGEN_TEAM_SIZE,
    TEAMGEN_LOG_LEVEL and TEAMGEN_LOG_FILE environment overrides.

    A missing or unreadable file gives the built-in defaults.
    """
    data = load_json(path or settings_path(), {})
    if not isinstance(data, dict):
        data = {}
    settings = _from_mapping(data)

    env_size = os.environ.get("TEAMGEN_TEAM_SIZE")
    if env_size:
        settings = replace(settings, team_size=int(env_size))
    env_level = os.environ.get("TEAMGEN_LOG_LEVEL")
    if env_level:
        settings = replace(settings, log_level=env_level.upper())
    env_file = os.environ.get("TEAMGEN_LOG_FILE")
    if env_file:
        settings = replace(settings, log_file=env_file)
    return settings


def setup_logging(settings: Settings) -> None:
    kwargs: Dict[str, Any] = {
        "level": getattr(logging, settings.log_level, logging.INFO),
        "format": LOG_FORMAT,
    }
    if settings.log_file:
        kwargs["filename"] = settings.log_file
    logging.basicConfig(**kwargs)
