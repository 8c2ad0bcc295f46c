import os
import re
import json
from pathlib import Path
from typing import Any

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATA_DIR = BASE_DIR / "data"


def load_json(path: Path, default: Any):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return default


_NBSP_RE = re.compile(r"[\u00A0\u2007\u202F]")  # NBSP variants


def norm_text(s: Any) -> str:
    """
    Loose text normalization for matching user input against sheet content:
    - BOM / non-breaking spaces
    - surrounding quotes
    - lower case
    - collapsed whitespace
    """
    if s is None:
        return ""

    s = str(s)

    # invisible characters that Excel/CSV exports like to leave behind
    s = s.replace("\ufeff", "")
    s = _NBSP_RE.sub(" ", s)
    s = s.strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ('"', "'"):
        s = s[1:-1].strip()
    s = s.lower()
    s = re.sub(r"\s+", " ", s).strip()
    return s


def settings_path() -> Path:
    override = os.environ.get("TEAMGEN_CONFIG")
    if override:
        return Path(override)
    return DEFAULT_DATA_DIR / "settings.json"
