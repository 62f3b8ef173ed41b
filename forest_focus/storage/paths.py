# -*- coding: utf-8 -*-

import os
from pathlib import Path

APP_NAME = "ForestFocus"
DB_ENV_VAR = "FOREST_FOCUS_DB"


def user_data_dir(app_name: str = APP_NAME) -> Path:
    """Return per-user data dir (Windows/macOS/Linux)."""
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
    elif os.name == "posix":
        base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
    else:
        base = os.path.expanduser("~")
    return Path(base) / app_name


def default_db_path() -> str:
    """FOREST_FOCUS_DB if set, else forest_focus.db in the user data dir."""
    override = os.environ.get(DB_ENV_VAR)
    if override:
        return override
    path = user_data_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Database.open_or_memory reports the failure when it tries to open
        pass
    return str(path / "forest_focus.db")
