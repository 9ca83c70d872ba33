"""
Configuration helpers for locating the directory data file.

Environment variables
----
DOCDIR_DATA_PATH : path to the JSON data file (overrides the default location)
DOCDIR_WATCH : "true" / "false", reload the data file when it changes
CORS_ORIGINS : comma-separated origins allowed by the API
"""
import os
import sys
from pathlib import Path
from typing import List

from docdirectory.core.constants import DATA_FILE_NAMES

DATA_PATH_ENV = "DOCDIR_DATA_PATH"
WATCH_ENV = "DOCDIR_WATCH"
CORS_ENV = "CORS_ORIGINS"

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def get_data_dir() -> Path:
    """
    Get the OS-specific directory holding directory data.

    Returns
    ----
    Path
        ~/Library/Application Support/docdirectory on macOS,
        %APPDATA%/docdirectory on Windows, and
        $XDG_DATA_HOME/docdirectory (default ~/.local/share) elsewhere
    """
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "docdirectory"
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / "docdirectory"
    xdg = os.getenv("XDG_DATA_HOME")
    base = Path(xdg) if xdg else home / ".local" / "share"
    return base / "docdirectory"


def get_default_data_path() -> Path:
    """
    Get the default data file path.

    Prefers an existing ``doctors.json`` and falls back to ``users.json``
    (the account file that also holds doctor profiles). When neither exists
    the ``doctors.json`` path is returned.
    """
    data_dir = get_data_dir()
    for name in DATA_FILE_NAMES:
        candidate = data_dir / name
        if candidate.exists():
            return candidate
    return data_dir / DATA_FILE_NAMES[0]


def get_data_path() -> Path:
    """Data file path from DOCDIR_DATA_PATH, or the default location."""
    configured = os.getenv(DATA_PATH_ENV)
    if configured:
        return Path(configured).expanduser()
    return get_default_data_path()


def is_watch_enabled() -> bool:
    return os.getenv(WATCH_ENV, "true").lower() == "true"


def get_cors_origins() -> List[str]:
    origins = os.getenv(CORS_ENV, DEFAULT_CORS_ORIGINS).split(",")
    return [origin.strip() for origin in origins if origin.strip()]
