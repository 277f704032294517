"""Path utilities for locating the clistudy data file."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from clistudy.data.errors import StorageUnavailable

logger = logging.getLogger(__name__)

APP_NAME = "clistudy"
SESSIONS_FILE = "sessions.json"


def get_platform_data_dir() -> Path:
    """Return the per-user application data directory for this platform.

    Windows: %APPDATA%, macOS: ~/Library/Application Support,
    elsewhere: $XDG_DATA_HOME or ~/.local/share.
    """
    try:
        if sys.platform.startswith("win"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return Path.home() / "AppData" / "Roaming"
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support"
        xdg = os.environ.get("XDG_DATA_HOME")
        # Relative XDG paths are invalid per the basedir spec
        if xdg and os.path.isabs(xdg):
            return Path(xdg)
        return Path.home() / ".local" / "share"
    except RuntimeError as exc:
        raise StorageUnavailable(f"Could not find data directory: {exc}") from exc


def get_data_dir() -> Path:
    """Return clistudy data dir: <platform data dir>/clistudy."""
    return get_platform_data_dir() / APP_NAME


def get_sessions_path(data_dir: Optional[Path] = None) -> Path:
    """Return full path to sessions.json, creating its directory if needed.

    Safe to call repeatedly; an existing directory is left as is.

    Raises:
        StorageUnavailable: If the directory cannot be created.
    """
    root = get_data_dir() if data_dir is None else data_dir

    if not root.is_dir():
        logger.debug("Creating data directory %s", root)
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(f"Cannot create data directory {root}: {exc}") from exc

    return root / SESSIONS_FILE
