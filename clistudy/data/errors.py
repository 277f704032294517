"""Error kinds raised by the clistudy data layer.

The message of each error is meant to be shown to the user as is. Only the
CLI entry point prints them and decides the exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class StudyError(Exception):
    """Base class for all clistudy errors."""


class StorageUnavailable(StudyError):
    """The data directory cannot be located or created, or the file cannot be read."""


class CorruptStore(StudyError):
    """The sessions file exists but does not hold a valid session list."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class WriteFailure(StudyError):
    """The sessions file could not be written."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ValidationError(StudyError):
    """User input was rejected before any storage access."""
