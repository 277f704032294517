"""Data layer for clistudy."""

from clistudy.data.errors import CorruptStore, StorageUnavailable, StudyError, ValidationError, WriteFailure
from clistudy.data.models import Session
from clistudy.data.store import append_session, load_sessions, save_sessions
from clistudy.data.summary import rank, summarize, summarize_day, summarize_week, week_window

__all__ = [
    "CorruptStore",
    "Session",
    "StorageUnavailable",
    "StudyError",
    "ValidationError",
    "WriteFailure",
    "append_session",
    "load_sessions",
    "rank",
    "save_sessions",
    "summarize",
    "summarize_day",
    "summarize_week",
    "week_window",
]
