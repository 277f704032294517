"""Handler for the 'log' subcommand.

Validates the duration, then appends a session dated today to the
sessions file.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from clistudy.data import Session, ValidationError, append_session


def validate_minutes(minutes: int) -> None:
    """Raise ValidationError unless minutes is strictly positive."""
    if minutes <= 0:
        raise ValidationError("Minutes must be positive.")


def run(path: Path, minutes: int, topic: str, today: Optional[date] = None) -> None:
    """Log a study session.

    Args:
        path: The sessions file.
        minutes: Duration of the session; must be positive.
        topic: Free-form label, stored exactly as given.
        today: Date to attribute the session to. Defaults to the local date.
    """
    validate_minutes(minutes)

    day = date.today() if today is None else today
    append_session(path, Session(date=day, minutes=minutes, topic=topic))

    print(f"Logged {minutes} minutes for '{topic}'.")
