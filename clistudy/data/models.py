"""Data models for study sessions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping


@dataclass
class Session:
    """A single logged study session."""

    date: date
    minutes: int
    topic: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form: ISO calendar date, integer minutes, topic text."""
        return {
            "date": self.date.isoformat(),
            "minutes": self.minutes,
            "topic": self.topic,
        }

    @classmethod
    def from_dict(cls, entry: Mapping[str, Any]) -> "Session":
        """Build a Session from one decoded JSON object.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field has the wrong JSON type.
            ValueError: If the date is not a YYYY-MM-DD string.
        """
        raw_date = entry["date"]
        minutes = entry["minutes"]
        topic = entry["topic"]

        if not isinstance(raw_date, str):
            raise TypeError(f"date must be a string, got {type(raw_date).__name__}")
        # bool is an int subclass but never a valid duration
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            raise TypeError(f"minutes must be an integer, got {type(minutes).__name__}")
        if not isinstance(topic, str):
            raise TypeError(f"topic must be a string, got {type(topic).__name__}")

        # fromisoformat also takes "20240101" and week dates on newer Pythons
        day = datetime.strptime(raw_date, "%Y-%m-%d").date()
        if day.isoformat() != raw_date:
            raise ValueError(f"date must be YYYY-MM-DD, got {raw_date!r}")

        return cls(date=day, minutes=minutes, topic=topic)
