"""Per-topic minute totals over a date range."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List, Tuple

from clistudy.data.models import Session

WEEK_DAYS = 7


def summarize(sessions: Iterable[Session], from_date: date, to_date: date) -> Dict[str, int]:
    """Sum minutes per topic for sessions dated within [from_date, to_date].

    Returns an empty dict when nothing matches, including when from_date > to_date.
    """
    totals: Dict[str, int] = {}
    for session in sessions:
        if from_date <= session.date <= to_date:
            totals[session.topic] = totals.get(session.topic, 0) + session.minutes
    return totals


def summarize_day(sessions: Iterable[Session], day: date) -> Dict[str, int]:
    return summarize(sessions, day, day)


def week_window(today: date) -> Tuple[date, date]:
    """Return the closed window of the last 7 calendar days, today included."""
    return today - timedelta(days=WEEK_DAYS - 1), today


def summarize_week(sessions: Iterable[Session], today: date) -> Dict[str, int]:
    from_date, to_date = week_window(today)
    return summarize(sessions, from_date, to_date)


def rank(summary: Dict[str, int]) -> List[Tuple[str, int]]:
    """Order summary entries by minutes, largest first. Ties keep insertion order."""
    return sorted(summary.items(), key=lambda item: item[1], reverse=True)
