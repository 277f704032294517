"""Handler for the 'today' subcommand."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from clistudy.data import load_sessions, summarize_day
from clistudy.utils.formatting import format_summary


def run(path: Path, today: Optional[date] = None) -> None:
    """Print today's per-topic totals, or a notice if nothing was logged."""
    day = date.today() if today is None else today
    summary = summarize_day(load_sessions(path), day)

    if not summary:
        print("No sessions logged for today yet.")
        return

    print("Today's study summary:")
    for line in format_summary(summary):
        print(line)
