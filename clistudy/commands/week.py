"""Handler for the 'week' subcommand.

Reports totals over the last 7 calendar days, today included.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from clistudy.data import load_sessions, summarize_week
from clistudy.utils.formatting import format_summary


def run(path: Path, today: Optional[date] = None) -> None:
    """Print per-topic totals for the last 7 days, or a notice if empty."""
    day = date.today() if today is None else today
    summary = summarize_week(load_sessions(path), day)

    if not summary:
        print("No sessions logged in the last 7 days.")
        return

    print("Last 7 days summary:")
    for line in format_summary(summary):
        print(line)
