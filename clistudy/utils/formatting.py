"""Formatting helpers for summary output."""

from __future__ import annotations

from typing import Dict, List

from clistudy.data.summary import rank

SEPARATOR = "-" * 25


def format_minutes(minutes: int) -> str:
    """Format a duration as '<n> min'."""
    return f"{minutes} min"


def format_summary(summary: Dict[str, int]) -> List[str]:
    """Return the ranked table lines for a summary, followed by the total."""
    lines = [f"- {topic}: {format_minutes(minutes)}" for topic, minutes in rank(summary)]
    total = sum(summary.values())
    lines.append(SEPARATOR)
    lines.append(f"Total: {format_minutes(total)}")
    return lines
