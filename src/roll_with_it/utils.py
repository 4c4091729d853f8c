"""Shared utility functions."""
from __future__ import annotations

from datetime import datetime, timezone


def time_ago(moment: datetime, now: datetime | None = None) -> str:
    """Relative label for a past moment: 'Just now', '5m ago', '2h ago'.

    Anything a day old or more is shown as a clock time.
    """
    now = now or datetime.now(timezone.utc)
    seconds = int((now - moment).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    if seconds < 60:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    return moment.astimezone().strftime("%H:%M:%S")
