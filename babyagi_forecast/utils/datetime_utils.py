"""Date, time and duration utilities."""

import time
from datetime import datetime


SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


def now_ms() -> int:
    """Get the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def ms_to_datetime(timestamp_ms: float) -> datetime:
    """Convert epoch milliseconds to a local datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000)


def format_duration(milliseconds: float, coarse: bool = False) -> str:
    """Format a duration compactly, e.g. ``3d 5h``, ``2h 14m`` or ``37m``.

    Below one minute the result is whole seconds (``42s``), or ``<1m`` when
    ``coarse`` is set.
    """
    seconds = int(milliseconds // SECOND_MS)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days}d {hours % 24}h"
    if hours > 0:
        return f"{hours}h {minutes % 60}m"
    if minutes > 0:
        return f"{minutes}m"
    if coarse:
        return "<1m"
    return f"{max(seconds, 0)}s"
