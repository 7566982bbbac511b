"""Calendar-month to season mapping used by lifecycle thresholds."""

from __future__ import annotations

from datetime import datetime

from nursery.enums.growth import Season


def season_for_month(month: int) -> Season:
    """Map a calendar month (1-12) to a season.

    March-May is Autumn, June-August Winter, September-November Spring and
    the remaining months Summer (southern-hemisphere calendar).
    """
    if month < 1 or month > 12:
        raise ValueError(f"Month {month} is outside the valid range (1-12).")
    if 3 <= month <= 5:
        return Season.AUTUMN
    if 6 <= month <= 8:
        return Season.WINTER
    if 9 <= month <= 11:
        return Season.SPRING
    return Season.SUMMER


def current_season(now: datetime | None = None) -> Season:
    """Season for the local time ``now`` (defaults to the current time)."""
    now = now or datetime.now()
    return season_for_month(now.month)
