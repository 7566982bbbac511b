"""Utility functions for time handling.

Wall-clock timestamps are UTC and timezone-aware. Simulated plant age is
derived from ``epoch_seconds()`` so tests can substitute their own clock.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(timezone.utc)


def iso_now(*, timespec: str | None = None) -> str:
    """Return current UTC time as an ISO8601 string (timezone-aware)."""
    now = utc_now()
    if timespec:
        return now.isoformat(timespec=timespec)
    return now.isoformat()


def epoch_seconds() -> float:
    """Seconds since the epoch, the default plant clock."""
    return time.time()


def elapsed_sim_days(created_at: float, now: float, seconds_per_sim_day: float) -> float:
    """Convert elapsed real seconds into simulated days (never negative)."""
    if seconds_per_sim_day <= 0:
        raise ValueError("seconds_per_sim_day must be positive")
    return max(0.0, now - created_at) / seconds_per_sim_day
