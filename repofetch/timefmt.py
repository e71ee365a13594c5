"""Rendering of commit timestamps as relative or ISO 8601 text."""

from __future__ import annotations

import time
from datetime import datetime, timezone

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY


def _period(n: int, unit: int, single: str, plural: str) -> str:
    count = max(n // unit, 2)
    return f"{count} {plural}" if count != 1 else single


def _rough_period(seconds: int) -> str | None:
    """Describe an absolute duration roughly; None means "now"."""
    n = abs(seconds)
    if n > 547 * _DAY:
        return _period(n, _YEAR, "a year", "years")
    if n > 345 * _DAY:
        return "a year"
    if n > 45 * _DAY:
        return _period(n, _MONTH, "a month", "months")
    if n > 29 * _DAY:
        return "a month"
    if n > 10 * _DAY + 12 * _HOUR:
        return _period(n, _WEEK, "a week", "weeks")
    if n > 6 * _DAY + 12 * _HOUR:
        return "a week"
    if n > 36 * _HOUR:
        return _period(n, _DAY, "a day", "days")
    if n > 22 * _HOUR:
        return "a day"
    if n > 90 * _MINUTE:
        return _period(n, _HOUR, "an hour", "hours")
    if n > 45 * _MINUTE:
        return "an hour"
    if n > 90:
        return _period(n, _MINUTE, "a minute", "minutes")
    if n > 45:
        return "a minute"
    if n > 10:
        return f"{n} seconds"
    return None


def human_time(seconds: int, now: float | None = None) -> str:
    """Describe a Unix timestamp relative to ``now`` (default: current time)."""
    current = int(time.time() if now is None else now)
    delta = current - int(seconds)
    period = _rough_period(delta)
    if period is None:
        return "now"
    if delta >= 0:
        return f"{period} ago"
    return f"in {period}"


def format_time(seconds: int, iso_time: bool, now: float | None = None) -> str:
    """Format a Unix timestamp as RFC 3339 in UTC, or relative to ``now``."""
    if iso_time:
        moment = datetime.fromtimestamp(int(seconds), tz=timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%SZ")
    return human_time(seconds, now)