from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from ..core.exceptions import InvalidTimeFormat, ValidationError

_HHMM = re.compile(r"([01]\d|2[0-3]):([0-5]\d)")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_minutes(hhmm: str) -> int:
    """Parse "HH:MM" into minutes since midnight."""
    match = _HHMM.fullmatch(hhmm) if isinstance(hhmm, str) else None
    if not match:
        raise InvalidTimeFormat(f"Invalid time (HH:MM): {hhmm!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def format_minutes(minutes: int) -> str:
    """Inverse of ``to_minutes``."""
    if not 0 <= int(minutes) < 24 * 60:
        raise InvalidTimeFormat(f"Minutes out of range for a time of day: {minutes!r}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def hours_between(start: str, end: str) -> float:
    """Hours from ``start`` to ``end``; negative when ``end`` is earlier."""
    return (to_minutes(end) - to_minutes(start)) / 60


def is_sunday(day: date) -> bool:
    return day.weekday() == 6


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def month_label(day: date) -> str:
    return day.strftime("%B %Y")


def week_start(day: date) -> date:
    """Sunday that opens the week containing ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)
