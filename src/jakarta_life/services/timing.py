"""Clock and rounding helpers shared by the scorer and the weather adjuster."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

RUSH_HOUR_BANDS: tuple[tuple[int, int], ...] = ((7, 9), (17, 19))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (12.5 -> 13, -2.5 -> -2)."""

    return int(math.floor(value + 0.5))


def parse_hhmm(value: str) -> tuple[int, int]:
    """Parse ``"HH:mm"`` into ``(hours, minutes)``."""

    try:
        hours_str, minutes_str = value.strip().split(":")
        hours, minutes = int(hours_str), int(minutes_str)
    except (AttributeError, ValueError) as exc:
        raise ValueError(f"Invalid time '{value}', expected HH:mm") from exc
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValueError(f"Invalid time '{value}', expected HH:mm")
    return hours, minutes


def format_hhmm(total_minutes: int) -> str:
    """Format minutes since midnight as ``"HH:mm"``."""

    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def at_time(day: date | datetime, hhmm: str) -> datetime:
    """Return ``day`` at the given wall-clock time, keeping any tzinfo."""

    hours, minutes = parse_hhmm(hhmm)
    if isinstance(day, datetime):
        return day.replace(hour=hours, minute=minutes, second=0, microsecond=0)
    return datetime.combine(day, time(hours, minutes))


def now_in(timezone: str) -> datetime:
    """Current wall-clock time in the named IANA timezone."""

    return datetime.now(ZoneInfo(timezone))


def add_minutes(moment: datetime, minutes: int) -> datetime:
    return moment + timedelta(minutes=minutes)


def day_index(moment: date | datetime) -> int:
    """Day of week with Sunday = 0 through Saturday = 6."""

    return (moment.weekday() + 1) % 7


def is_rush_hour(hour: int) -> bool:
    """True when the clock hour falls in a rush band; the whole closing hour counts."""

    return any(start <= hour <= end for start, end in RUSH_HOUR_BANDS)
