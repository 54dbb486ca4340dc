"""
Month-week partition.

Weeks here are fixed 7-day chunks of a month starting on the 1st:
days 1-7 are W1, 8-14 W2, ... and W5 holds whatever is left (29-31).
They are never Monday-aligned calendar weeks.
"""

import calendar
import math
import re
from datetime import date, timedelta
from typing import Tuple

from starflow.core.errors import ValidationError

WEEK_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-W(\d)$")


def days_in_month(year: int, month: int) -> int:
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def week_of_month(day: date) -> int:
    return math.ceil(day.day / 7)


def weeks_in_month(year: int, month: int) -> int:
    return math.ceil(days_in_month(year, month) / 7)


def week_range(year: int, month: int, week_number: int) -> Tuple[date, date]:
    """Inclusive [start, end] dates of a month-week."""
    if not 1 <= week_number <= weeks_in_month(year, month):
        raise ValidationError(f"week_number must be within 1..{weeks_in_month(year, month)}, got {week_number}")
    first = (week_number - 1) * 7 + 1
    last = min(week_number * 7, days_in_month(year, month))
    return date(year, month, first), date(year, month, last)


def week_key(year: int, month: int, week_number: int) -> str:
    return f"{year:04d}-{month:02d}-W{week_number}"


def week_key_for(day: date) -> str:
    return week_key(day.year, day.month, week_of_month(day))


def parse_week_key(key: str) -> Tuple[int, int, int]:
    """'2026-02-W3' -> (2026, 2, 3). Raises ValidationError for malformed keys."""
    match = WEEK_KEY_RE.match(key or "")
    if not match:
        raise ValidationError(f"Malformed week key: {key!r} (expected YYYY-MM-Wn)")
    year, month, week_number = (int(part) for part in match.groups())
    week_range(year, month, week_number)
    return year, month, week_number


def weekday_in_week(year: int, month: int, week_number: int, weekday: int) -> date:
    """First date inside the month-week falling on weekday (Monday=0), else the week's last day.

    Used to pick reveal days such as "the Friday of week 2".
    """
    start, end = week_range(year, month, week_number)
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        if day.weekday() == weekday:
            return day
    return end


def _check_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be within 1..12, got {month}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"year out of range: {year}")
