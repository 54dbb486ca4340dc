"""Monday-first month grid for the calendar view. Presentation only."""

from datetime import date
from typing import List

from starflow.features.calendar.weeks import days_in_month

BLANK = 0


def calendar_weeks(year: int, month: int) -> List[List[int]]:
    """
    Rows of seven day numbers, Monday first, 0 for cells outside the month.

    >>> calendar_weeks(2026, 2)[0]
    [0, 0, 0, 0, 0, 0, 1]
    """
    total_days = days_in_month(year, month)
    # date.weekday() is already Monday=0, so it is the count of leading blanks
    offset = date(year, month, 1).weekday()

    weeks: List[List[int]] = []
    week = [BLANK] * offset
    for day in range(1, total_days + 1):
        week.append(day)
        if len(week) == 7:
            weeks.append(week)
            week = []
    if week:
        week.extend([BLANK] * (7 - len(week)))
        weeks.append(week)
    return weeks
