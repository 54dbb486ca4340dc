from fastapi import APIRouter, Path

from starflow.features.calendar.grid import calendar_weeks
from starflow.features.calendar.weeks import week_key, weeks_in_month

router = APIRouter(prefix="/v1/calendar", tags=["calendar"])


@router.get("/{year}/{month}")
def get_calendar(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
):
    """Monday-first grid (0 = blank cell) plus the month-week keys of the month."""
    return {
        "data": {
            "year": year,
            "month": month,
            "weeks": calendar_weeks(year, month),
            "weekKeys": [week_key(year, month, n) for n in range(1, weeks_in_month(year, month) + 1)],
        }
    }
