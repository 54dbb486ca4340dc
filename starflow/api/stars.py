"""
Stars API Endpoints

POST /v1/stars/preview: breakdown for a session before it is logged
POST /v1/stars/entries: breakdown for every session on a date
POST /v1/stars/daily: stars for one date
POST /v1/stars/week: stars for one month-week
POST /v1/stars/month: month rollup
POST /v1/stars/summary: home view numbers
"""

from fastapi import APIRouter

from starflow.api.schemas import DayRequest, EntryRequest, MonthRequest, SummaryRequest, WeekRequest
from starflow.features.aggregation.reducers import daily_stars, goal_met, month_stats, week_stars
from starflow.features.calendar.weeks import week_key
from starflow.features.stars.service import StarService, message_rng

router = APIRouter(prefix="/v1/stars", tags=["stars"])


@router.post("/preview")
def preview_session(body: EntryRequest) -> dict:
    """
    Score a session as if it were appended to the log now.

    Returns:
        {"data": {"baseStars": 1.0, "presenceBonus": 0.5, "reentryMultiplier": 1.0,
                  "pacingMultiplier": 0.7, "starsEarned": 1.05, "message": "...", ...}}
    """
    document = body.load()
    breakdown = StarService.preview(document, body.entry, rng=message_rng())
    return {"data": breakdown.to_dict()}


@router.post("/entries")
def score_entries(body: DayRequest) -> dict:
    document = body.load()
    scored = StarService.entries_for_day(document, body.date, rng=message_rng())
    return {
        "data": [
            {
                "index": index,
                "entry": entry.model_dump(mode="json", by_alias=True),
                "breakdown": breakdown.to_dict(),
            }
            for index, (entry, breakdown) in enumerate(scored)
        ]
    }


@router.post("/daily")
def get_daily_stars(body: DayRequest) -> dict:
    document = body.load()
    return {"data": {"date": body.date.isoformat(), "stars": daily_stars(document.entries, body.date, document.activities)}}


@router.post("/week")
def get_week_stars(body: WeekRequest) -> dict:
    document = body.load()
    total = week_stars(document.entries, body.year, body.month, body.week, document.activities)
    return {
        "data": {
            "weekKey": week_key(body.year, body.month, body.week),
            "stars": total,
            "goalMet": goal_met(total, document.targets),
        }
    }


@router.post("/month")
def get_month_stats(body: MonthRequest) -> dict:
    document = body.load()
    stats = month_stats(document.entries, body.year, body.month, document.activities, document.targets)
    return {"data": stats.model_dump(mode="json", by_alias=True)}


@router.post("/summary")
def get_summary(body: SummaryRequest) -> dict:
    document = body.load()
    summary = StarService.summary(document, today=body.today, rng=message_rng())
    return {"data": summary.model_dump(mode="json", by_alias=True)}
