"""
starflow/features/aggregation/reducers.py

Pure deterministic rollups over the session log.
All reducers: (entries, catalog, range) -> number or read model.
Every call recomputes from scratch; nothing is cached.
"""

import random
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from starflow.features.calendar.weeks import days_in_month, week_range
from starflow.features.catalog.catalog import ActivityCatalog
from starflow.features.scoring.scoring_engine import (
    Activities,
    StarScoringEngine,
    qualifies,
    round_half_up,
)
from starflow.models.activity import Targets
from starflow.models.entry import SessionEntry
from starflow.models.score import ScoreBreakdown
from starflow.models.stats import MonthStats


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _indexed_for(entries: Sequence[SessionEntry], day: date) -> List[Tuple[int, SessionEntry]]:
    return [(index, entry) for index, entry in enumerate(entries) if entry.date == day]


def score_day(
    entries: Sequence[SessionEntry],
    day: date,
    activities: Activities,
    rng: Optional[random.Random] = None,
) -> List[Tuple[SessionEntry, ScoreBreakdown]]:
    """Breakdown for every entry on day, in log order."""
    catalog = ActivityCatalog.of(activities)
    return [
        (entry, StarScoringEngine.compute(entry, catalog, entries, position=index, rng=rng))
        for index, entry in _indexed_for(entries, day)
    ]


def daily_stars(entries: Sequence[SessionEntry], day: date, activities: Activities) -> float:
    """Sum of stars earned on day, rounded to 1 decimal."""
    return round_half_up(sum(b.stars_earned for _, b in score_day(entries, day, activities)), 1)


def _sum_days(entries: Sequence[SessionEntry], start: date, end: date, catalog: ActivityCatalog) -> float:
    total = 0.0
    for offset in range((end - start).days + 1):
        total += daily_stars(entries, start + timedelta(days=offset), catalog)
    return round_half_up(total, 1)


def week_stars(
    entries: Sequence[SessionEntry],
    year: int,
    month: int,
    week_number: int,
    activities: Activities,
) -> float:
    """
    Sum of daily stars over month-week week_number.

    The week is the fixed chunk [(n-1)*7+1, min(n*7, days_in_month)] of the
    month, not a Monday-aligned week.
    """
    start, end = week_range(year, month, week_number)
    return _sum_days(entries, start, end, ActivityCatalog.of(activities))


def month_stats(
    entries: Sequence[SessionEntry],
    year: int,
    month: int,
    activities: Activities,
    targets: Targets,
) -> MonthStats:
    """
    Month rollup.

    Count maps are keyed by every catalog id, 0 when unused. Orphaned
    entries never qualify, so they never show up in the counts.
    """
    catalog = ActivityCatalog.of(activities)
    activity_counts: Dict[str, int] = {activity_id: 0 for activity_id in catalog.ids()}
    mindful_counts: Dict[str, int] = {activity_id: 0 for activity_id in catalog.ids()}

    total = 0.0
    for day_number in range(1, days_in_month(year, month) + 1):
        day = date(year, month, day_number)
        scored = score_day(entries, day, catalog)
        total += round_half_up(sum(b.stars_earned for _, b in scored), 1)
        for entry, breakdown in scored:
            if not breakdown.qualified:
                continue
            activity_counts[entry.activity_id] += 1
            if entry.mindful:
                mindful_counts[entry.activity_id] += 1

    total = round_half_up(total, 1)
    return MonthStats(
        year=year,
        month=month,
        total=total,
        activity_counts=activity_counts,
        mindful_counts=mindful_counts,
        target_met=total >= targets.monthly_target,
        stretch_met=total >= targets.monthly_stretch,
    )


def calc_streak(
    entries: Sequence[SessionEntry],
    activities: Activities,
    today: Optional[date] = None,
) -> int:
    """
    Consecutive days ending today with at least one qualifying session.

    A today without a qualifying session yields 0, whatever came before.
    """
    catalog = ActivityCatalog.of(activities)
    active_days = {entry.date for entry in entries if qualifies(entry, catalog)}
    if not active_days:
        return 0

    current = today or _utc_today()
    streak = 0
    while current in active_days:
        streak += 1
        if current == date.min:
            break
        current -= timedelta(days=1)
    return streak


def goal_met(weekly_total: float, targets: Targets) -> bool:
    return weekly_total >= targets.weekly_star_target
