"""
Star Service

Adapts a user document into engine inputs and assembles the read models
the app renders. Every call recomputes from the document snapshot it is
handed; nothing is cached between calls.
"""

import random
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from starflow.core.config import settings
from starflow.features.aggregation.milestones import milestone_for
from starflow.features.aggregation.reducers import (
    calc_streak,
    daily_stars,
    goal_met,
    month_stats,
    score_day,
    week_stars,
)
from starflow.features.calendar.weeks import week_key_for, week_of_month
from starflow.features.scoring.messages import pick_encouragement
from starflow.features.scoring.scoring_engine import StarScoringEngine
from starflow.models.document import UserDocument
from starflow.models.entry import SessionEntry
from starflow.models.score import ScoreBreakdown
from starflow.models.stats import StarSummary


def message_rng(seed: Optional[int] = None) -> random.Random:
    """Random source for flavor text; seeded from configuration when set."""
    if seed is None:
        seed = settings.MESSAGE_SEED
    return random.Random(seed)


class StarService:
    """Document-level scoring and rollups."""

    @staticmethod
    def today() -> date:
        return datetime.now(timezone.utc).date()

    @staticmethod
    def preview(document: UserDocument, entry: SessionEntry, rng: Optional[random.Random] = None) -> ScoreBreakdown:
        """Breakdown for entry as if it were appended to the log now."""
        return StarScoringEngine.compute(entry, document.activities, document.entries, rng=rng)

    @staticmethod
    def entries_for_day(
        document: UserDocument,
        day: date,
        rng: Optional[random.Random] = None,
    ) -> List[Tuple[SessionEntry, ScoreBreakdown]]:
        return score_day(document.entries, day, document.activities, rng=rng)

    @staticmethod
    def summary(
        document: UserDocument,
        today: Optional[date] = None,
        rng: Optional[random.Random] = None,
    ) -> StarSummary:
        """Home view numbers: today, this month-week, streak, month and milestone."""
        today = today or StarService.today()
        catalog = document.activities

        week_total = week_stars(document.entries, today.year, today.month, week_of_month(today), catalog)
        month = month_stats(document.entries, today.year, today.month, catalog, document.targets)
        streak = calc_streak(document.entries, catalog, today=today)

        return StarSummary(
            today=today,
            today_stars=daily_stars(document.entries, today, catalog),
            week_key=week_key_for(today),
            week_stars=week_total,
            weekly_goal_met=goal_met(week_total, document.targets),
            streak=streak,
            month=month,
            milestone=milestone_for(month, week_total, document.targets, streak),
            encouragement=pick_encouragement(rng),
        )
