"""Milestone copy shown on the home view. One line, highest achievement wins."""

from typing import Optional

from starflow.features.aggregation.reducers import goal_met
from starflow.models.activity import Targets
from starflow.models.stats import MonthStats

MILESTONE_COPY = {
    "monthly_stretch": "You reached the far stars. Legendary.",
    "monthly_target": "Monthly constellation complete. Celebrate.",
    "weekly_goal": "A new constellation is forming.",
    "streak_14": "Two weeks luminous. This is who you are now.",
    "streak_7": "A full week of starlight. Powerful.",
    "streak_3": "Three nights glowing. A habit takes shape.",
}

STREAK_MILESTONES = (14, 7, 3)


def milestone_key(month: MonthStats, week_total: float, targets: Targets, streak: int) -> Optional[str]:
    if month.stretch_met:
        return "monthly_stretch"
    if month.target_met:
        return "monthly_target"
    if goal_met(week_total, targets):
        return "weekly_goal"
    for length in STREAK_MILESTONES:
        if streak >= length:
            return f"streak_{length}"
    return None


def milestone_for(month: MonthStats, week_total: float, targets: Targets, streak: int) -> Optional[str]:
    key = milestone_key(month, week_total, targets, streak)
    return MILESTONE_COPY[key] if key else None
