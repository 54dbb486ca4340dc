"""
starflow/tests/test_aggregation_reducers.py

Tests for daily/weekly/monthly rollups, streaks and milestones.
Dates are in February 2026 (28 days, the 1st is a Sunday).
"""

from datetime import date

import pytest

from starflow.core.errors import ValidationError
from starflow.features.aggregation.milestones import MILESTONE_COPY, milestone_for, milestone_key
from starflow.features.aggregation.reducers import (
    calc_streak,
    daily_stars,
    goal_met,
    month_stats,
    score_day,
    week_stars,
)
from starflow.features.scoring.scoring_engine import StarScoringEngine
from starflow.models.activity import Targets
from starflow.models.stats import MonthStats


@pytest.fixture
def february_log(make_entry):
    """One walk on the 7th, 8th, 14th and 15th, plus extras on the 15th and 16th."""
    return [
        make_entry("2026-02-07"),
        make_entry("2026-02-08"),
        make_entry("2026-02-14"),  # five missed days -> 1.5
        make_entry("2026-02-15"),
        make_entry("2026-02-15", "meditate", minutes=15, mindful=True),  # 1.5 * 0.7
        make_entry("2026-02-15", "swim", minutes=40),  # orphaned activity
        make_entry("2026-02-16", minutes=10),  # too short
    ]


class TestDailyStars:
    def test_sum_of_entry_scores(self, activities, make_entry):
        log = [make_entry("2026-02-03"), make_entry("2026-02-03", minutes=30, mindful=True)]
        per_entry = [StarScoringEngine.compute(e, activities, log, position=i).stars_earned for i, e in enumerate(log)]

        assert per_entry == [1.0, 1.05]
        assert daily_stars(log, date(2026, 2, 3), activities) == 2.1
        assert daily_stars(log, date(2026, 2, 3), activities) == pytest.approx(sum(per_entry), abs=0.05 + 1e-9)

    def test_day_without_entries(self, activities, february_log):
        assert daily_stars(february_log, date(2026, 2, 1), activities) == 0.0

    def test_only_entries_on_that_date(self, activities, february_log):
        assert daily_stars(february_log, date(2026, 2, 15), activities) == 2.1
        assert daily_stars(february_log, date(2026, 2, 16), activities) == 0.0

    def test_score_day_keeps_log_order(self, activities, february_log):
        scored = score_day(february_log, date(2026, 2, 15), activities)
        assert [entry.activity_id for entry, _ in scored] == ["walk", "meditate", "swim"]
        assert [b.stars_earned for _, b in scored] == [1.0, 1.05, 0.0]


class TestWeekStars:
    """Weeks are fixed 7-day chunks from the 1st, never Monday-aligned."""

    def test_fixed_partition(self, activities, february_log):
        assert week_stars(february_log, 2026, 2, 1, activities) == 1.0
        assert week_stars(february_log, 2026, 2, 2, activities) == 2.5
        assert week_stars(february_log, 2026, 2, 3, activities) == 2.1
        assert week_stars(february_log, 2026, 2, 4, activities) == 0.0

    def test_week_equals_sum_of_its_days(self, activities, february_log):
        days = [date(2026, 2, d) for d in range(8, 15)]
        assert week_stars(february_log, 2026, 2, 2, activities) == pytest.approx(
            sum(daily_stars(february_log, d, activities) for d in days)
        )

    def test_not_monday_aligned(self, activities, february_log):
        # Feb 2-8 2026 is a Monday-Sunday week; it would hold the 7th and 8th
        monday_week = sum(daily_stars(february_log, date(2026, 2, d), activities) for d in range(2, 9))
        assert monday_week == 2.0
        assert week_stars(february_log, 2026, 2, 1, activities) != monday_week

    def test_fifth_week_is_short(self, activities, make_entry):
        log = [make_entry("2026-03-29"), make_entry("2026-03-31"), make_entry("2026-04-01")]
        assert week_stars(log, 2026, 3, 5, activities) == 2.2  # 1.0 + 1.2 (one missed day)

    def test_last_representable_week(self, activities, make_entry):
        log = [make_entry("9999-12-30"), make_entry("9999-12-31")]
        assert week_stars(log, 9999, 12, 5, activities) == 2.0

    def test_week_outside_month_rejected(self, activities, february_log):
        with pytest.raises(ValidationError):
            week_stars(february_log, 2026, 2, 5, activities)


class TestMonthStats:
    def test_totals_and_counts(self, activities, targets, february_log):
        stats = month_stats(february_log, 2026, 2, activities, targets)

        assert isinstance(stats, MonthStats)
        assert stats.total == 5.6
        assert stats.activity_counts == {"walk": 4, "yoga": 0, "meditate": 1}
        assert stats.mindful_counts == {"walk": 0, "yoga": 0, "meditate": 1}
        assert "swim" not in stats.activity_counts

    def test_target_flags(self, activities, targets, february_log):
        stats = month_stats(february_log, 2026, 2, activities, targets)
        assert stats.target_met is True
        assert stats.stretch_met is False

        generous = Targets(weekly_star_target=1, monthly_target=1, monthly_stretch=5)
        assert month_stats(february_log, 2026, 2, activities, generous).stretch_met is True

    def test_other_months_ignored(self, activities, targets, february_log):
        stats = month_stats(february_log, 2026, 3, activities, targets)
        assert stats.total == 0.0
        assert stats.target_met is False

    def test_empty_catalog_degrades_to_zero(self, targets, february_log):
        stats = month_stats(february_log, 2026, 2, [], targets)
        assert stats.total == 0.0
        assert stats.activity_counts == {}


class TestStreak:
    def test_consecutive_days_ending_today(self, activities, make_entry):
        log = [make_entry("2026-02-10"), make_entry("2026-02-11"), make_entry("2026-02-12")]
        assert calc_streak(log, activities, today=date(2026, 2, 12)) == 3

    def test_gap_stops_the_count(self, activities, make_entry):
        log = [make_entry("2026-02-08"), make_entry("2026-02-10"), make_entry("2026-02-11")]
        assert calc_streak(log, activities, today=date(2026, 2, 11)) == 2

    def test_today_without_session_is_zero(self, activities, make_entry):
        log = [make_entry("2026-02-10"), make_entry("2026-02-11"), make_entry("2026-02-12")]
        assert calc_streak(log, activities, today=date(2026, 2, 13)) == 0

    def test_short_session_today_does_not_count(self, activities, make_entry):
        log = [make_entry("2026-02-12"), make_entry("2026-02-13", minutes=10)]
        assert calc_streak(log, activities, today=date(2026, 2, 13)) == 0

    def test_streak_reaching_earliest_date(self, activities, make_entry):
        log = [make_entry("0001-01-01"), make_entry("0001-01-02")]
        assert calc_streak(log, activities, today=date(1, 1, 2)) == 2
        assert calc_streak(log, activities, today=date.min) == 1

    def test_no_qualifying_entries(self, activities, make_entry):
        log = [make_entry("2026-02-13", minutes=5), make_entry("2026-02-13", "swim", minutes=60)]
        assert calc_streak(log, activities, today=date(2026, 2, 13)) == 0
        assert calc_streak([], activities) == 0


class TestGoalAndMilestones:
    def test_goal_met_is_inclusive(self, targets):
        assert goal_met(3.0, targets)
        assert not goal_met(2.9, targets)

    def _month(self, total, target_met=False, stretch_met=False):
        return MonthStats(
            year=2026, month=2, total=total, activity_counts={}, mindful_counts={},
            target_met=target_met, stretch_met=stretch_met,
        )

    def test_highest_milestone_wins(self, targets):
        assert milestone_key(self._month(9, True, True), 4, targets, 20) == "monthly_stretch"
        assert milestone_key(self._month(6, True), 4, targets, 20) == "monthly_target"
        assert milestone_key(self._month(4), 3, targets, 20) == "weekly_goal"
        assert milestone_key(self._month(4), 1, targets, 14) == "streak_14"
        assert milestone_key(self._month(4), 1, targets, 8) == "streak_7"
        assert milestone_key(self._month(4), 1, targets, 3) == "streak_3"

    def test_no_milestone(self, targets):
        assert milestone_for(self._month(1), 1, targets, 2) is None

    def test_copy_lookup(self, targets):
        assert milestone_for(self._month(4), 3, targets, 0) == MILESTONE_COPY["weekly_goal"]
