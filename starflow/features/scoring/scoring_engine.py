"""
Star Scoring Engine

Pure, deterministic computation of the stars one logged session earns.
No external calls, no side effects. The only randomness is the flavor
message, drawn from an injected source and never used in totals.

Scoring rules:
- Base 1.0 star once the session meets its activity's minimum duration
- Presence bonus +0.5 for the first mindful qualifying session of the day
- Reentry multiplier rewards coming back after missed days (1.0..1.5)
- Pacing multiplier shrinks each extra session the same day (1.0..0.35)
- stars = (base + presence) * reentry * pacing, rounded to 2 decimals

"Earlier" always means earlier in the log, not earlier in wall-clock time.
Sessions too short, or for an activity missing from the catalog, score zero.
"""

import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence, Union

from starflow.features.catalog.catalog import ActivityCatalog
from starflow.features.scoring.messages import session_message
from starflow.models.activity import ActivityDefinition
from starflow.models.entry import SessionEntry
from starflow.models.score import ScoreBreakdown

Activities = Union[ActivityCatalog, Iterable[ActivityDefinition], None]


def round_half_up(value: float, places: int) -> float:
    """Round like a person would: 2.05 -> 2.1, never banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def qualifies(entry: SessionEntry, catalog: ActivityCatalog) -> bool:
    """True when the entry's activity exists and the duration meets its minimum."""
    activity = catalog.get(entry.activity_id)
    return activity is not None and entry.duration_minutes >= activity.min_duration_minutes


class StarScoringEngine:
    """Pure per-session star scoring."""

    BASE_STARS = 1.0
    PRESENCE_BONUS = 0.5

    # Days scanned backwards when looking for the previous active day
    REENTRY_LOOKBACK_DAYS = 14

    REENTRY_MULTIPLIERS = {0: 1.0, 1: 1.2, 2: 1.35}
    REENTRY_MULTIPLIER_MAX = 1.5

    PACING_MULTIPLIERS = {1: 1.0, 2: 0.7, 3: 0.5}
    PACING_MULTIPLIER_FLOOR = 0.35

    @staticmethod
    def compute(
        entry: SessionEntry,
        activities: Activities,
        all_entries: Sequence[SessionEntry],
        *,
        position: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> ScoreBreakdown:
        """
        Score one session against the rest of the log.

        Args:
            entry: Session to score
            activities: Activity catalog (or plain list of definitions)
            all_entries: Full ordered log; may or may not contain entry
            position: Index of entry in all_entries. When omitted the entry is
                located by identity; if it is not in the log (a preview) it is
                scored as if appended at the end.
            rng: Random source for the flavor message

        Returns:
            ScoreBreakdown; all zeros when the session does not qualify
        """
        catalog = ActivityCatalog.of(activities)
        if not qualifies(entry, catalog):
            return ScoreBreakdown()

        index = StarScoringEngine._resolve_position(entry, all_entries, position)
        earlier_same_day = [
            other
            for other in all_entries[:index]
            if other.date == entry.date and qualifies(other, catalog)
        ]

        presence = StarScoringEngine._presence_bonus(entry, earlier_same_day)
        missed = StarScoringEngine.missed_days(entry, catalog, all_entries)
        reentry = StarScoringEngine.reentry_multiplier(missed)
        pacing_index = len(earlier_same_day) + 1
        pacing = StarScoringEngine.pacing_multiplier(pacing_index)

        stars = round_half_up((StarScoringEngine.BASE_STARS + presence) * reentry * pacing, 2)

        breakdown = ScoreBreakdown(
            base_stars=StarScoringEngine.BASE_STARS,
            presence_bonus=presence,
            reentry_multiplier=reentry,
            pacing_multiplier=pacing,
            stars_earned=stars,
            message=session_message(missed, presence, rng),
            missed_days=missed,
            pacing_index=pacing_index,
        )
        breakdown.validate()
        return breakdown

    @staticmethod
    def reentry_multiplier(missed_days: int) -> float:
        """1.0 after an active yesterday, up to 1.5 after three or more missed days."""
        if missed_days < 0:
            raise ValueError(f"missed_days must be >= 0, got {missed_days}")
        return StarScoringEngine.REENTRY_MULTIPLIERS.get(missed_days, StarScoringEngine.REENTRY_MULTIPLIER_MAX)

    @staticmethod
    def pacing_multiplier(pacing_index: int) -> float:
        """1.0 for the day's first session, shrinking to 0.35 from the fourth on."""
        if pacing_index < 1:
            raise ValueError(f"pacing_index is 1-based, got {pacing_index}")
        return StarScoringEngine.PACING_MULTIPLIERS.get(pacing_index, StarScoringEngine.PACING_MULTIPLIER_FLOOR)

    @staticmethod
    def missed_days(entry: SessionEntry, activities: Activities, all_entries: Sequence[SessionEntry]) -> int:
        """
        Fully missed days between the previous active day and entry.date.

        Scans back REENTRY_LOOKBACK_DAYS. Nothing found in the window counts as
        a long absence if there is older qualifying history, and as a fresh
        start (0) if this is the first qualifying day ever logged.
        """
        catalog = ActivityCatalog.of(activities)
        active_days = {
            other.date
            for other in all_entries
            if other.date < entry.date and qualifies(other, catalog)
        }
        gaps = [(entry.date - day).days for day in active_days]
        recent = [gap for gap in gaps if gap <= StarScoringEngine.REENTRY_LOOKBACK_DAYS]
        if recent:
            return min(recent) - 1
        if active_days:
            return StarScoringEngine.REENTRY_LOOKBACK_DAYS
        return 0

    @staticmethod
    def _presence_bonus(entry: SessionEntry, earlier_same_day: Sequence[SessionEntry]) -> float:
        if not entry.mindful:
            return 0.0
        if any(other.mindful for other in earlier_same_day):
            return 0.0
        return StarScoringEngine.PRESENCE_BONUS

    @staticmethod
    def _resolve_position(entry: SessionEntry, all_entries: Sequence[SessionEntry], position: Optional[int]) -> int:
        if position is not None:
            if not 0 <= position < len(all_entries) or all_entries[position] != entry:
                raise ValueError(f"position {position} does not hold the scored entry")
            return position
        for index, other in enumerate(all_entries):
            if other is entry:
                return index
        return len(all_entries)
