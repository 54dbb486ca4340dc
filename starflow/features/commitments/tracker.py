from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from starflow.core.errors import ConflictError, ValidationError
from starflow.features.aggregation.reducers import goal_met
from starflow.features.calendar.weeks import parse_week_key, weekday_in_week
from starflow.models.activity import Targets
from starflow.models.commitment import CommitmentState, CommitmentStatus, WeeklyCommitment

# Friday, Monday=0
REVEAL_WEEKDAY = 4


class CommitmentTracker:
    """Per-week promise/claim state machine.

    no_promise -> promise_set -> goal_met_pending_reflection -> claimed,
    and claimed -> promise_set (or no_promise) on undo.

    Only promise text and claimed membership are held; the pending
    reflection state is derived from the week's stars every time. Every
    transition returns a new tracker and leaves this one untouched.

    Rewards are revealed on the Friday of the month-week; `unlocked` only
    reports that, it never gates a claim.
    """

    def __init__(self, promises: Optional[Mapping[str, str]] = None, claimed: Optional[Iterable[str]] = None):
        self._promises: Dict[str, str] = dict(promises or {})
        self._claimed: List[str] = list(dict.fromkeys(claimed or []))

    @property
    def promises(self) -> Dict[str, str]:
        return dict(self._promises)

    @property
    def claimed(self) -> List[str]:
        return list(self._claimed)

    def commitment(self, week_key: str) -> WeeklyCommitment:
        return WeeklyCommitment(
            week_key=week_key,
            promise_text=self._promises.get(week_key),
            claimed=week_key in self._claimed,
        )

    def status(
        self,
        week_key: str,
        week_stars: float,
        targets: Targets,
        today: Optional[date] = None,
    ) -> CommitmentStatus:
        year, month, week_number = parse_week_key(week_key)
        reveal = weekday_in_week(year, month, week_number, REVEAL_WEEKDAY)
        promise = self._promises.get(week_key)
        met = goal_met(week_stars, targets)

        if week_key in self._claimed:
            state = CommitmentState.CLAIMED
        elif met:
            # Reflection is offered whether or not a promise was made
            state = CommitmentState.GOAL_MET_PENDING_REFLECTION
        elif promise:
            state = CommitmentState.PROMISE_SET
        else:
            state = CommitmentState.NO_PROMISE

        return CommitmentStatus(
            week_key=week_key,
            state=state,
            promise_text=promise,
            week_stars=week_stars,
            weekly_star_target=targets.weekly_star_target,
            goal_met=met,
            exceeded=week_stars > targets.exceeded_threshold,
            reveal_date=reveal,
            unlocked=today is not None and today >= reveal,
        )

    def set_promise(self, week_key: str, text: str) -> "CommitmentTracker":
        parse_week_key(week_key)
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValidationError("Promise text must not be empty")
        if week_key in self._claimed:
            raise ConflictError(f"Week {week_key} is already claimed; undo the claim to change its promise")
        promises = dict(self._promises)
        promises[week_key] = cleaned
        return CommitmentTracker(promises, self._claimed)

    def claim(
        self,
        week_key: str,
        week_stars: float,
        targets: Targets,
        today: Optional[date] = None,
    ) -> Tuple["CommitmentTracker", CommitmentStatus]:
        """Record the reflection for a week whose goal is met.

        Returns the new tracker and the claimed status; status.exceeded tells
        whether the week went past 1.5x the target.
        """
        current = self.status(week_key, week_stars, targets, today)
        if current.state != CommitmentState.GOAL_MET_PENDING_REFLECTION:
            raise ConflictError(f"Week {week_key} cannot be claimed from state {current.state.value}")
        updated = CommitmentTracker(self._promises, self._claimed + [week_key])
        return updated, updated.status(week_key, week_stars, targets, today)

    def undo_claim(self, week_key: str) -> "CommitmentTracker":
        parse_week_key(week_key)
        if week_key not in self._claimed:
            raise ConflictError(f"Week {week_key} is not claimed")
        return CommitmentTracker(self._promises, [key for key in self._claimed if key != week_key])
