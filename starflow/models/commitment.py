"""
starflow/models/commitment.py
Weekly promise/claim model. Only promise text and claim membership are durable;
the state itself is always derived.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CommitmentState(str, Enum):
    NO_PROMISE = "no_promise"
    PROMISE_SET = "promise_set"
    GOAL_MET_PENDING_REFLECTION = "goal_met_pending_reflection"
    CLAIMED = "claimed"


class WeeklyCommitment(BaseModel):
    """Durable pieces of a week's commitment."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    week_key: str = Field(description="YYYY-MM-Wn")
    promise_text: Optional[str] = None
    claimed: bool = False


class CommitmentStatus(BaseModel):
    """Derived view of a week: state plus the numbers that produced it."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    week_key: str
    state: CommitmentState
    promise_text: Optional[str] = None
    week_stars: float = Field(ge=0)
    weekly_star_target: float = Field(gt=0)
    goal_met: bool
    exceeded: bool = Field(description="Week total above 1.5x the weekly target (display only)")
    reveal_date: dt.date = Field(description="Friday of the month-week (its last day when it has none)")
    unlocked: bool = Field(description="Reward row visible: today is on or after reveal_date (display only)")

    @property
    def can_reflect(self) -> bool:
        return self.state == CommitmentState.GOAL_MET_PENDING_REFLECTION
