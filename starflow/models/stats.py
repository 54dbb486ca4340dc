"""
starflow/models/stats.py
Read models produced by the aggregation reducers.
"""

import datetime as dt
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MonthStats(BaseModel):
    """Month rollup: star total, per-activity session counts and target flags."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    year: int
    month: int = Field(ge=1, le=12)
    total: float = Field(ge=0, description="Sum of daily stars over the month")
    activity_counts: Dict[str, int] = Field(description="Qualifying sessions per activity id")
    mindful_counts: Dict[str, int] = Field(description="Qualifying mindful sessions per activity id")
    target_met: bool
    stretch_met: bool


class StarSummary(BaseModel):
    """Everything the home view renders for one day."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    today: dt.date
    today_stars: float = Field(ge=0)
    week_key: str
    week_stars: float = Field(ge=0)
    weekly_goal_met: bool
    streak: int = Field(ge=0)
    month: MonthStats
    milestone: Optional[str] = None
    encouragement: str
