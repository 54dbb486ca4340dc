"""
starflow/models/activity.py
Activity catalog and target configuration models.
Owned by the user profile; read-only to the scoring engine.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ActivityDefinition(BaseModel):
    """A trackable activity and its minimum qualifying duration."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1, description="Stable activity id (e.g. 'walk')")
    label: str = Field(default="", description="Display label")
    min_duration_minutes: float = Field(ge=0, description="Minutes required for a session to earn stars")
    color: Optional[str] = Field(default=None, description="Display-only accent color")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Display-only extras")


class Targets(BaseModel):
    """Weekly and monthly star goals."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    weekly_star_target: float = Field(gt=0, description="Constellation goal for one month-week")
    monthly_target: float = Field(gt=0)
    monthly_stretch: float = Field(gt=0)

    @property
    def exceeded_threshold(self) -> float:
        """Weekly total above which a claimed week is marked as exceeded."""
        return self.weekly_star_target * 1.5
