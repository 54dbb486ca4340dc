"""
starflow/models/entry.py
Logged activity session. Entries have no id: identity is position in the log.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SessionEntry(BaseModel):
    """One logged session. Immutable; removed from the log, never edited."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    date: dt.date = Field(description="Calendar date the session belongs to")
    activity_id: str = Field(description="ActivityDefinition.id (may be orphaned)")
    duration_minutes: float = Field(ge=0)
    mindful: bool = Field(default=False, description="Fully present, no phone")
