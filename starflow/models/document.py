"""
starflow/models/document.py

Persisted per-user document, current schema. Older shapes are upcast by
starflow.features.documents.migrations before they reach this model.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from starflow.models.activity import ActivityDefinition, Targets
from starflow.models.entry import SessionEntry


CURRENT_SCHEMA_VERSION = 3


class Profile(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    display_name: str = ""
    onboarding_complete: bool = True
    created_at: Optional[str] = None


class UserDocument(BaseModel):
    """
    Snapshot the engine computes over.

    entries is an ordered log: position defines pacing and presence order.
    promises maps week keys to free-text intentions; claimed lists claimed week keys.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    schema_version: int = CURRENT_SCHEMA_VERSION
    profile: Profile = Field(default_factory=Profile)
    activities: List[ActivityDefinition] = Field(default_factory=list)
    targets: Targets
    rewards: List[str] = Field(default_factory=list)
    entries: List[SessionEntry] = Field(default_factory=list)
    promises: Dict[str, str] = Field(default_factory=dict)
    claimed: List[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize with camelCase keys, dates as ISO strings."""
        return self.model_dump(mode="json", by_alias=True)
