from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from starflow.models.activity import ActivityDefinition


class ActivityCatalog:
    """Lookup of activity definitions by id.

    Later definitions win when ids repeat, matching a catalog that was edited
    by appending a replacement.
    """

    def __init__(self, activities: Iterable[ActivityDefinition] | None = None):
        self._activities: List[ActivityDefinition] = list(activities or [])
        self._by_id: Dict[str, ActivityDefinition] = {a.id: a for a in self._activities}

    @classmethod
    def of(cls, activities: "ActivityCatalog | Iterable[ActivityDefinition] | None") -> "ActivityCatalog":
        if isinstance(activities, ActivityCatalog):
            return activities
        return cls(activities)

    def get(self, activity_id: str) -> Optional[ActivityDefinition]:
        return self._by_id.get(activity_id)

    def ids(self) -> List[str]:
        return list(self._by_id)

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._by_id

    def __iter__(self) -> Iterator[ActivityDefinition]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
