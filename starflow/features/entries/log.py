"""
starflow/features/entries/log.py

Append-only session log.
Order is part of the data: pacing and presence bonus depend on which
session was logged first, so the log is never sorted or deduplicated.
"""

from datetime import date
from typing import Iterable, Iterator, List, Optional, Tuple

from starflow.core.errors import NotFoundError
from starflow.models.entry import SessionEntry


class SessionLog:
    """
    Immutable ordered sequence of sessions.

    append() and remove_for_day() return a new log; entries are never edited
    in place.
    """

    def __init__(self, entries: Optional[Iterable[SessionEntry]] = None):
        self._entries: Tuple[SessionEntry, ...] = tuple(entries or ())

    @property
    def entries(self) -> List[SessionEntry]:
        """Copy of the log, in insertion order."""
        return list(self._entries)

    def append(self, entry: SessionEntry) -> "SessionLog":
        return SessionLog(self._entries + (entry,))

    def entries_for(self, day: date) -> List[SessionEntry]:
        return [entry for entry in self._entries if entry.date == day]

    def remove_for_day(self, day: date, index: int) -> "SessionLog":
        """
        Remove the index-th session of day (0-based, log order within that day).

        Raises:
            NotFoundError: index outside the day's view
        """
        positions = [i for i, entry in enumerate(self._entries) if entry.date == day]
        if not 0 <= index < len(positions):
            raise NotFoundError(f"No session #{index} on {day.isoformat()} ({len(positions)} logged)")
        target = positions[index]
        return SessionLog(self._entries[:target] + self._entries[target + 1:])

    def __iter__(self) -> Iterator[SessionEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
