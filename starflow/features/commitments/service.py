"""
Commitment Service

Adapts a user document into tracker inputs (promises, claimed, the week's
stars), applies one transition and hands back the updated document.
"""

from datetime import date, datetime, timezone
from typing import Optional, Tuple

from starflow.core.logging import log_event
from starflow.features.aggregation.reducers import week_stars
from starflow.features.calendar.weeks import parse_week_key
from starflow.features.commitments.tracker import CommitmentTracker
from starflow.models.commitment import CommitmentStatus
from starflow.models.document import UserDocument


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class CommitmentService:
    """Document-level commitment transitions with structured logging."""

    @staticmethod
    def tracker_for(document: UserDocument) -> CommitmentTracker:
        return CommitmentTracker(document.promises, document.claimed)

    @staticmethod
    def week_total(document: UserDocument, week_key: str) -> float:
        year, month, week_number = parse_week_key(week_key)
        return week_stars(document.entries, year, month, week_number, document.activities)

    @staticmethod
    def status(document: UserDocument, week_key: str, today: Optional[date] = None) -> CommitmentStatus:
        """Derived state; `today` (UTC date by default) only drives the reward reveal."""
        tracker = CommitmentService.tracker_for(document)
        total = CommitmentService.week_total(document, week_key)
        return tracker.status(week_key, total, document.targets, today or _utc_today())

    @staticmethod
    def set_promise(
        document: UserDocument,
        week_key: str,
        text: str,
        user_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Tuple[UserDocument, CommitmentStatus]:
        tracker = CommitmentService.tracker_for(document).set_promise(week_key, text)
        updated = CommitmentService._apply(document, tracker)
        log_event("info", "commitment.promise_set", user_id=user_id, week_key=week_key, event_type="promise_set")
        return updated, CommitmentService.status(updated, week_key, today)

    @staticmethod
    def claim(
        document: UserDocument,
        week_key: str,
        user_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Tuple[UserDocument, CommitmentStatus]:
        total = CommitmentService.week_total(document, week_key)
        tracker, status = CommitmentService.tracker_for(document).claim(
            week_key, total, document.targets, today or _utc_today()
        )
        log_event(
            "info",
            "commitment.claimed",
            user_id=user_id,
            week_key=week_key,
            event_type="claimed",
            extra={"week_stars": total, "exceeded": status.exceeded},
        )
        return CommitmentService._apply(document, tracker), status

    @staticmethod
    def undo_claim(
        document: UserDocument,
        week_key: str,
        user_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Tuple[UserDocument, CommitmentStatus]:
        tracker = CommitmentService.tracker_for(document).undo_claim(week_key)
        updated = CommitmentService._apply(document, tracker)
        log_event("info", "commitment.claim_undone", user_id=user_id, week_key=week_key, event_type="claim_undone")
        return updated, CommitmentService.status(updated, week_key, today)

    @staticmethod
    def _apply(document: UserDocument, tracker: CommitmentTracker) -> UserDocument:
        return document.model_copy(update={"promises": tracker.promises, "claimed": tracker.claimed})
