from fastapi import APIRouter

from starflow.api.schemas import EntryRequest, RemoveEntryRequest
from starflow.core.logging import log_event
from starflow.features.entries.log import SessionLog
from starflow.features.stars.service import StarService, message_rng

router = APIRouter(prefix="/v1/entries", tags=["entries"])


@router.post("/append")
def append_entry(body: EntryRequest) -> dict:
    """Append a session and return the new document plus the session's breakdown."""
    document = body.load()
    breakdown = StarService.preview(document, body.entry, rng=message_rng())
    log = SessionLog(document.entries).append(body.entry)
    updated = document.model_copy(update={"entries": log.entries})
    log_event(
        "info",
        "entry.appended",
        user_id=body.user_id,
        event_type="entry_appended",
        extra={"activity_id": body.entry.activity_id, "stars": breakdown.stars_earned},
    )
    return {"data": {"document": updated.to_dict(), "breakdown": breakdown.to_dict()}}


@router.post("/remove")
def remove_entry(body: RemoveEntryRequest) -> dict:
    """Remove the index-th session of a date (position within that date's sessions)."""
    document = body.load()
    log = SessionLog(document.entries).remove_for_day(body.date, body.index)
    updated = document.model_copy(update={"entries": log.entries})
    log_event(
        "info",
        "entry.removed",
        user_id=body.user_id,
        event_type="entry_removed",
        extra={"date": body.date.isoformat(), "index": body.index},
    )
    return {"data": {"document": updated.to_dict()}}
