"""Liveness endpoint. The engine has no backing services, so this only reports uptime."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from starflow.models.document import CURRENT_SCHEMA_VERSION

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(request: Request) -> dict:
    started = getattr(request.app.state, "startup_time", None)
    return {
        "ok": True,
        "schema_version": CURRENT_SCHEMA_VERSION,
        "uptime_seconds": round(time.time() - started, 1) if started else None,
        "computed_at": datetime.now(timezone.utc).isoformat(),
    }
