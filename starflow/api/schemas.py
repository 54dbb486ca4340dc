"""
Request bodies shared by the stateless endpoints.

Every request carries the document snapshot to compute over; raw dicts are
accepted so legacy shapes can be upcast before validation.
"""

import datetime as dt
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from starflow.features.documents.migrations import load_document
from starflow.models.document import UserDocument
from starflow.models.entry import SessionEntry


class DocumentRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    document: Dict[str, Any] = Field(..., description="User document, any supported schema version")
    user_id: Optional[str] = Field(default=None, description="Only used for log correlation")

    def load(self) -> UserDocument:
        return load_document(self.document)


class EntryRequest(DocumentRequest):
    entry: SessionEntry


class DayRequest(DocumentRequest):
    date: dt.date


class WeekRequest(DocumentRequest):
    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    week: int = Field(..., ge=1, le=5)


class MonthRequest(DocumentRequest):
    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)


class SummaryRequest(DocumentRequest):
    today: Optional[dt.date] = Field(default=None, description="Defaults to the current UTC date")


class CommitmentRequest(DocumentRequest):
    week_key: str = Field(..., min_length=1, description="YYYY-MM-Wn")
    today: Optional[dt.date] = Field(default=None, description="Drives the reward reveal; defaults to the current UTC date")


class PromiseRequest(CommitmentRequest):
    text: str


class RemoveEntryRequest(DocumentRequest):
    date: dt.date
    index: int = Field(..., ge=0, description="Position within that day's sessions")
