"""
Commitments API Endpoints

POST /v1/commitments/state: derived state of a week
POST /v1/commitments/promise: set or replace a week's promise
POST /v1/commitments/claim: reflect on a week whose goal is met
POST /v1/commitments/undo: undo a claim (promise text is kept)

Mutating endpoints return the updated document; persisting it is the
caller's job.
"""

from fastapi import APIRouter

from starflow.api.schemas import CommitmentRequest, PromiseRequest
from starflow.features.commitments.service import CommitmentService
from starflow.models.commitment import CommitmentStatus
from starflow.models.document import UserDocument

router = APIRouter(prefix="/v1/commitments", tags=["commitments"])


def _payload(document: UserDocument, status: CommitmentStatus) -> dict:
    return {
        "data": {
            "status": status.model_dump(mode="json", by_alias=True),
            "document": document.to_dict(),
        }
    }


@router.post("/state")
def get_commitment_state(body: CommitmentRequest) -> dict:
    document = body.load()
    status = CommitmentService.status(document, body.week_key, today=body.today)
    return {"data": status.model_dump(mode="json", by_alias=True)}


@router.post("/promise")
def set_promise(body: PromiseRequest) -> dict:
    document, status = CommitmentService.set_promise(body.load(), body.week_key, body.text, user_id=body.user_id, today=body.today)
    return _payload(document, status)


@router.post("/claim")
def claim_week(body: CommitmentRequest) -> dict:
    document, status = CommitmentService.claim(body.load(), body.week_key, user_id=body.user_id, today=body.today)
    return _payload(document, status)


@router.post("/undo")
def undo_claim(body: CommitmentRequest) -> dict:
    document, status = CommitmentService.undo_claim(body.load(), body.week_key, user_id=body.user_id, today=body.today)
    return _payload(document, status)
