from fastapi import APIRouter

from starflow.api.schemas import DocumentRequest

router = APIRouter(prefix="/v1/documents", tags=["documents"])


@router.post("/upcast")
def upcast_document(body: DocumentRequest) -> dict:
    """Return the document in the current schema; legacy shapes are migrated."""
    return {"data": body.load().to_dict()}
