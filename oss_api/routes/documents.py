"""
Deal-room documents: list, upload, share and audit access.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from oss_api.engines import documents
from oss_api.models.domain import AccessLogEntry, DealDocument, FixtureStore
from oss_api.models.schemas import AccessLogRequest, ConfidentialRequest, DocumentCreate, SharingRequest
from oss_api.store import get_store

router = APIRouter()


def _not_found(document_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Document '{document_id}' not found.")


@router.get("/v1/documents", summary="Deal-room documents", tags=["Documents"])
async def list_documents(
    investor_id: str | None = Query(default=None, examples=["INV-001"]),
    store: FixtureStore = Depends(get_store),
) -> list[DealDocument]:
    if investor_id:
        return documents.get_documents_by_investor(store, investor_id)
    return documents.all_documents(store)


@router.get("/v1/documents/stats", summary="Deal-room statistics for an investor", tags=["Documents"])
async def get_stats(
    investor_id: str = Query(examples=["INV-001"]),
    store: FixtureStore = Depends(get_store),
) -> documents.DocumentStats:
    return documents.document_stats(store, investor_id)


@router.post("/v1/documents", status_code=201, summary="Upload a document", tags=["Documents"])
async def create_document(request: DocumentCreate, store: FixtureStore = Depends(get_store)) -> DealDocument:
    if documents.get_document_by_id(store, request.id) is not None:
        raise HTTPException(status_code=409, detail=f"Document '{request.id}' already exists.")
    document = DealDocument(
        uploaded_at=datetime.now(timezone.utc),
        **request.model_dump(),
    )
    return documents.add_document(store, document)


@router.get("/v1/documents/{document_id}", summary="One document", tags=["Documents"])
async def get_document(document_id: str, store: FixtureStore = Depends(get_store)) -> DealDocument:
    document = documents.get_document_by_id(store, document_id)
    if document is None:
        raise _not_found(document_id)
    return document


@router.put("/v1/documents/{document_id}/sharing", summary="Replace sharing list", tags=["Documents"])
async def update_sharing(
    document_id: str,
    request: SharingRequest,
    store: FixtureStore = Depends(get_store),
) -> DealDocument:
    document = documents.update_document_sharing(store, document_id, request.officer_ids)
    if document is None:
        raise _not_found(document_id)
    return document


@router.post("/v1/documents/{document_id}/access-log", summary="Record an access", tags=["Documents"])
async def log_access(
    document_id: str,
    request: AccessLogRequest,
    store: FixtureStore = Depends(get_store),
) -> DealDocument:
    entry = AccessLogEntry(
        user_id=request.user_id,
        user_name=request.user_name,
        action=request.action,
        timestamp=request.timestamp or datetime.now(timezone.utc),
    )
    document = documents.add_access_log(store, document_id, entry)
    if document is None:
        raise _not_found(document_id)
    return document


@router.put("/v1/documents/{document_id}/confidential", summary="Set confidentiality", tags=["Documents"])
async def set_confidential(
    document_id: str,
    request: ConfidentialRequest,
    store: FixtureStore = Depends(get_store),
) -> DealDocument:
    document = documents.toggle_confidential(store, document_id, request.confidential)
    if document is None:
        raise _not_found(document_id)
    return document
