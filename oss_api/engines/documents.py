"""
Virtual deal room: confidential documents an investor shares with officers.

Writes against an unknown document id are logged and ignored. The caller
gets None back and decides what that means.
"""

import logging
from dataclasses import dataclass

from oss_api.models.domain import AccessLogEntry, DealDocument, FixtureStore

logger = logging.getLogger(__name__)


@dataclass
class DocumentStats:
    total: int
    confidential: int
    shared: int
    recent_access: int


def get_documents_by_investor(store: FixtureStore, investor_id: str) -> list[DealDocument]:
    return [d for d in store.documents if d.investor_id == investor_id]


def get_document_by_id(store: FixtureStore, document_id: str) -> DealDocument | None:
    return next((d for d in store.documents if d.id == document_id), None)


def all_documents(store: FixtureStore) -> list[DealDocument]:
    return list(store.documents)


def add_document(store: FixtureStore, document: DealDocument) -> DealDocument:
    store.documents.append(document)
    logger.info("Document %s added to deal room of %s", document.id, document.investor_id)
    return document


def _find_for_update(store: FixtureStore, document_id: str, action: str) -> DealDocument | None:
    document = get_document_by_id(store, document_id)
    if document is None:
        logger.warning("Cannot %s: document %s not found", action, document_id)
    return document


def update_document_sharing(store: FixtureStore, document_id: str, officer_ids: list[str]) -> DealDocument | None:
    """Replace the list of officers the document is shared with."""
    document = _find_for_update(store, document_id, "update sharing")
    if document is None:
        return None
    document.shared_with = list(officer_ids)
    logger.info("Document %s shared with %d officers", document_id, len(officer_ids))
    return document


def add_access_log(store: FixtureStore, document_id: str, entry: AccessLogEntry) -> DealDocument | None:
    document = _find_for_update(store, document_id, "log access")
    if document is None:
        return None
    document.access_log.append(entry)
    return document


def toggle_confidential(store: FixtureStore, document_id: str, confidential: bool) -> DealDocument | None:
    document = _find_for_update(store, document_id, "change confidentiality")
    if document is None:
        return None
    document.confidential = confidential
    logger.info("Document %s confidential=%s", document_id, confidential)
    return document


def document_stats(store: FixtureStore, investor_id: str) -> DocumentStats:
    documents = get_documents_by_investor(store, investor_id)
    return DocumentStats(
        total=len(documents),
        confidential=sum(1 for d in documents if d.confidential),
        shared=sum(1 for d in documents if d.shared_with),
        recent_access=sum(len(d.access_log) for d in documents),
    )
