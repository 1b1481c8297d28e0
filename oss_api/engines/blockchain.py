"""
Blockchain license verification: look up anchored license records.
"""

from dataclasses import dataclass

from oss_api.engines.metrics import count_by, percentage
from oss_api.models.domain import BlockchainRecord, FixtureStore

# Search mode -> record attribute.
SEARCH_FIELDS = {
    "txHash": "tx_hash",
    "documentId": "document_id",
    "holder": "holder",
}


@dataclass
class VerificationSummary:
    total_records: int
    by_status: dict[str, int]
    by_level: dict[str, int]
    verified_percentage: int


def search_records(store: FixtureStore, query: str, by: str = "documentId") -> BlockchainRecord | None:
    """First record whose field contains the query, ignoring case."""
    if by not in SEARCH_FIELDS:
        raise ValueError(f"Unknown search field '{by}', expected one of {sorted(SEARCH_FIELDS)}")
    needle = query.strip().lower()
    if not needle:
        return None
    attr = SEARCH_FIELDS[by]
    return next((r for r in store.blockchain_records if needle in getattr(r, attr).lower()), None)


def all_records(store: FixtureStore) -> list[BlockchainRecord]:
    return list(store.blockchain_records)


def verification_summary(store: FixtureStore) -> VerificationSummary:
    records = store.blockchain_records
    by_status = count_by(records, key=lambda r: r.status)
    return VerificationSummary(
        total_records=len(records),
        by_status=by_status,
        by_level=count_by(records, key=lambda r: r.verification_level),
        verified_percentage=percentage(by_status.get("verified", 0), len(records)),
    )
