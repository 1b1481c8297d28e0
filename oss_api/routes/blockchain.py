"""
Blockchain license verification.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from oss_api.engines import blockchain
from oss_api.models.domain import BlockchainRecord, FixtureStore
from oss_api.store import get_store

router = APIRouter()


@router.get("/v1/blockchain/records", summary="All anchored license records", tags=["Blockchain"])
async def list_records(store: FixtureStore = Depends(get_store)) -> list[BlockchainRecord]:
    return blockchain.all_records(store)


@router.get(
    "/v1/blockchain/verify",
    summary="Verify a license",
    description="Finds the first record whose transaction hash, document id or holder contains the query.",
    tags=["Blockchain"],
)
async def verify(
    q: str = Query(examples=["RJSC-2024-BD-00145"]),
    by: Literal["txHash", "documentId", "holder"] = Query(default="documentId"),
    store: FixtureStore = Depends(get_store),
) -> BlockchainRecord:
    record = blockchain.search_records(store, q, by=by)
    if record is None:
        raise HTTPException(status_code=404, detail=f"No record matches '{q}'.")
    return record


@router.get("/v1/blockchain/summary", summary="Verification summary", tags=["Blockchain"])
async def get_summary(store: FixtureStore = Depends(get_store)) -> blockchain.VerificationSummary:
    return blockchain.verification_summary(store)
