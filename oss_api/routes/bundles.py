"""
Starter bundles -- catalogue reads and the purchase lifecycle.

    GET  /v1/bundles                          recommended bundles
    POST /v1/bundle-purchases                 buy a bundle
    POST /v1/bundle-purchases/{id}/payment    pending_payment -> in_progress
    POST /v1/bundle-purchases/{id}/complete   mark one service done
    POST /v1/bundle-purchases/{id}/cancel     -> cancelled

Unknown ids are 404. A lifecycle call made from the wrong status is 409.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from oss_api.engines import bundles
from oss_api.engines.bundles import BundleNotFound, InvalidTransition
from oss_api.models.domain import BundleProgress, BundlePurchase, FixtureStore, StarterBundle
from oss_api.models.schemas import (
    AssignOfficerRequest,
    CancelRequest,
    CompleteServiceRequest,
    NoteRequest,
    PaymentRequest,
    PurchaseRequest,
)
from oss_api.store import get_store

router = APIRouter()


def _purchase_not_found(purchase_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Purchase '{purchase_id}' not found.")


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

@router.get(
    "/v1/bundles",
    summary="Recommended bundles",
    description=(
        "Active bundles matching the investor's sector and investment size, "
        "most popular first. Bundles targeting 'any' match every filter."
    ),
    tags=["Bundles"],
)
async def list_bundles(
    sector: str | None = Query(default=None, examples=["Manufacturing"]),
    investment_size: str | None = Query(default=None, examples=["large"]),
    store: FixtureStore = Depends(get_store),
) -> list[StarterBundle]:
    return bundles.recommend_bundles(store, sector=sector, investment_size=investment_size)


@router.get("/v1/bundles/stats", summary="Catalogue statistics", tags=["Bundles"])
async def get_catalogue_stats(store: FixtureStore = Depends(get_store)) -> bundles.BundleCatalogueStats:
    return bundles.bundle_catalogue_stats(store)


@router.get("/v1/bundles/{bundle_id}", summary="One bundle", tags=["Bundles"])
async def get_bundle(bundle_id: str, store: FixtureStore = Depends(get_store)) -> StarterBundle:
    bundle = bundles.get_bundle_by_id(store, bundle_id)
    if bundle is None:
        raise HTTPException(status_code=404, detail=f"Bundle '{bundle_id}' not found.")
    return bundle


# ---------------------------------------------------------------------------
# Purchases
# ---------------------------------------------------------------------------

@router.post(
    "/v1/bundle-purchases",
    status_code=201,
    summary="Purchase a bundle",
    description="Creates a purchase awaiting payment, with an invoice and an estimated completion date.",
    tags=["Bundle purchases"],
)
async def create_purchase(request: PurchaseRequest, store: FixtureStore = Depends(get_store)) -> BundlePurchase:
    try:
        return bundles.purchase_bundle(
            store,
            bbid=request.bbid,
            company_name=request.company_name,
            bundle_id=request.bundle_id,
            investor_id=request.investor_id,
        )
    except BundleNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get(
    "/v1/bundle-purchases",
    summary="Purchases for a business or investor",
    description="Pass either bbid or investor_id. Newest purchase first.",
    tags=["Bundle purchases"],
)
async def list_purchases(
    bbid: str | None = Query(default=None, examples=["BBID-2026-MFG-000123"]),
    investor_id: str | None = Query(default=None, examples=["INV-001"]),
    store: FixtureStore = Depends(get_store),
) -> list[BundlePurchase]:
    if bbid:
        return bundles.get_purchases_by_bbid(store, bbid)
    if investor_id:
        return bundles.get_purchases_by_investor(store, investor_id)
    raise HTTPException(status_code=400, detail="Pass either 'bbid' or 'investor_id'.")


@router.get("/v1/bundle-purchases/stats", summary="Purchase statistics", tags=["Bundle purchases"])
async def get_purchase_stats(store: FixtureStore = Depends(get_store)) -> bundles.PurchaseStatistics:
    return bundles.purchase_statistics(store)


@router.get("/v1/bundle-purchases/{purchase_id}", summary="One purchase", tags=["Bundle purchases"])
async def get_purchase(purchase_id: str, store: FixtureStore = Depends(get_store)) -> BundlePurchase:
    purchase = bundles.get_purchase_by_id(store, purchase_id)
    if purchase is None:
        raise _purchase_not_found(purchase_id)
    return purchase


@router.get(
    "/v1/bundle-purchases/{purchase_id}/progress",
    summary="Purchase progress",
    tags=["Bundle purchases"],
)
async def get_progress(purchase_id: str, store: FixtureStore = Depends(get_store)) -> BundleProgress:
    progress = bundles.get_bundle_progress(store, purchase_id)
    if progress is None:
        raise _purchase_not_found(purchase_id)
    return progress


@router.post("/v1/bundle-purchases/{purchase_id}/payment", summary="Record payment", tags=["Bundle purchases"])
async def pay_purchase(
    purchase_id: str,
    request: PaymentRequest,
    store: FixtureStore = Depends(get_store),
) -> BundlePurchase:
    payment_date = request.payment_date or datetime.now(timezone.utc)
    try:
        purchase = bundles.process_bundle_payment(store, purchase_id, payment_date)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    if purchase is None:
        raise _purchase_not_found(purchase_id)
    return purchase


@router.post(
    "/v1/bundle-purchases/{purchase_id}/complete",
    summary="Complete one service",
    description="Completing the last outstanding service completes the purchase.",
    tags=["Bundle purchases"],
)
async def complete_service(
    purchase_id: str,
    request: CompleteServiceRequest,
    store: FixtureStore = Depends(get_store),
) -> BundlePurchase:
    try:
        purchase = bundles.complete_service(store, purchase_id, request.service_id)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    if purchase is None:
        raise HTTPException(
            status_code=404,
            detail=f"Purchase '{purchase_id}' or service '{request.service_id}' not found.",
        )
    return purchase


@router.post("/v1/bundle-purchases/{purchase_id}/cancel", summary="Cancel a purchase", tags=["Bundle purchases"])
async def cancel_purchase(
    purchase_id: str,
    request: CancelRequest,
    store: FixtureStore = Depends(get_store),
) -> BundlePurchase:
    try:
        purchase = bundles.cancel_purchase(store, purchase_id, request.reason)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    if purchase is None:
        raise _purchase_not_found(purchase_id)
    return purchase


@router.put("/v1/bundle-purchases/{purchase_id}/officer", summary="Assign an officer", tags=["Bundle purchases"])
async def assign_officer(
    purchase_id: str,
    request: AssignOfficerRequest,
    store: FixtureStore = Depends(get_store),
) -> BundlePurchase:
    purchase = bundles.assign_officer(store, purchase_id, request.officer_id)
    if purchase is None:
        raise _purchase_not_found(purchase_id)
    return purchase


@router.post("/v1/bundle-purchases/{purchase_id}/notes", summary="Add a note", tags=["Bundle purchases"])
async def add_note(
    purchase_id: str,
    request: NoteRequest,
    store: FixtureStore = Depends(get_store),
) -> BundlePurchase:
    purchase = bundles.add_note(store, purchase_id, request.note)
    if purchase is None:
        raise _purchase_not_found(purchase_id)
    return purchase
