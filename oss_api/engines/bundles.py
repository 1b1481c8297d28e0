"""
Starter bundles: catalogue lookups and the purchase lifecycle.

A purchase moves through a small state machine:

    pending_payment --process_bundle_payment--> in_progress
    in_progress --complete_service (last outstanding)--> completed
    pending_payment | in_progress --cancel_purchase--> cancelled

Transitions called from any other status raise InvalidTransition. Services
may be completed in any order; current_service always points at the first
one still outstanding in bundle order.
"""

import logging
import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from oss_api.engines.metrics import mean, percentage, rank, round_half_up
from oss_api.models.domain import (
    BundleProgress,
    BundlePurchase,
    FixtureStore,
    PurchaseStatus,
    ServiceItem,
    StarterBundle,
)

logger = logging.getLogger(__name__)

CANCELLABLE = (PurchaseStatus.pending_payment, PurchaseStatus.in_progress)
CLOSED = (PurchaseStatus.completed, PurchaseStatus.cancelled)


class InvalidTransition(ValueError):
    """A lifecycle call was made from a status that doesn't allow it."""

    def __init__(self, purchase_id: str, status: PurchaseStatus, action: str):
        self.purchase_id = purchase_id
        self.status = status
        self.action = action
        super().__init__(f"Cannot {action} purchase {purchase_id} while it is {status.value}")


class BundleNotFound(LookupError):
    def __init__(self, bundle_id: str):
        self.bundle_id = bundle_id
        super().__init__(f"Bundle '{bundle_id}' not found")


@dataclass
class BundleCatalogueStats:
    total_bundles: int
    active_bundles: int
    total_users: int
    avg_discount: int
    avg_time_saved: int
    most_popular: StarterBundle | None


@dataclass
class PurchaseStatistics:
    total_purchases: int
    active_purchases: int
    completed_purchases: int
    pending_payment: int
    cancelled_purchases: int
    total_revenue: float
    avg_completion_days: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

def get_bundle_by_id(store: FixtureStore, bundle_id: str) -> StarterBundle | None:
    return next((b for b in store.bundles if b.bundle_id == bundle_id), None)


def recommend_bundles(
    store: FixtureStore,
    sector: str | None = None,
    investment_size: str | None = None,
) -> list[StarterBundle]:
    """Active bundles matching the investor profile, most popular first.

    A bundle targeting "any" sector or size matches every query."""

    def matches(bundle: StarterBundle) -> bool:
        if not bundle.active:
            return False
        sector_ok = not sector or sector in bundle.target_sectors or "any" in bundle.target_sectors
        size_ok = (
            not investment_size
            or bundle.target_investment_size == investment_size
            or bundle.target_investment_size == "any"
        )
        return sector_ok and size_ok

    return rank([b for b in store.bundles if matches(b)], key=lambda b: b.popularity)


def bundle_catalogue_stats(store: FixtureStore) -> BundleCatalogueStats:
    bundles = store.bundles
    popular = rank(bundles, key=lambda b: b.popularity, limit=1)
    return BundleCatalogueStats(
        total_bundles=len(bundles),
        active_bundles=sum(1 for b in bundles if b.active),
        total_users=sum(b.used_by for b in bundles),
        avg_discount=round_half_up(mean(b.discount_percentage for b in bundles)),
        avg_time_saved=round_half_up(mean(b.fast_track_days for b in bundles)),
        most_popular=popular[0] if popular else None,
    )


# ---------------------------------------------------------------------------
# Purchase lifecycle
# ---------------------------------------------------------------------------

def _outstanding(purchase: BundlePurchase) -> list[ServiceItem]:
    done = set(purchase.services_completed)
    return [s for s in purchase.bundle.services if s.service_id not in done]


def purchase_bundle(
    store: FixtureStore,
    bbid: str,
    company_name: str,
    bundle_id: str,
    investor_id: str | None = None,
    now: datetime | None = None,
) -> BundlePurchase:
    bundle = get_bundle_by_id(store, bundle_id)
    if bundle is None:
        raise BundleNotFound(bundle_id)

    now = now or _utcnow()
    purchase = BundlePurchase(
        purchase_id=f"BNDL-PURCH-{uuid.uuid4().hex[:12].upper()}",
        bbid=bbid,
        investor_id=investor_id,
        company_name=company_name,
        bundle=bundle,
        purchase_date=now,
        estimated_completion_date=now + timedelta(days=bundle.total_days),
        invoice_id=f"BNDL-INV-{uuid.uuid4().hex[:12].upper()}",
        notes=[f"Bundle purchased: {bundle.name}"],
    )
    store.purchases[purchase.purchase_id] = purchase

    logger.info("Bundle purchased: %s by %s (%s)", bundle.name, company_name, purchase.purchase_id)
    return purchase


def process_bundle_payment(
    store: FixtureStore, purchase_id: str, payment_date: datetime,
) -> BundlePurchase | None:
    purchase = get_purchase_by_id(store, purchase_id)
    if purchase is None:
        logger.warning("Payment for unknown purchase %s", purchase_id)
        return None
    if purchase.status is not PurchaseStatus.pending_payment:
        raise InvalidTransition(purchase_id, purchase.status, "pay for")

    purchase.status = PurchaseStatus.in_progress
    purchase.payment_date = payment_date
    purchase.amount_paid = purchase.bundle.bundle_price
    purchase.notes.append(f"Payment received on {payment_date.date().isoformat()}")

    outstanding = _outstanding(purchase)
    if outstanding:
        purchase.current_service = outstanding[0].service_id
        purchase.notes.append(f"Started: {outstanding[0].service_name}")

    logger.info("Payment processed for %s (%s)", purchase.bundle.name, purchase_id)
    return purchase


def complete_service(
    store: FixtureStore, purchase_id: str, service_id: str, now: datetime | None = None,
) -> BundlePurchase | None:
    """Mark one service of the bundle as done.

    Returns None for an unknown purchase or a service that isn't part of the
    bundle. Completing a service twice changes nothing."""
    purchase = get_purchase_by_id(store, purchase_id)
    if purchase is None:
        logger.warning("Service completion for unknown purchase %s", purchase_id)
        return None

    service = next((s for s in purchase.bundle.services if s.service_id == service_id), None)
    if service is None:
        logger.warning("Service %s is not part of %s", service_id, purchase.bundle_id)
        return None

    if service_id in purchase.services_completed:
        return purchase
    if purchase.status is not PurchaseStatus.in_progress:
        raise InvalidTransition(purchase_id, purchase.status, f"complete {service_id} on")

    purchase.services_completed.append(service_id)
    purchase.notes.append(f"Completed: {service.service_name}")

    outstanding = _outstanding(purchase)
    if outstanding:
        if purchase.current_service != outstanding[0].service_id:
            purchase.current_service = outstanding[0].service_id
            purchase.notes.append(f"Started: {outstanding[0].service_name}")
        return purchase

    purchase.status = PurchaseStatus.completed
    purchase.actual_completion_date = now or _utcnow()
    purchase.current_service = None
    purchase.notes.append("Bundle completed successfully")
    logger.info("Bundle completed: %s (%s)", purchase.bundle.name, purchase_id)
    return purchase


def cancel_purchase(store: FixtureStore, purchase_id: str, reason: str) -> BundlePurchase | None:
    purchase = get_purchase_by_id(store, purchase_id)
    if purchase is None:
        logger.warning("Cancellation for unknown purchase %s", purchase_id)
        return None
    if purchase.status not in CANCELLABLE:
        raise InvalidTransition(purchase_id, purchase.status, "cancel")

    purchase.status = PurchaseStatus.cancelled
    purchase.current_service = None
    purchase.notes.append(f"Cancelled: {reason}")

    logger.info("Purchase cancelled: %s", purchase_id)
    return purchase


def assign_officer(store: FixtureStore, purchase_id: str, officer_id: str) -> BundlePurchase | None:
    purchase = get_purchase_by_id(store, purchase_id)
    if purchase is None:
        logger.warning("Officer assignment for unknown purchase %s", purchase_id)
        return None

    purchase.assigned_officer = officer_id
    purchase.notes.append(f"Assigned to officer: {officer_id}")
    return purchase


def add_note(
    store: FixtureStore, purchase_id: str, note: str, now: datetime | None = None,
) -> BundlePurchase | None:
    purchase = get_purchase_by_id(store, purchase_id)
    if purchase is None:
        logger.warning("Note for unknown purchase %s", purchase_id)
        return None

    stamp = (now or _utcnow()).date().isoformat()
    purchase.notes.append(f"{stamp}: {note}")
    return purchase


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def get_purchase_by_id(store: FixtureStore, purchase_id: str) -> BundlePurchase | None:
    return store.purchases.get(purchase_id)


def _newest_first(purchases: list[BundlePurchase]) -> list[BundlePurchase]:
    return rank(purchases, key=lambda p: p.purchase_date.timestamp())


def get_purchases_by_bbid(store: FixtureStore, bbid: str) -> list[BundlePurchase]:
    return _newest_first([p for p in store.purchases.values() if p.bbid == bbid])


def get_purchases_by_investor(store: FixtureStore, investor_id: str) -> list[BundlePurchase]:
    return _newest_first([p for p in store.purchases.values() if p.investor_id == investor_id])


def get_bundle_progress(
    store: FixtureStore, purchase_id: str, now: datetime | None = None,
) -> BundleProgress | None:
    purchase = get_purchase_by_id(store, purchase_id)
    if purchase is None:
        return None

    now = now or _utcnow()
    total = len(purchase.bundle.services)
    seconds_left = (purchase.estimated_completion_date - now).total_seconds()
    remaining_days = max(0, math.ceil(seconds_left / 86400))

    next_service = None
    if purchase.status not in CLOSED:
        outstanding = _outstanding(purchase)
        next_service = outstanding[0] if outstanding else None

    return BundleProgress(
        purchase_id=purchase_id,
        bundle_name=purchase.bundle.name,
        total_services=total,
        completed_services=list(purchase.services_completed),
        progress_percentage=percentage(len(purchase.services_completed), total),
        remaining_days=remaining_days,
        status=purchase.status,
        next_service=next_service,
    )


def purchase_statistics(store: FixtureStore) -> PurchaseStatistics:
    purchases = list(store.purchases.values())
    completion_days = [
        math.ceil((p.actual_completion_date - p.purchase_date).total_seconds() / 86400)
        for p in purchases
        if p.actual_completion_date is not None
    ]
    return PurchaseStatistics(
        total_purchases=len(purchases),
        active_purchases=sum(1 for p in purchases if p.status is PurchaseStatus.in_progress),
        completed_purchases=sum(1 for p in purchases if p.status is PurchaseStatus.completed),
        pending_payment=sum(1 for p in purchases if p.status is PurchaseStatus.pending_payment),
        cancelled_purchases=sum(1 for p in purchases if p.status is PurchaseStatus.cancelled),
        total_revenue=sum(p.amount_paid or 0 for p in purchases),
        avg_completion_days=round_half_up(mean(completion_days)),
    )
