"""
In-memory fixture store.

Every engine reads from (and the few mutations write into) one FixtureStore
object. There is no database: data is rebuilt from the fixture modules at
startup and lost on restart. That's fine, this layer only feeds dashboards.

Routes get the store through the get_store() dependency so tests can swap in
a fresh one with app.dependency_overrides.
"""

import logging
from datetime import date

from oss_api import config
from oss_api.engines import bundles
from oss_api.fixtures.applications import build_agencies, build_applications, build_officers
from oss_api.fixtures.bundles import build_bundles
from oss_api.fixtures.registry import build_blockchain_records, build_documents
from oss_api.fixtures.talent import build_districts, build_talent_pool
from oss_api.models.domain import FixtureStore

logger = logging.getLogger(__name__)

DEMO_BBID = "BBID-2026-MFG-000123"
DEMO_COMPANY = "Global Tech Manufacturing Ltd."
DEMO_INVESTOR = "INV-001"
DEMO_BUNDLE = "BUNDLE-001"


def _seed_demo_purchase(store: FixtureStore) -> None:
    """One paid BUNDLE-001 purchase with the three core registrations done."""
    now = store.reference_datetime
    purchase = bundles.purchase_bundle(
        store, DEMO_BBID, DEMO_COMPANY, DEMO_BUNDLE, investor_id=DEMO_INVESTOR, now=now,
    )
    bundles.process_bundle_payment(store, purchase.purchase_id, now)
    for service_id in ("SRV-001", "SRV-002", "SRV-003"):
        bundles.complete_service(store, purchase.purchase_id, service_id, now=now)


def build_default_store(reference_date: date | None = None, seed_purchases: bool = True) -> FixtureStore:
    """Build a store from the fixture modules.

    Each call constructs fresh records, so two stores never share mutable
    state."""
    reference_date = reference_date or config.REFERENCE_DATE
    store = FixtureStore(
        reference_date=reference_date,
        applications=build_applications(),
        officers=build_officers(),
        agencies=build_agencies(),
        bundles=build_bundles(),
        documents=build_documents(reference_date),
        districts=build_districts(),
        talent_pool=build_talent_pool(),
        blockchain_records=build_blockchain_records(reference_date),
    )
    if seed_purchases:
        _seed_demo_purchase(store)

    logger.info(
        "Fixture store ready: %d applications, %d bundles, %d purchases (reference date %s)",
        len(store.applications), len(store.bundles), len(store.purchases), reference_date,
    )
    return store


store: FixtureStore = build_default_store()


def get_store() -> FixtureStore:
    """FastAPI dependency returning the process-wide store."""
    return store


def reset_store() -> FixtureStore:
    """Discard every mutation and rebuild the default store."""
    global store
    store = build_default_store()
    return store
