"""
Tests for the fixture store.
"""

from datetime import date

from oss_api import store as store_module
from oss_api.models.domain import PurchaseStatus
from oss_api.store import DEMO_BBID, build_default_store


class TestDefaultStore:
    """The fixture store every engine reads from."""

    def test_collection_sizes(self, store):
        """Default store holds every fixture collection."""
        assert len(store.applications) == 15
        assert len(store.officers) == 3
        assert len(store.agencies) == 6
        assert len(store.bundles) == 3
        assert len(store.documents) == 2
        assert len(store.districts) == 6
        assert len(store.talent_pool) == 10
        assert len(store.blockchain_records) == 4

    def test_reference_date(self, store):
        assert store.reference_date == date(2026, 2, 4)
        assert store.reference_datetime.date() == date(2026, 2, 4)

    def test_seeded_purchase(self, store):
        """The demo purchase is in progress three services in."""
        (purchase,) = store.purchases.values()
        assert purchase.bbid == DEMO_BBID
        assert purchase.status is PurchaseStatus.in_progress
        assert purchase.services_completed == ["SRV-001", "SRV-002", "SRV-003"]
        assert purchase.current_service == "SRV-004"

    def test_without_seed(self, empty_store):
        """seed_purchases=False leaves purchases empty."""
        assert empty_store.purchases == {}

    def test_stores_do_not_share_state(self):
        """Two stores built from fixtures never share objects."""
        first = build_default_store()
        second = build_default_store()
        first.applications[0].investment_amount = 1
        first.documents[0].shared_with.append("OFF-999")
        assert second.applications[0].investment_amount == 5_000_000
        assert "OFF-999" not in second.documents[0].shared_with

    def test_custom_reference_date_moves_registry_timestamps(self):
        """Registry timestamps stay in the past of a later reference date."""
        later = build_default_store(reference_date=date(2026, 3, 1))
        assert later.reference_date == date(2026, 3, 1)
        assert max(r.timestamp.date() for r in later.blockchain_records) < date(2026, 3, 1)

    def test_reset_discards_mutations(self):
        """reset_store() throws away every write."""
        current = store_module.get_store()
        current.documents.clear()
        fresh = store_module.reset_store()
        assert store_module.get_store() is fresh
        assert len(fresh.documents) == 2
