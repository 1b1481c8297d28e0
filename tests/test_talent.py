"""
Tests for district workforce and expatriate talent-pool lookups.
"""

import pytest

from oss_api.engines import talent


class TestSectorMapping:
    """Business sector to skill-density key."""

    @pytest.mark.parametrize("sector, skill", [
        ("Textile & Garment", "textile"),
        ("IT & Software", "technology"),
        ("IT", "technology"),
        ("Pharmaceutical", "healthcare"),
        ("Logistics", "logistics"),
        ("Agriculture", "agriculture"),
        ("Digital Retail", "manufacturing"),
        (None, "manufacturing"),
    ])
    def test_map(self, sector, skill):
        """Keywords pick the skill; anything unmatched is manufacturing."""
        assert talent.map_sector_to_skill(sector) == skill


class TestDistricts:
    """District workforce profiles."""

    def test_lookup_by_name_or_code(self, store):
        """Districts are found by name or code, case-insensitively."""
        assert talent.get_district_talent(store, "gazipur").district_code == "GAZ"
        assert talent.get_district_talent(store, "CTG").district_name == "Chittagong"
        assert talent.get_district_talent(store, "Atlantis") is None

    def test_textile_ranking(self, store):
        """Textile suitability favours Narayanganj and Gazipur."""
        ranking = talent.rank_districts_by_sector(store, "Textile & Garment")
        assert [r.district.district_name for r in ranking] == [
            "Narayanganj", "Gazipur", "Dhaka", "Chittagong", "Khulna", "Sylhet",
        ]
        dhaka = ranking[2]
        assert dhaka.suitability_score == pytest.approx(382.25)
        assert ranking[0].strengths == [
            "High skill density", "Immediate workforce availability", "Cost competitive",
        ]

    def test_talent_costs(self, store):
        """Monthly and annual cost of a planned headcount."""
        cost = talent.calculate_talent_costs(store, "Dhaka", {"skilled": 10, "managerial": 1})
        assert cost.monthly_cost == 335_000
        assert cost.annual_cost == 4_020_000
        assert cost.breakdown["entrylevel"] == 0
        assert talent.calculate_talent_costs(store, "Atlantis", {"skilled": 1}) is None

    def test_gaps(self, store):
        """Skills split into available, trainable and scarce."""
        gaps = talent.find_talent_gaps(store, ["Textile", "Engineering", "Finance"], "Gazipur")
        assert gaps.available == ["Textile"]
        assert gaps.training_recommended == ["Engineering"]
        assert gaps.scarce == ["Finance"]

    def test_gaps_unknown_district(self, store):
        """Unknown district -- every skill is scarce."""
        gaps = talent.find_talent_gaps(store, ["Textile"], "Atlantis")
        assert gaps.available == []
        assert gaps.scarce == ["Textile"]
        assert gaps.training_recommended == ["Textile"]

    def test_language(self, store):
        """Language proficiency, 0 for unknown language or district."""
        assert talent.language_proficiency(store, "Sylhet", "English") == 42
        assert talent.language_proficiency(store, "Sylhet", "Klingon") == 0
        assert talent.language_proficiency(store, "Atlantis", "English") == 0

    def test_wages(self, store):
        """Wages compared across districts; an unknown district averages 0."""
        wages = talent.compare_district_wages(store, ["Dhaka", "Khulna", "Atlantis"])
        assert [(w.district, w.average_wage, w.competitiveness) for w in wages] == [
            ("Dhaka", 42_500, "low"),
            ("Khulna", 26_875, "medium"),
            ("Atlantis", 0, "low"),
        ]

    def test_heatmap(self, store):
        """Dhaka has the densest talent pool."""
        dhaka = talent.talent_density_heatmap(store)[0]
        assert dhaka.total_density == 5320
        assert [s["skill"] for s in dhaka.top_skills] == ["technology", "finance", "textile"]


class TestTalentPool:
    """The pre-qualified expatriate talent pool."""

    @pytest.mark.parametrize("sector, expected", [
        ("it", ["talent-003", "talent-004"]),
        ("manufacturing", ["talent-001"]),
        ("pharmaceutical", ["talent-005"]),
        ("finance", ["talent-009", "talent-006"]),
        ("space-mining", []),
    ])
    def test_recommend(self, store, sector, expected):
        """Candidates are filtered by the sector's skills and ranked by match score."""
        assert [c.id for c in talent.recommend_talent(store, sector)] == expected

    @pytest.mark.parametrize("sector", [None, ""])
    def test_recommend_without_sector_uses_it_skills(self, store, sector):
        """No sector falls back to IT skills instead of returning nobody."""
        assert [c.id for c in talent.recommend_talent(store, sector)] == ["talent-003", "talent-004"]

    def test_recommend_by_position(self, store):
        """Position filter narrows finance candidates to the CFO."""
        found = talent.recommend_talent(store, "finance", required_positions=["Chief"])
        assert [c.id for c in found] == ["talent-009"]

    def test_recommend_sized_to_permits(self, store):
        """List length follows the work-permit quota."""
        store.talent_pool = [store.talent_pool[2]] * 20
        assert len(talent.recommend_talent(store, "it")) == 5
        assert len(talent.recommend_talent(store, "it", approved_work_permits=4)) == 7
        assert len(talent.recommend_talent(store, "it", approved_work_permits=30)) == 10

    def test_stats(self, store):
        """Pool totals by country and availability."""
        stats = talent.talent_pool_stats(store)
        assert stats.total == 10
        assert stats.by_country["India"] == 2
        assert stats.by_availability == {"within-30-days": 5, "immediate": 2, "within-60-days": 3}
        assert stats.average_match_score == 91

    def test_lookup_and_search(self, store):
        """Lookup by id, keyword search and country filter."""
        assert talent.get_candidate_by_id(store, "talent-005").name == "Dr. Hans Mueller"
        assert talent.get_candidate_by_id(store, "talent-999") is None
        assert [c.id for c in talent.search_talent(store, "quality")] == ["talent-001", "talent-005", "talent-007"]
        assert [c.id for c in talent.get_talent_by_country(store, "india")] == ["talent-002", "talent-006"]

    def test_categories(self, store):
        """Candidates grouped by role category."""
        assert [c.id for c in talent.get_talent_by_category(store, "technical")] == ["talent-004", "talent-010"]
        assert len(talent.get_talent_by_category(store, "management")) == 8
        assert talent.get_talent_by_category(store, "astronaut") == []
