"""
Tests for bottleneck intelligence.
"""

from datetime import date

import pytest

from oss_api.engines.bottleneck import analyze_bottlenecks, collect_samples

REFERENCE = date(2026, 2, 4)


class TestSamples:
    """Stage samples drawn from the case universe."""

    def test_only_started_stages_with_durations(self, store):
        """Only stages with a recorded duration become samples."""
        samples = collect_samples(store.applications)
        assert len(samples) == 44
        assert not any(s.application_id == "APP-2026-014" for s in samples)
        env = [s.days for s in samples if s.stage == "environment"]
        assert env == [25, 27]


class TestReport:
    """The full bottleneck report at the reference date."""

    def test_heatmap_order(self, store):
        """Agencies ranked by average stage duration, slowest first."""
        report = analyze_bottlenecks(store.applications, REFERENCE)
        assert [(h.agency, h.avg_delay) for h in report.agency_heatmap] == [
            ("DoE", 26), ("Drug Admin", 18), ("Bangladesh Bank", 11), ("Fire Service", 10),
            ("RJSC", 9), ("NBR", 7), ("BIDA", 3),
        ]
        assert report.agency_heatmap[0].sla_compliance == 0
        assert report.agency_heatmap[4].sla_compliance == 93

    def test_top_delay_stages(self, store):
        """The five slowest stages, each with a trend."""
        report = analyze_bottlenecks(store.applications, REFERENCE)
        assert [s.stage for s in report.top_delay_stages] == [
            "Environmental Clearance",
            "Drug Administration",
            "Bangladesh Bank FX Approval",
            "Fire Safety License",
            "RJSC Company Registration",
        ]
        assert report.top_delay_stages[0].trend == "stable"

    def test_impact(self, store):
        """Savings from bringing the slowest stages back to SLA."""
        impact = analyze_bottlenecks(store.applications, REFERENCE).impact
        assert impact.total_days_lost == 0
        assert impact.estimated_fdi_lost == pytest.approx(7_440_000)
        assert [(s.stage, s.days, s.fdi_value) for s in impact.potential_savings] == [
            ("Environmental Clearance", 12, 12_300_000),
            ("Drug Administration", 4, 1_800_000),
            ("Bangladesh Bank FX Approval", 0, 10_695_000),
        ]

    def test_days_lost_follow_reference_date(self, store):
        """Moving the reference date forward adds days lost."""
        impact = analyze_bottlenecks(store.applications, date(2026, 3, 1)).impact
        # 2025-12-28 is the oldest non-rejected submission: 63 days to 2026-03-01
        assert impact.total_days_lost == 3

    def test_empty(self):
        """No applications gives an empty report, not an error."""
        report = analyze_bottlenecks([], REFERENCE)
        assert report.agency_heatmap == []
        assert report.top_delay_stages == []
        assert report.impact.total_days_lost == 0
        assert report.impact.potential_savings == []
