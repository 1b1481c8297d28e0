"""
Tests for the admin data provider.

Numbers below are derived from the 15 fixture applications measured at the
2026-02-04 reference date.
"""

import random
from dataclasses import replace

import pytest

from oss_api.engines import admin
from oss_api.models.domain import Agency, ApplicationStatus


class TestCommandCenter:
    """Headline numbers on the admin command center."""

    def test_national_metrics(self, store):
        """Pipeline value, case counts and delays over the 15 fixture cases."""
        metrics = admin.national_metrics(store)
        assert metrics.total_pipeline_value == pytest.approx(171_300_000)
        assert metrics.active_cases == 11
        assert metrics.approved_cases == 3
        assert metrics.rejected_cases == 1
        assert metrics.avg_processing_days == 28
        assert metrics.sla_target == 45
        assert metrics.delayed_cases == 2
        assert metrics.total_officers == 3
        assert metrics.avg_officer_load == 5
        assert metrics.total_agencies == 6

    def test_status_counts_add_up(self, store):
        """Every case lands in exactly one status bucket."""
        breakdown = admin.status_breakdown(store)
        assert breakdown.counts == {"pending": 2, "under_review": 9, "approved": 3, "rejected": 1}
        assert sum(breakdown.counts.values()) == breakdown.total == len(store.applications)
        assert breakdown.approval_rate == 20

    def test_twelve_of_twenty_approved(self, store):
        """12 approved out of 20 is a 60% approval rate."""
        template = store.applications[0]
        store.applications = [
            replace(template, id=f"APP-{i}",
                    status=ApplicationStatus.approved if i < 12 else ApplicationStatus.under_review)
            for i in range(20)
        ]
        breakdown = admin.status_breakdown(store)
        assert breakdown.counts["approved"] == 12
        assert breakdown.approval_rate == 60

    def test_empty_store(self, store):
        """No applications -- averages and rates are 0, not an error."""
        store.applications = []
        metrics = admin.national_metrics(store)
        assert metrics.avg_processing_days == 0
        assert admin.status_breakdown(store).approval_rate == 0

    def test_pulse_summary(self, store):
        """Command-center pulse agrees with the national metrics."""
        summary = admin.national_pulse_summary(store)
        assert summary.active_cases == 11
        assert summary.officer_load == 5
        assert summary.sla_compliance == 87

    def test_no_bottlenecks_with_fixture_agencies(self, store):
        """Every fixture agency responds within its SLA target."""
        assert admin.bottleneck_stats(store) == []

    def test_bottlenecks_filtered_and_sorted(self, store):
        """Only agencies over target are listed, worst delay first."""
        store.agencies = [
            Agency(1, "Slow RJSC", "Registrar", "rjsc", 5, 9.0),
            Agency(2, "Slower NBR", "Revenue", "nbr", 5, 12.0),
            Agency(3, "Fine Fire", "Fire Service", "fire", 10, 7.1),
        ]
        bottlenecks = admin.bottleneck_stats(store)
        assert [b.agency for b in bottlenecks] == ["Slower NBR", "Slow RJSC"]
        assert bottlenecks[0].avg_delay == 7.0
        assert bottlenecks[1].avg_delay == 4.0
        assert bottlenecks[0].cases_affected == 2

    def test_bottlenecks_rank_on_exact_delay(self, store):
        """Delays 2.01 and 2.04 both display as 2.0 but the larger one still comes first."""
        store.agencies = [
            Agency(1, "Slightly Late", "Registrar", "rjsc", 5, 7.01),
            Agency(2, "Later", "Revenue", "nbr", 5, 7.04),
        ]
        bottlenecks = admin.bottleneck_stats(store)
        assert [b.agency for b in bottlenecks] == ["Later", "Slightly Late"]
        assert [b.avg_delay for b in bottlenecks] == [2.0, 2.0]

    def test_policy_impact(self, store):
        """Simulator baseline mirrors the national approval counts."""
        impact = admin.policy_impact(store)
        assert impact.current_approvals == 3
        assert impact.current_rejections == 1
        assert impact.avg_days == 28
        assert len(impact.applications) == 15


class TestPolicySimulation:
    """
    One application of $1M keeps the fiscal model readable: the scaled
    pipeline is $1.3M and every cost and return is a multiple of it.
    """

    @pytest.fixture
    def one_million(self, store):
        store.applications = [replace(store.applications[0], investment_amount=1_000_000)]
        return store

    def test_policy_in_force_is_approved(self, one_million):
        """The current package is the zero point for ROI and clears both approval bars."""
        result = admin.simulate_policy_impact(one_million, admin.PolicyScenario())
        assert result.investor_roi_delta == 0
        assert result.fdi_attractiveness_score == 80
        assert result.fiscal_cost == 282_750_000_000
        assert result.projected_tax_return == 975_000_780_000
        assert result.net_benefit == 692_250_780_000
        assert result.recommendation == "approve"
        assert result.message.startswith("RECOMMENDED:")

    def test_competitiveness_ranks_bangladesh_with_peers(self, one_million):
        result = admin.simulate_policy_impact(one_million, admin.PolicyScenario())
        assert [(r.country, r.score) for r in result.competitiveness_vs_region] == [
            ("Bangladesh (Current)", 80),
            ("Malaysia", 74),
            ("Vietnam", 72),
            ("Thailand", 70),
            ("India", 68),
            ("Indonesia", 65),
        ]

    def test_modest_package_is_reconsidered(self, one_million):
        """No holiday, exemption or subsidy: no fiscal cost, but only 66 points."""
        scenario = admin.PolicyScenario(
            tax_holiday_years=0,
            duty_exemption_percent=0,
            land_subsidy_percent=0,
            sector_incentives={"Manufacturing": 15},
        )
        result = admin.simulate_policy_impact(one_million, scenario)
        assert result.investor_roi_delta == -21.6
        assert result.fdi_attractiveness_score == 66
        assert result.fiscal_cost == 0
        assert result.net_benefit > 0
        assert result.recommendation == "reconsider"
        assert result.message.startswith("RECONSIDER:")

    def test_generous_package_costs_too_much_to_approve(self, one_million):
        """A maxed-out package scores 100 but the net benefit is under half the cost."""
        scenario = admin.PolicyScenario(
            tax_holiday_years=10,
            duty_exemption_percent=100,
            land_subsidy_percent=100,
            sector_incentives={"IT & Software": 30},
            fast_track_threshold=1_000_000,
        )
        result = admin.simulate_policy_impact(one_million, scenario)
        assert result.fdi_attractiveness_score == 100
        assert 0 < result.net_benefit < result.fiscal_cost * 0.5
        assert result.recommendation == "reconsider"

    @pytest.mark.parametrize("threshold, score, recommendation", [
        (5_000_000, 62, "reject"),
        (4_000_000, 65, "reject"),
        (2_000_000, 67, "reconsider"),
    ])
    def test_fast_track_threshold(self, one_million, threshold, score, recommendation):
        """Without other incentives only a low fast-track threshold lifts the score past 65."""
        scenario = admin.PolicyScenario(
            tax_holiday_years=0,
            duty_exemption_percent=0,
            land_subsidy_percent=0,
            sector_incentives={},
            fast_track_threshold=threshold,
        )
        result = admin.simulate_policy_impact(one_million, scenario)
        assert result.fdi_attractiveness_score == score
        assert result.recommendation == recommendation

    def test_reject_message(self, one_million):
        scenario = admin.PolicyScenario(
            tax_holiday_years=0, duty_exemption_percent=0, land_subsidy_percent=0, sector_incentives={},
        )
        result = admin.simulate_policy_impact(one_million, scenario)
        assert result.recommendation == "reject"
        assert result.message.startswith("NOT RECOMMENDED:")

    def test_no_applications(self, store):
        """An empty pipeline has no money figures and cannot be recommended."""
        store.applications = []
        result = admin.simulate_policy_impact(store, admin.PolicyScenario())
        assert (result.fiscal_cost, result.projected_tax_return, result.net_benefit) == (0, 0, 0)
        assert result.fdi_attractiveness_score == 80
        assert result.recommendation == "reject"


class TestGovernance:
    """Officer fairness, corruption signals and case timelines."""

    def test_officer_stats(self, store):
        """Per-officer totals, approval rate and average days."""
        stats = {s.officer: s for s in admin.officer_decision_stats(store)}
        assert (stats["Ahmed Khan"].total, stats["Ahmed Khan"].approval_rate, stats["Ahmed Khan"].avg_days) == (5, 0, 38)
        assert stats["Ahmed Khan"].rejected == 1
        assert (stats["Fatima Rahman"].total, stats["Fatima Rahman"].approval_rate) == (4, 50)
        assert (stats["Dr. Rahman"].total, stats["Dr. Rahman"].approval_rate, stats["Dr. Rahman"].avg_days) == (3, 33, 32)

    def test_team_average_of_empty_list(self):
        """A team with no officers averages 0."""
        assert admin.team_average_approval_rate([]) == 0

    def test_fairness_alerts(self, store):
        """Officers more than 20 points off the team average are flagged."""
        fairness = admin.officer_fairness(store)
        assert fairness.team_average == 28
        assert [a.officer for a in fairness.alerts] == ["Ahmed Khan", "Fatima Rahman"]

    def test_no_fast_approvals_in_fixtures(self, store):
        """No fixture case is approved suspiciously fast."""
        assert admin.corruption_signals(store) == []

    def test_fast_large_approval_is_flagged(self, store):
        """A $9M case cleared in 5 days is a high-risk signal."""
        app = store.applications[2]
        app.stage_durations = {"rjsc": 3, "nbr": 2}
        app.investment_amount = 9_000_000
        signals = admin.corruption_signals(store)
        assert [s.application for s in signals] == ["APP-2026-003"]
        assert signals[0].days == 5
        assert signals[0].risk == "high"

    def test_journey_timeline(self, store):
        """Fully approved case -- every stage appears, ending at final approval."""
        timeline = admin.journey_timeline(store, "APP-2026-003")
        assert [e.event for e in timeline[:3]] == [
            "Application Submitted", "Assigned to Officer", "Documents Verified",
        ]
        assert len(timeline) == 8
        assert timeline[-1].event == "Final Approval"
        assert timeline[-1].day == 23

    def test_timeline_skips_unstarted_stages(self, store):
        """Stages that never started are left off the timeline."""
        timeline = admin.journey_timeline(store, "APP-2026-005")
        assert [e.event for e in timeline[3:]] == ["RJSC Review"]
        assert timeline[3].action == "Under review"

    def test_timeline_unknown_case(self, store):
        """Unknown case id gives an empty timeline."""
        assert admin.journey_timeline(store, "APP-NOPE") == []


class TestAgencies:
    """Agency SLA statistics, leaderboard and escalations."""

    def test_agency_stats(self, store):
        """Processed, completed and pending counts come from each case's stage map."""
        stats = {s.agency: s for s in admin.agency_sla_stats(store)}
        rjsc = stats["RJSC"]
        assert (rjsc.cases_processed, rjsc.cases_completed, rjsc.current_load, rjsc.sla_compliance) == (15, 12, 2, 100)
        doe = stats["DoE"]
        assert (doe.cases_processed, doe.cases_completed, doe.current_load, doe.sla_compliance) == (4, 0, 3, 0)
        assert stats["Drug Admin"].sla_compliance == 0

    def test_leaderboard_is_stable(self, store):
        """Agencies with equal compliance keep their directory order."""
        board = admin.sla_leaderboard(store)
        assert [s.agency for s in board] == [
            "RJSC", "NBR", "Bangladesh Bank", "Fire Service", "Drug Admin", "DoE",
        ]

    def test_no_escalations_at_reference_date(self, store):
        """Nothing has been in progress past the escalation threshold yet."""
        assert admin.escalations(store) == []

    def test_escalations_sorted_and_limited(self, store):
        """Most overdue first, cut to the requested limit."""
        store.applications[0].stage_durations = {"rjsc": 70}
        store.applications[1].stage_durations = {"rjsc": 90}
        store.applications[2].stage_durations = {"rjsc": 80}
        overdue = admin.escalations(store, limit=2)
        assert [e.case_id for e in overdue] == ["APP-2026-002", "APP-2026-003"]
        assert overdue[0].days_overdue == 45

    def test_dependency_graph(self, store):
        """Workflow steps carry live case counts and their dependencies."""
        graph = admin.dependency_graph(store)
        assert graph[0].stage == "Initial Review"
        rjsc = next(step for step in graph if step.stage == "Company Registration")
        assert rjsc.cases_processed == 15
        assert graph[-1].dependencies == ["Bangladesh Bank", "Fire Service", "DoE"]


class TestOfficers:
    """Officer load, skill coverage and training needs."""

    def test_everyone_healthy(self, store):
        """Fixture officers all carry a healthy load."""
        assert {o.status for o in admin.load_heatmap(store)} == {"healthy"}

    def test_overload(self, store):
        """17 open cases against a capacity of 15 is an overload."""
        template = store.applications[0]
        store.applications += [replace(template, id=f"APP-X{i}") for i in range(12)]
        ahmed = next(o for o in admin.load_heatmap(store) if o.officer == "Ahmed Khan")
        assert ahmed.current_load == 17
        assert (ahmed.status, ahmed.load_level) == ("overload", "high")

    def test_skill_coverage(self, store):
        """Sectors map to the officers who handle them, empty when nobody does."""
        coverage = admin.skill_coverage(store)
        assert coverage["Manufacturing"] == ["Ahmed Khan"]
        assert coverage["Agriculture"] == []

    def test_training_needs(self, store):
        """Officers approving under half their cases need decision-quality training."""
        needs = admin.training_needs(store)
        assert [n.officer for n in needs] == ["Ahmed Khan", "Dr. Rahman"]
        assert {n.skill for n in needs} == {"Decision Quality"}
        assert {n.urgency for n in needs} == {"medium"}


class TestAnalytics:
    """Drop-off funnel, FDI loss and incentive returns."""

    def test_drop_off_ends_at_submitted(self, store):
        """The funnel's last row counts every submitted application."""
        funnel = admin.drop_off_funnel(store)
        assert funnel[-1] == {"stage": "Application Submitted", "count": 15, "drop_rate": 6.3}

    def test_fdi_loss(self, store):
        """Average approval is under target, so the delay is clamped at 0."""
        loss = admin.fdi_loss(store)
        assert loss.delay_days == 0
        assert loss.cases_delayed == 2
        assert loss.avg_investment_size == pytest.approx(11_420_000)
        assert loss.estimated_loss == pytest.approx(3_426_000)

    def test_incentive_roi(self, store):
        """Each incentive is linked to the cases in its sector."""
        linked = {row.sector: row.linked_cases for row in admin.incentive_roi(store)}
        assert linked == {"Manufacturing": 3, "Textile & Garment": 1, "Renewable Energy": 1}

    def test_regional_benchmark_uses_live_average(self, store):
        """Bangladesh's approval days come from the case universe."""
        bangladesh = next(r for r in admin.regional_benchmark(store) if r["country"] == "Bangladesh")
        assert bangladesh["approval_days"] == 28

    def test_reference_tables_are_copies(self, store):
        """Mutating a returned row leaves the reference table alone."""
        admin.eodb_indicators(store)[0]["bd_score"] = 0
        assert admin.EODB_INDICATORS[0]["bd_score"] == 72


class TestSecurityAndConfig:
    """Audit trails, privacy counters and configuration simulators."""

    def test_audit_logs(self, store):
        """Audit entries name the case and the officer who viewed it."""
        logs = admin.audit_logs(store)
        assert logs[0]["action"] == "Viewed Application APP-2026-001"
        assert logs[1]["user"] == "ahmed.khan@bida.gov.bd"

    def test_privacy_metrics(self, store):
        """Consent logs scale with the number of cases."""
        assert admin.privacy_metrics(store)["consent_logs_recorded"] == 75

    @pytest.mark.parametrize("target, load, delays, satisfaction", [
        (45, 39.3, 2, 50.0),
        (30, 92.9, 7, 72.5),
        (10, 164.3, 13, 100.0),
    ])
    def test_sla_simulation(self, store, target, load, delays, satisfaction):
        """Tighter SLA targets raise officer load and expected delays."""
        impact = admin.sla_impact_simulation(store, target)
        assert impact.officer_load == load
        assert impact.expected_delays == delays
        assert impact.investor_satisfaction == satisfaction

    def test_notification_health_is_repeatable_with_seed(self, store):
        """Same seed, same notification health."""
        first = admin.notification_health(store, rng=random.Random(7))
        second = admin.notification_health(store, rng=random.Random(7))
        assert first == second
        assert len(first.high_alert_users) == 2
        assert first.system_health == "Healthy"
