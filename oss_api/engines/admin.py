"""
Admin data provider.

Every command-center, governance, agency, officer, analytics, security,
config and EODB panel reads from the same case universe held in the store.
Nothing here is stored: officer and agency statistics are recomputed from
the applications on every call.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import date

from oss_api import config
from oss_api.engines.metrics import count_by, mean, percentage, rank, round_half_up, top_n
from oss_api.fixtures.applications import STAGE_AGENCIES
from oss_api.models.domain import (
    Application,
    ApplicationStatus,
    ApprovalStatus,
    FixtureStore,
    days_in_progress,
)

logger = logging.getLogger(__name__)

# An officer carrying more than this many cases is busy but not overloaded.
OPTIMAL_LOAD = 10
FAIRNESS_DEVIATION = 20
FAST_APPROVAL_DAYS = 15
HIGH_RISK_APPROVAL_DAYS = 10
LARGE_INVESTMENT = 5_000_000
NOT_STARTED = (ApprovalStatus.not_started, ApprovalStatus.not_required)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class NationalMetrics:
    total_pipeline_value: float
    active_cases: int
    approved_cases: int
    rejected_cases: int
    avg_processing_days: int
    sla_target: int
    delayed_cases: int
    total_officers: int
    avg_officer_load: int
    total_agencies: int


@dataclass
class StatusBreakdown:
    total: int
    counts: dict[str, int]
    approval_rate: int


@dataclass
class OfficerStats:
    officer: str
    total: int
    approved: int
    rejected: int
    approval_rate: int
    rejection_rate: int
    avg_days: int


@dataclass
class AgencyStats:
    agency: str
    sla_target: float
    avg_response_time: float
    sla_compliance: int
    cases_processed: int
    cases_completed: int
    current_load: int


@dataclass
class NationalPulseSummary:
    total_pipeline: float
    active_cases: int
    approved_cases: int
    avg_processing_days: int
    officer_load: int
    sla_compliance: int


@dataclass
class AgencyBottleneck:
    agency: str
    avg_delay: float
    cases_affected: int
    sla_target: float


@dataclass
class PolicyImpact:
    current_approvals: int
    current_rejections: int
    avg_days: int
    applications: list[Application]


@dataclass
class PolicyScenario:
    """Incentive package to simulate. Defaults are the policy in force."""
    tax_holiday_years: float = 5
    duty_exemption_percent: float = 50
    sector_incentives: dict[str, float] = field(default_factory=lambda: {
        "Textile & Garment": 10,
        "Pharmaceutical": 15,
        "IT & Software": 20,
        "Renewable Energy": 25,
        "Manufacturing": 10,
    })
    land_subsidy_percent: float = 20
    fast_track_threshold: float = 5_000_000


@dataclass
class RegionalScore:
    country: str
    score: int


@dataclass
class PolicySimulation:
    investor_roi_delta: float
    fdi_attractiveness_score: int
    fiscal_cost: int
    projected_tax_return: int
    net_benefit: int
    competitiveness_vs_region: list[RegionalScore]
    recommendation: str
    message: str


@dataclass
class OfficerFairness:
    stats: list[OfficerStats]
    team_average: int
    alerts: list[OfficerStats]


@dataclass
class CorruptionSignal:
    id: str
    type: str
    officer: str
    application: str
    days: int
    investment_amount: float
    risk: str
    flagged_date: date


@dataclass
class TimelineEvent:
    day: int
    event: str
    actor: str
    action: str


@dataclass
class Escalation:
    case_id: str
    investor: str
    officer: str
    days_overdue: int
    status: ApplicationStatus
    investment_amount: float


@dataclass
class WorkflowStep:
    step: int
    agency: str
    stage: str
    dependencies: list[str]
    cases_processed: int
    avg_days: float


@dataclass
class OfficerLoad:
    officer: str
    current_load: int
    capacity: int
    approved: int
    rejected: int
    avg_days: int
    status: str        # overload | optimal | healthy
    load_level: str    # high | medium | normal


@dataclass
class TrainingNeed:
    officer: str
    skill: str
    reason: str
    avg_days: int
    approval_rate: int
    urgency: str


@dataclass
class FDILoss:
    avg_approval_days: int
    target_days: int
    delay_days: int
    cases_delayed: int
    avg_investment_size: float
    loss_rate: float
    estimated_loss: float


@dataclass
class IncentiveROI:
    incentive: str
    sector: str
    cost: float
    return_tax: float
    return_jobs: int
    roi: float
    linked_cases: int
    sector_investment: float


@dataclass
class SLAImpact:
    target_days: int
    officer_load: float
    expected_delays: int
    investor_satisfaction: float


@dataclass
class NotificationHealth:
    avg_per_user: int
    high_alert_users: list[str] = field(default_factory=list)
    system_health: str = "Healthy"


# ---------------------------------------------------------------------------
# Static reference tables
# ---------------------------------------------------------------------------

# (step, agency, stage, dependencies, stage key, typical days)
WORKFLOW = [
    (1, "BIDA", "Initial Review", [], "bida_initial", 5),
    (2, "RJSC", "Company Registration", ["BIDA"], "rjsc", 8.5),
    (3, "NBR", "Tax Registration", ["RJSC"], "nbr", 6.2),
    (4, "Bangladesh Bank", "Foreign Exchange Approval", ["NBR", "RJSC"], "bangladesh_bank", 14.3),
    (5, "Fire Service", "Safety Certificate", ["RJSC"], "fire", 7.1),
    (5, "DoE", "Environmental Clearance", ["RJSC"], "environment", 18.7),
    (5, "Drug Admin", "Pharmaceutical License", ["RJSC", "DoE"], "drug_admin", 12.5),
    (6, "BIDA", "Final Approval & Certificate", ["Bangladesh Bank", "Fire Service", "DoE"], "bida_final", 4),
]

# (incentive, sector, cost, tax return, jobs, roi)
INCENTIVES = [
    ("Tax Holiday (5yr)", "Manufacturing", 12_500_000, 45_000_000, 2300, 3.6),
    ("Duty Exemption", "Textile & Garment", 8_000_000, 18_000_000, 800, 2.25),
    ("Land Subsidy", "Renewable Energy", 5_000_000, 22_000_000, 1200, 4.4),
]

BASELINE_POLICY = PolicyScenario()

REGIONAL_ATTRACTIVENESS = {
    "Vietnam": 72,
    "India": 68,
    "Indonesia": 65,
    "Thailand": 70,
    "Malaysia": 74,
}
BANGLADESH_ATTRACTIVENESS = 62
HOME_COUNTRY = "Bangladesh (Current)"

# Fiscal model assumptions
FDI_GROWTH = 1.3
PROFIT_RATE = 0.12
CORPORATE_TAX_RATE = 0.25
IMPORT_SHARE = 0.3
DUTY_RATE = 0.25
LAND_SHARE = 0.15
JOBS_PER_MILLION = 50
AVG_SALARY = 8000
INCOME_TAX_RATE = 0.15
REVENUE_SHARE = 0.40
VAT_RATE = 0.15
HORIZON_YEARS = 10

EODB_INDICATORS = [
    {"indicator": "Starting a Business", "bd_score": 72, "target_score": 85, "world_avg": 78},
    {"indicator": "Getting Electricity", "bd_score": 68, "target_score": 80, "world_avg": 75},
    {"indicator": "Registering Property", "bd_score": 65, "target_score": 75, "world_avg": 70},
    {"indicator": "Protecting Investors", "bd_score": 58, "target_score": 70, "world_avg": 65},
]

REGIONAL_PEERS = [
    {"country": "Singapore", "fdi_score": 92, "approval_days": 15, "digital_score": 95},
    {"country": "Malaysia", "fdi_score": 78, "approval_days": 30, "digital_score": 82},
    {"country": "Vietnam", "fdi_score": 75, "approval_days": 45, "digital_score": 70},
    {"country": "Thailand", "fdi_score": 72, "approval_days": 42, "digital_score": 75},
    {"country": "Bangladesh", "fdi_score": 62, "approval_days": None, "digital_score": 58},
    {"country": "India", "fdi_score": 68, "approval_days": 52, "digital_score": 65},
]

FEATURE_USAGE = [
    {"feature": "Application Review", "usage": 95},
    {"feature": "Document Upload", "usage": 88},
    {"feature": "Officer CRM", "usage": 72},
    {"feature": "Analytics Dashboard", "usage": 34},
    {"feature": "Policy Simulator", "usage": 12},
]

WITHDRAWAL_RATE = 0.15  # share of investors lost per month of delay
SLA_FALLBACK_DAYS = 31


# ---------------------------------------------------------------------------
# Command center
# ---------------------------------------------------------------------------

def _days(store: FixtureStore, app: Application) -> int:
    return days_in_progress(app, store.reference_date)


def _avg_processing_days(store: FixtureStore) -> int:
    return round_half_up(mean(_days(store, app) for app in store.applications))


def _delayed_cases(store: FixtureStore) -> int:
    return sum(1 for app in store.applications if _days(store, app) > config.SLA_TARGET_DAYS)


def _avg_officer_load(store: FixtureStore) -> int:
    if not store.officers:
        return 0
    return round_half_up(len(store.applications) / len(store.officers))


def national_metrics(store: FixtureStore) -> NationalMetrics:
    apps = store.applications
    return NationalMetrics(
        total_pipeline_value=sum(app.investment_amount for app in apps),
        active_cases=sum(1 for app in apps if app.is_open),
        approved_cases=sum(1 for app in apps if app.status is ApplicationStatus.approved),
        rejected_cases=sum(1 for app in apps if app.status is ApplicationStatus.rejected),
        avg_processing_days=_avg_processing_days(store),
        sla_target=config.SLA_TARGET_DAYS,
        delayed_cases=_delayed_cases(store),
        total_officers=len(store.officers),
        avg_officer_load=_avg_officer_load(store),
        total_agencies=len(store.agencies),
    )


def status_breakdown(store: FixtureStore) -> StatusBreakdown:
    """Case count per status. Every status is listed, so the counts always
    add up to the number of applications."""
    found = count_by(store.applications, key=lambda app: app.status)
    counts = {status.value: found.get(status, 0) for status in ApplicationStatus}
    total = len(store.applications)
    return StatusBreakdown(
        total=total,
        counts=counts,
        approval_rate=percentage(counts[ApplicationStatus.approved.value], total),
    )


def national_pulse_summary(store: FixtureStore) -> NationalPulseSummary:
    metrics = national_metrics(store)
    cases = len(store.applications)
    return NationalPulseSummary(
        total_pipeline=metrics.total_pipeline_value,
        active_cases=metrics.active_cases,
        approved_cases=metrics.approved_cases,
        avg_processing_days=metrics.avg_processing_days,
        officer_load=metrics.avg_officer_load,
        sla_compliance=percentage(cases - metrics.delayed_cases, cases),
    )


def bottleneck_stats(store: FixtureStore) -> list[AgencyBottleneck]:
    """Agencies whose average response time overruns their SLA target,
    worst first."""
    overdue = rank(
        [stats for stats in agency_sla_stats(store) if stats.avg_response_time > stats.sla_target],
        key=lambda stats: stats.avg_response_time - stats.sla_target,
    )
    # Rounded only for display; the ranking above uses the exact delay.
    return [
        AgencyBottleneck(
            agency=stats.agency,
            avg_delay=round(stats.avg_response_time - stats.sla_target, 1),
            cases_affected=stats.current_load,
            sla_target=stats.sla_target,
        )
        for stats in overdue
    ]


def policy_impact(store: FixtureStore) -> PolicyImpact:
    metrics = national_metrics(store)
    return PolicyImpact(
        current_approvals=metrics.approved_cases,
        current_rejections=metrics.rejected_cases,
        avg_days=metrics.avg_processing_days,
        applications=list(store.applications),
    )


def _attractiveness(scenario: PolicyScenario) -> float:
    score = BANGLADESH_ATTRACTIVENESS
    score += scenario.tax_holiday_years / 10 * 15
    score += scenario.duty_exemption_percent / 100 * 12
    score += mean(scenario.sector_incentives.values()) / 30 * 8
    # lower thresholds let more projects into the fast track
    if scenario.fast_track_threshold < 3_000_000:
        score += 5
    elif scenario.fast_track_threshold < 5_000_000:
        score += 3
    return min(100, max(0, score))


def recommendation_message(recommendation: str, roi_delta: float, score: int, net_benefit: float) -> str:
    if recommendation == "approve":
        sign = "+" if roi_delta > 0 else ""
        return (
            f"RECOMMENDED: Strong ROI ({sign}{roi_delta}%), competitive score ({score}/100), "
            f"positive net benefit (${net_benefit / 1_000_000:.1f}M)"
        )
    if recommendation == "reconsider":
        return (
            "RECONSIDER: Modest benefits. Consider targeted adjustments to improve "
            "attractiveness score or reduce fiscal cost."
        )
    return (
        "NOT RECOMMENDED: Negative net benefit or insufficient competitiveness gain. "
        "Reassess policy parameters."
    )


def simulate_policy_impact(store: FixtureStore, scenario: PolicyScenario) -> PolicySimulation:
    """Project what an incentive package would do to investor returns, FDI
    attractiveness and the treasury, relative to the policy in force.

    The fiscal model scales the current pipeline by FDI_GROWTH and books
    costs and returns over a HORIZON_YEARS window. With no applications
    every money figure is 0.
    """
    baseline = BASELINE_POLICY
    roi_delta = (
        (scenario.tax_holiday_years - baseline.tax_holiday_years) * 2.5
        + (scenario.duty_exemption_percent - baseline.duty_exemption_percent) * 0.15
        + (scenario.land_subsidy_percent - baseline.land_subsidy_percent) * 0.08
    )
    score = _attractiveness(scenario)

    apps = store.applications
    avg_investment = mean(app.investment_amount for app in apps)
    new_fdi = len(apps) * FDI_GROWTH * avg_investment
    annual_profit = avg_investment * PROFIT_RATE

    tax_holiday_cost = new_fdi * annual_profit * CORPORATE_TAX_RATE * scenario.tax_holiday_years
    duty_cost = (new_fdi * avg_investment * IMPORT_SHARE * DUTY_RATE
                 * scenario.duty_exemption_percent / 100)
    land_cost = new_fdi * avg_investment * LAND_SHARE * scenario.land_subsidy_percent / 100
    fiscal_cost = tax_holiday_cost + duty_cost + land_cost

    taxed_years = max(0, HORIZON_YEARS - scenario.tax_holiday_years)
    operations_tax = new_fdi * annual_profit * CORPORATE_TAX_RATE * taxed_years
    jobs = new_fdi / 1_000_000 * JOBS_PER_MILLION
    employment_tax = jobs * AVG_SALARY * INCOME_TAX_RATE * HORIZON_YEARS
    vat = new_fdi * avg_investment * REVENUE_SHARE * VAT_RATE * HORIZON_YEARS
    tax_return = operations_tax + employment_tax + vat

    net_benefit = tax_return - fiscal_cost

    if net_benefit > fiscal_cost * 0.5 and score > 70:
        recommendation = "approve"
    elif net_benefit > 0 and score > 65:
        recommendation = "reconsider"
    else:
        recommendation = "reject"

    regional = list(REGIONAL_ATTRACTIVENESS.items())
    regional.append((HOME_COUNTRY, score))
    competitiveness = [
        RegionalScore(country=country, score=round_half_up(value))
        for country, value in rank(regional, key=lambda pair: pair[1])
    ]

    rounded_delta = round_half_up(roi_delta * 10) / 10
    rounded_score = round_half_up(score)
    logger.debug("Policy simulation: score=%.1f net=%.0f -> %s", score, net_benefit, recommendation)
    return PolicySimulation(
        investor_roi_delta=rounded_delta,
        fdi_attractiveness_score=rounded_score,
        fiscal_cost=round_half_up(fiscal_cost),
        projected_tax_return=round_half_up(tax_return),
        net_benefit=round_half_up(net_benefit),
        competitiveness_vs_region=competitiveness,
        recommendation=recommendation,
        message=recommendation_message(recommendation, rounded_delta, rounded_score, net_benefit),
    )


# ---------------------------------------------------------------------------
# Governance
# ---------------------------------------------------------------------------

def officer_decision_stats(store: FixtureStore) -> list[OfficerStats]:
    stats = []
    for officer in store.officers:
        cases = [app for app in store.applications if app.assigned_officer == officer.name]
        approved = sum(1 for app in cases if app.status is ApplicationStatus.approved)
        rejected = sum(1 for app in cases if app.status is ApplicationStatus.rejected)
        stats.append(OfficerStats(
            officer=officer.name,
            total=len(cases),
            approved=approved,
            rejected=rejected,
            approval_rate=percentage(approved, len(cases)),
            rejection_rate=percentage(rejected, len(cases)),
            avg_days=round_half_up(mean(_days(store, app) for app in cases)),
        ))
    return stats


def team_average_approval_rate(stats: list[OfficerStats]) -> int:
    return round_half_up(mean(s.approval_rate for s in stats))


def officer_fairness(store: FixtureStore) -> OfficerFairness:
    stats = officer_decision_stats(store)
    team_average = team_average_approval_rate(stats)
    return OfficerFairness(
        stats=stats,
        team_average=team_average,
        alerts=[s for s in stats if abs(s.approval_rate - team_average) > FAIRNESS_DEVIATION],
    )


def corruption_signals(store: FixtureStore) -> list[CorruptionSignal]:
    """Large investments approved suspiciously fast."""
    signals = []
    for app in store.applications:
        days = _days(store, app)
        if app.status is not ApplicationStatus.approved:
            continue
        if days >= FAST_APPROVAL_DAYS or app.investment_amount <= LARGE_INVESTMENT:
            continue
        signals.append(CorruptionSignal(
            id=app.id,
            type="Fast Approval",
            officer=app.assigned_officer,
            application=app.id,
            days=days,
            investment_amount=app.investment_amount,
            risk="high" if days < HIGH_RISK_APPROVAL_DAYS else "medium",
            flagged_date=store.reference_date,
        ))
    return signals


def journey_timeline(store: FixtureStore, case_id: str) -> list[TimelineEvent]:
    app = next((a for a in store.applications if a.id == case_id), None)
    if app is None:
        return []

    timeline = [
        TimelineEvent(1, "Application Submitted", app.company_name, "Submitted initial application"),
        TimelineEvent(2, "Assigned to Officer", "System", f"Assigned to {app.assigned_officer}"),
        TimelineEvent(5, "Documents Verified", app.assigned_officer, "Completed document verification"),
    ]

    started = [(stage, status) for stage, status in app.approvals.items() if status not in NOT_STARTED]
    for idx, (stage, status) in enumerate(started):
        agency = STAGE_AGENCIES.get(stage, stage)
        timeline.append(TimelineEvent(
            day=8 + idx * 5,
            event=f"{agency} Review",
            actor=agency,
            action="Approved application" if status is ApprovalStatus.approved else "Under review",
        ))

    if app.status is ApplicationStatus.approved:
        timeline.append(TimelineEvent(
            day=_days(store, app) or 30,
            event="Final Approval",
            actor="BIDA Admin",
            action="Application approved and certificate issued",
        ))
    return timeline


# ---------------------------------------------------------------------------
# Agencies
# ---------------------------------------------------------------------------

def agency_sla_stats(store: FixtureStore) -> list[AgencyStats]:
    """Per-agency SLA view derived from each application's stage map.

    Compliance is the share of approved stages that finished within the
    agency's target. An agency with no finished stage scores 0."""
    stats = []
    for agency in store.agencies:
        key = agency.stage_key
        stages = [app for app in store.applications if key in app.approvals]
        completed = [app for app in stages if app.approvals[key] is ApprovalStatus.approved]
        timed = [
            (app.stage_durations or {})[key]
            for app in completed
            if key in (app.stage_durations or {})
        ]
        stats.append(AgencyStats(
            agency=agency.name,
            sla_target=agency.sla_target,
            avg_response_time=agency.avg_response_time,
            sla_compliance=percentage(sum(1 for d in timed if d <= agency.sla_target), len(timed)),
            cases_processed=len(stages),
            cases_completed=len(completed),
            current_load=sum(1 for app in stages if app.approvals[key] is ApprovalStatus.pending),
        ))
    return stats


def sla_leaderboard(store: FixtureStore) -> list[AgencyStats]:
    return rank(agency_sla_stats(store), key=lambda s: s.sla_compliance)


def escalations(store: FixtureStore, limit: int = 10) -> list[Escalation]:
    overdue = []
    for app in store.applications:
        days = _days(store, app)
        if days <= config.ESCALATION_THRESHOLD_DAYS:
            continue
        overdue.append(Escalation(
            case_id=app.id,
            investor=app.company_name,
            officer=app.assigned_officer,
            days_overdue=days - config.SLA_TARGET_DAYS,
            status=app.status,
            investment_amount=app.investment_amount,
        ))
    return rank(overdue, key=lambda e: e.days_overdue, limit=limit)


def dependency_graph(store: FixtureStore) -> list[WorkflowStep]:
    return [
        WorkflowStep(
            step=step,
            agency=agency,
            stage=stage,
            dependencies=list(deps),
            cases_processed=sum(1 for app in store.applications if key in app.approvals),
            avg_days=avg_days,
        )
        for step, agency, stage, deps, key, avg_days in WORKFLOW
    ]


# ---------------------------------------------------------------------------
# Officer ecosystem
# ---------------------------------------------------------------------------

def load_heatmap(store: FixtureStore) -> list[OfficerLoad]:
    capacity = config.OFFICER_CAPACITY
    heatmap = []
    for stats in officer_decision_stats(store):
        if stats.total > capacity:
            status, level = "overload", "high"
        elif stats.total > OPTIMAL_LOAD:
            status, level = "optimal", "medium"
        else:
            status, level = "healthy", "normal"
        heatmap.append(OfficerLoad(
            officer=stats.officer,
            current_load=stats.total,
            capacity=capacity,
            approved=stats.approved,
            rejected=stats.rejected,
            avg_days=stats.avg_days,
            status=status,
            load_level=level,
        ))
    return heatmap


def skill_coverage(store: FixtureStore) -> dict[str, list[str]]:
    """Sector -> names of officers who handle at least one case in it."""
    coverage: dict[str, list[str]] = {}
    for app in store.applications:
        coverage.setdefault(app.sector, [])
    for sector, officers in coverage.items():
        for officer in store.officers:
            if any(a.sector == sector and a.assigned_officer == officer.name for a in store.applications):
                officers.append(officer.name)
    return coverage


def training_needs(store: FixtureStore) -> list[TrainingNeed]:
    stats = officer_decision_stats(store)
    slow_threshold = mean(s.avg_days for s in stats) * 1.2
    needs = []
    for s in stats:
        slow = s.avg_days > slow_threshold
        if not slow and s.approval_rate >= 50:
            continue
        needs.append(TrainingNeed(
            officer=s.officer,
            skill="Process Efficiency" if slow else "Decision Quality",
            reason="Slow Processing" if slow else "Low Approval Rate",
            avg_days=s.avg_days,
            approval_rate=s.approval_rate,
            urgency="high" if s.total > OPTIMAL_LOAD else "medium",
        ))
    return needs


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

def drop_off_funnel(store: FixtureStore) -> list[dict]:
    submitted = len(store.applications)
    return [
        {"stage": "Profile Created", "count": 450, "drop_rate": 0},
        {"stage": "Documents Started", "count": submitted + 70, "drop_rate": 15.6},
        {"stage": "Payment Completed", "count": submitted + 20, "drop_rate": 13.2},
        {"stage": "Application Submitted", "count": submitted, "drop_rate": 6.3},
    ]


def fdi_loss(store: FixtureStore) -> FDILoss:
    metrics = national_metrics(store)
    cases = len(store.applications)
    avg_investment = metrics.total_pipeline_value / cases if cases else 0.0
    return FDILoss(
        avg_approval_days=metrics.avg_processing_days,
        target_days=metrics.sla_target,
        delay_days=max(0, metrics.avg_processing_days - metrics.sla_target),
        cases_delayed=metrics.delayed_cases,
        avg_investment_size=avg_investment,
        loss_rate=WITHDRAWAL_RATE,
        estimated_loss=metrics.delayed_cases * avg_investment * WITHDRAWAL_RATE,
    )


def incentive_roi(store: FixtureStore) -> list[IncentiveROI]:
    return [
        IncentiveROI(
            incentive=incentive,
            sector=sector,
            cost=cost,
            return_tax=return_tax,
            return_jobs=jobs,
            roi=roi,
            linked_cases=sum(1 for app in store.applications if app.sector == sector),
            sector_investment=sum(app.investment_amount for app in store.applications if app.sector == sector),
        )
        for incentive, sector, cost, return_tax, jobs, roi in INCENTIVES
    ]


# ---------------------------------------------------------------------------
# EODB
# ---------------------------------------------------------------------------

def eodb_indicators(store: FixtureStore) -> list[dict]:
    return [dict(row) for row in EODB_INDICATORS]


def regional_benchmark(store: FixtureStore) -> list[dict]:
    """Regional peers. Bangladesh's approval time is the live average."""
    rows = [dict(row) for row in REGIONAL_PEERS]
    for row in rows:
        if row["country"] == "Bangladesh":
            row["approval_days"] = _avg_processing_days(store)
    return rows


# ---------------------------------------------------------------------------
# Security
# ---------------------------------------------------------------------------

def audit_logs(store: FixtureStore) -> list[dict]:
    apps, officers = store.applications, store.officers
    logs = []
    if apps:
        logs.append({"id": 1, "user": "admin@bida.gov.bd", "action": f"Viewed Application {apps[0].id}",
                     "module": "Applications", "timestamp": "2026-02-04 09:15:23", "ip": "192.168.1.100"})
    if officers and len(apps) > 1:
        logs.append({"id": 2, "user": officers[0].email, "action": f"Approved Document for {apps[1].id}",
                     "module": "Documents", "timestamp": "2026-02-04 08:45:10", "ip": "192.168.1.105"})
    logs.append({"id": 3, "user": "superadmin@bida.gov.bd", "action": "Changed SLA Setting",
                 "module": "Config", "timestamp": "2026-02-03 16:30:00", "ip": "192.168.1.50"})
    return logs


def privacy_metrics(store: FixtureStore) -> dict:
    return {
        "data_deletion_requests": 3,
        "consent_logs_recorded": len(store.applications) * 5,
        "pii_masking_enabled": True,
        "gdpr_compliance": 98,
    }


def privilege_logs(store: FixtureStore) -> list[dict]:
    if not store.officers:
        return []
    return [{
        "user": store.officers[0].email,
        "elevated": "Temporary Admin Access",
        "duration": "2 hours",
        "reason": "Emergency application processing",
        "granted": "2026-02-03 14:00",
        "expires": "2026-02-03 16:00",
    }]


def feature_usage(store: FixtureStore) -> list[dict]:
    return [dict(row) for row in FEATURE_USAGE]


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def sla_impact_simulation(store: FixtureStore, target_days: int) -> SLAImpact:
    """Project what moving the national SLA target would do.

    A tighter target raises officer load above 100% and investor
    satisfaction with it. Satisfaction is clamped to [0, 100]."""
    current = _avg_processing_days(store) or SLA_FALLBACK_DAYS
    officer_load = 100 + (current - target_days) / current * 100
    satisfaction = 50 + (config.SLA_TARGET_DAYS - target_days) * 1.5

    logger.debug("SLA simulation: target=%d current=%d", target_days, current)
    return SLAImpact(
        target_days=target_days,
        officer_load=round(max(0.0, officer_load), 1),
        expected_delays=sum(1 for app in store.applications if _days(store, app) > target_days),
        investor_satisfaction=max(0.0, min(100.0, satisfaction)),
    )


def notification_health(store: FixtureStore, rng: random.Random | None = None) -> NotificationHealth:
    """The one randomised panel. Pass a seeded rng for repeatable output."""
    rng = rng or random.Random()
    avg_per_user = 45
    high_alert = [f"{o.name} ({rng.randint(60, 99)} notifications)" for o in top_n(store.officers, 2)]
    return NotificationHealth(
        avg_per_user=avg_per_user,
        high_alert_users=high_alert,
        system_health="Alert Fatigue Risk" if avg_per_user > 50 else "Healthy",
    )
