"""
GET /v1/admin/* -- Admin command center.

Every panel in the admin portal (command center, governance, agencies,
officer ecosystem, analytics, security, config, EODB) reads one of these
endpoints. All of them are derived from the same case universe, so the
numbers agree with each other across panels.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from oss_api.engines import admin
from oss_api.models.domain import FixtureStore
from oss_api.models.schemas import PolicyScenarioRequest
from oss_api.store import get_store

router = APIRouter()


# ---------------------------------------------------------------------------
# Command center
# ---------------------------------------------------------------------------

@router.get(
    "/v1/admin/metrics",
    summary="National metrics",
    description="Pipeline value, case counts, average processing days and delays against the national SLA.",
    tags=["Admin"],
)
async def get_national_metrics(store: FixtureStore = Depends(get_store)) -> admin.NationalMetrics:
    return admin.national_metrics(store)


@router.get(
    "/v1/admin/status-breakdown",
    summary="Cases per status",
    tags=["Admin"],
)
async def get_status_breakdown(store: FixtureStore = Depends(get_store)) -> admin.StatusBreakdown:
    return admin.status_breakdown(store)


@router.get(
    "/v1/admin/pulse",
    summary="National pulse summary",
    description="Headline numbers for the command center, including national SLA compliance.",
    tags=["Admin"],
)
async def get_pulse_summary(store: FixtureStore = Depends(get_store)) -> admin.NationalPulseSummary:
    return admin.national_pulse_summary(store)


@router.get(
    "/v1/admin/bottlenecks",
    summary="Agencies over their SLA target",
    description="Agencies whose average response time exceeds their SLA target, worst first.",
    tags=["Admin"],
)
async def get_bottleneck_stats(store: FixtureStore = Depends(get_store)) -> list[admin.AgencyBottleneck]:
    return admin.bottleneck_stats(store)


@router.get("/v1/admin/policy-impact", summary="Policy simulator baseline", tags=["Admin"])
async def get_policy_impact(store: FixtureStore = Depends(get_store)) -> admin.PolicyImpact:
    return admin.policy_impact(store)


@router.post(
    "/v1/admin/policy-simulation",
    summary="Simulate an incentive package",
    description=(
        "Projects investor ROI change, FDI attractiveness, fiscal cost and ten-year "
        "tax return for the given scenario, ranks Bangladesh against regional peers "
        "and recommends approve, reconsider or reject."
    ),
    tags=["Admin"],
)
async def simulate_policy(
    request: PolicyScenarioRequest,
    store: FixtureStore = Depends(get_store),
) -> admin.PolicySimulation:
    return admin.simulate_policy_impact(store, admin.PolicyScenario(**request.model_dump()))


# ---------------------------------------------------------------------------
# Governance
# ---------------------------------------------------------------------------

@router.get("/v1/admin/officers/stats", summary="Officer decision statistics", tags=["Governance"])
async def get_officer_stats(store: FixtureStore = Depends(get_store)) -> list[admin.OfficerStats]:
    return admin.officer_decision_stats(store)


@router.get(
    "/v1/admin/officers/fairness",
    summary="Officer fairness monitor",
    description="Flags officers whose approval rate is more than 20 points away from the team average.",
    tags=["Governance"],
)
async def get_officer_fairness(store: FixtureStore = Depends(get_store)) -> admin.OfficerFairness:
    return admin.officer_fairness(store)


@router.get("/v1/admin/corruption-signals", summary="Suspiciously fast approvals", tags=["Governance"])
async def get_corruption_signals(store: FixtureStore = Depends(get_store)) -> list[admin.CorruptionSignal]:
    return admin.corruption_signals(store)


@router.get("/v1/admin/cases/{case_id}/timeline", summary="Case journey timeline", tags=["Governance"])
async def get_journey_timeline(case_id: str, store: FixtureStore = Depends(get_store)) -> list[admin.TimelineEvent]:
    timeline = admin.journey_timeline(store, case_id)
    if not timeline:
        raise HTTPException(status_code=404, detail=f"Case '{case_id}' not found.")
    return timeline


# ---------------------------------------------------------------------------
# Agencies
# ---------------------------------------------------------------------------

@router.get("/v1/admin/agencies/stats", summary="Agency SLA statistics", tags=["Agencies"])
async def get_agency_stats(store: FixtureStore = Depends(get_store)) -> list[admin.AgencyStats]:
    return admin.agency_sla_stats(store)


@router.get("/v1/admin/agencies/leaderboard", summary="Agency SLA leaderboard", tags=["Agencies"])
async def get_sla_leaderboard(store: FixtureStore = Depends(get_store)) -> list[admin.AgencyStats]:
    return admin.sla_leaderboard(store)


@router.get(
    "/v1/admin/escalations",
    summary="Escalated cases",
    description="Cases in progress for longer than the escalation threshold, most overdue first.",
    tags=["Agencies"],
)
async def get_escalations(
    limit: int = Query(default=10, ge=1, le=100),
    store: FixtureStore = Depends(get_store),
) -> list[admin.Escalation]:
    return admin.escalations(store, limit=limit)


@router.get("/v1/admin/dependency-graph", summary="Approval workflow dependencies", tags=["Agencies"])
async def get_dependency_graph(store: FixtureStore = Depends(get_store)) -> list[admin.WorkflowStep]:
    return admin.dependency_graph(store)


# ---------------------------------------------------------------------------
# Officer ecosystem
# ---------------------------------------------------------------------------

@router.get("/v1/admin/officers/load", summary="Officer load heatmap", tags=["Officers"])
async def get_load_heatmap(store: FixtureStore = Depends(get_store)) -> list[admin.OfficerLoad]:
    return admin.load_heatmap(store)


@router.get("/v1/admin/officers/skill-coverage", summary="Sector coverage by officer", tags=["Officers"])
async def get_skill_coverage(store: FixtureStore = Depends(get_store)) -> dict[str, list[str]]:
    return admin.skill_coverage(store)


@router.get("/v1/admin/officers/training-needs", summary="Officer training needs", tags=["Officers"])
async def get_training_needs(store: FixtureStore = Depends(get_store)) -> list[admin.TrainingNeed]:
    return admin.training_needs(store)


# ---------------------------------------------------------------------------
# Analytics, EODB, security
# ---------------------------------------------------------------------------

@router.get("/v1/admin/analytics/drop-off", summary="Investor drop-off funnel", tags=["Analytics"])
async def get_drop_off_funnel(store: FixtureStore = Depends(get_store)) -> list[dict]:
    return admin.drop_off_funnel(store)


@router.get("/v1/admin/analytics/fdi-loss", summary="FDI lost to delays", tags=["Analytics"])
async def get_fdi_loss(store: FixtureStore = Depends(get_store)) -> admin.FDILoss:
    return admin.fdi_loss(store)


@router.get("/v1/admin/analytics/incentive-roi", summary="Incentive return on investment", tags=["Analytics"])
async def get_incentive_roi(store: FixtureStore = Depends(get_store)) -> list[admin.IncentiveROI]:
    return admin.incentive_roi(store)


@router.get("/v1/admin/eodb/indicators", summary="Ease of doing business indicators", tags=["EODB"])
async def get_eodb_indicators(store: FixtureStore = Depends(get_store)) -> list[dict]:
    return admin.eodb_indicators(store)


@router.get("/v1/admin/eodb/regional", summary="Regional benchmark", tags=["EODB"])
async def get_regional_benchmark(store: FixtureStore = Depends(get_store)) -> list[dict]:
    return admin.regional_benchmark(store)


@router.get("/v1/admin/security/audit-logs", summary="Recent admin actions", tags=["Security"])
async def get_audit_logs(store: FixtureStore = Depends(get_store)) -> list[dict]:
    return admin.audit_logs(store)


@router.get("/v1/admin/security/privacy", summary="Privacy metrics", tags=["Security"])
async def get_privacy_metrics(store: FixtureStore = Depends(get_store)) -> dict:
    return admin.privacy_metrics(store)


@router.get("/v1/admin/security/privilege-logs", summary="Privilege escalations", tags=["Security"])
async def get_privilege_logs(store: FixtureStore = Depends(get_store)) -> list[dict]:
    return admin.privilege_logs(store)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@router.get("/v1/admin/feature-usage", summary="Portal feature usage", tags=["Config"])
async def get_feature_usage(store: FixtureStore = Depends(get_store)) -> list[dict]:
    return admin.feature_usage(store)


@router.get(
    "/v1/admin/sla-simulation",
    summary="Simulate a new SLA target",
    description="Projected officer load, delayed cases and investor satisfaction for a national SLA target.",
    tags=["Config"],
)
async def simulate_sla(
    target_days: int = Query(description="Proposed national SLA in days.", ge=1, le=365),
    store: FixtureStore = Depends(get_store),
) -> admin.SLAImpact:
    return admin.sla_impact_simulation(store, target_days)


@router.get("/v1/admin/notification-health", summary="Notification load per user", tags=["Config"])
async def get_notification_health(store: FixtureStore = Depends(get_store)) -> admin.NotificationHealth:
    return admin.notification_health(store)
