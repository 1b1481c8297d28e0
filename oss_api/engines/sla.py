"""
SLA analytics over approval pipelines.

A pipeline is one application's started agency stages, each turned into an
ApprovalStep with its SLA, elapsed days and a normalised status. Every SLA
view (agency, service, bottleneck, overview) is an aggregation over those
steps.
"""

from dataclasses import dataclass, field

from oss_api.engines.metrics import group_by, mean, percentage, rank, round_half_up
from oss_api.fixtures.applications import STAGE_AGENCIES, STAGE_NAMES, STAGE_SLA_DAYS
from oss_api.models.domain import Application, ApprovalStatus, FixtureStore

DEFAULT_STAGE_SLA = 15
NEAR_DEADLINE_DAYS = 3

# Both BIDA review stages belong to one agency.
STAGE_AGENCY_IDS = {"bida_initial": "bida", "bida_final": "bida"}

STEP_STATUS = {
    ApprovalStatus.approved: "approved",
    ApprovalStatus.rejected: "rejected",
    ApprovalStatus.pending: "under_review",
    ApprovalStatus.delayed: "under_review",
}


@dataclass
class ApprovalStep:
    service_id: str
    service_name: str
    agency_id: str
    agency_name: str
    sla_in_days: int
    days_elapsed: int
    days_remaining: int
    status: str   # approved | under_review | rejected


@dataclass
class ApprovalPipeline:
    application_id: str
    company_name: str
    steps: list[ApprovalStep] = field(default_factory=list)


@dataclass
class AgencySLAMetrics:
    agency_id: str
    agency_name: str
    total_services: int
    completed_services: int
    average_completion_days: int
    sla_breaches: int
    on_time_percentage: int
    active_services: int
    avg_sla: int


@dataclass
class ServiceSLAMetrics:
    service_id: str
    service_name: str
    agency_name: str
    total_processed: int
    avg_days_to_complete: int
    sla_days: int
    breach_rate: int
    on_time_count: int
    late_count: int


@dataclass
class SLABottleneck:
    service_id: str
    service_name: str
    agency_id: str
    agency_name: str
    frequency: int
    avg_delay_days: int
    affected_investors: int


@dataclass
class SLAOverview:
    total_agencies: int
    total_services: int
    total_completed_services: int
    overall_on_time_percentage: int
    total_sla_breaches: int
    avg_completion_days: int
    total_active_investors: int


def _step(app: Application, stage: str, status: ApprovalStatus) -> ApprovalStep:
    sla = STAGE_SLA_DAYS.get(stage, DEFAULT_STAGE_SLA)
    durations = app.stage_durations or {}
    if stage in durations:
        elapsed = durations[stage]
    elif status in (ApprovalStatus.pending, ApprovalStatus.delayed):
        elapsed = app.days_in_current_stage
    else:
        elapsed = 0
    return ApprovalStep(
        service_id=stage,
        service_name=STAGE_NAMES.get(stage, stage),
        agency_id=STAGE_AGENCY_IDS.get(stage, stage),
        agency_name=STAGE_AGENCIES.get(stage, stage),
        sla_in_days=sla,
        days_elapsed=elapsed,
        days_remaining=sla - elapsed,
        status=STEP_STATUS[status],
    )


def build_pipelines(store: FixtureStore) -> list[ApprovalPipeline]:
    return [
        ApprovalPipeline(
            application_id=app.id,
            company_name=app.company_name,
            steps=[_step(app, stage, status) for stage, status in app.approvals.items() if status in STEP_STATUS],
        )
        for app in store.applications
    ]


def _all_steps(pipelines: list[ApprovalPipeline]) -> list[ApprovalStep]:
    return [step for pipeline in pipelines for step in pipeline.steps]


def _is_breach(step: ApprovalStep) -> bool:
    return step.status == "approved" and step.days_elapsed > step.sla_in_days


def agency_sla_metrics(store: FixtureStore) -> list[AgencySLAMetrics]:
    metrics = []
    for agency_id, steps in group_by(_all_steps(build_pipelines(store)), key=lambda s: s.agency_id).items():
        completed = [s for s in steps if s.status == "approved"]
        breaches = sum(1 for s in completed if _is_breach(s))
        metrics.append(AgencySLAMetrics(
            agency_id=agency_id,
            agency_name=steps[0].agency_name,
            total_services=len(steps),
            completed_services=len(completed),
            average_completion_days=round_half_up(mean(s.days_elapsed for s in completed)),
            sla_breaches=breaches,
            on_time_percentage=percentage(len(completed) - breaches, len(completed)),
            active_services=sum(1 for s in steps if s.status == "under_review"),
            avg_sla=round_half_up(mean(s.sla_in_days for s in steps)),
        ))
    return metrics


def service_sla_metrics(store: FixtureStore) -> list[ServiceSLAMetrics]:
    """Completed instances of each service, busiest service first."""
    completed = [s for s in _all_steps(build_pipelines(store)) if s.status == "approved"]
    metrics = []
    for service_id, steps in group_by(completed, key=lambda s: s.service_id).items():
        late = sum(1 for s in steps if _is_breach(s))
        metrics.append(ServiceSLAMetrics(
            service_id=service_id,
            service_name=steps[0].service_name,
            agency_name=steps[0].agency_name,
            total_processed=len(steps),
            avg_days_to_complete=round_half_up(mean(s.days_elapsed for s in steps)),
            sla_days=steps[0].sla_in_days,
            breach_rate=percentage(late, len(steps)),
            on_time_count=len(steps) - late,
            late_count=late,
        ))
    return rank(metrics, key=lambda m: m.total_processed)


def sla_bottlenecks(store: FixtureStore) -> list[SLABottleneck]:
    """Services that finished late or are about to run out of time."""
    hits = [
        (pipeline.application_id, step)
        for pipeline in build_pipelines(store)
        for step in pipeline.steps
        if _is_breach(step) or (step.status == "under_review" and step.days_remaining < NEAR_DEADLINE_DAYS)
    ]
    bottlenecks = []
    for service_id, group in group_by(hits, key=lambda hit: hit[1].service_id).items():
        step = group[0][1]
        delay_days = sum(s.days_elapsed - s.sla_in_days for _, s in group if s.status == "approved")
        bottlenecks.append(SLABottleneck(
            service_id=service_id,
            service_name=step.service_name,
            agency_id=step.agency_id,
            agency_name=step.agency_name,
            frequency=len(group),
            avg_delay_days=round_half_up(delay_days / len(group)),
            affected_investors=len({app_id for app_id, _ in group}),
        ))
    return rank(bottlenecks, key=lambda b: b.frequency)


def sla_overview(store: FixtureStore) -> SLAOverview:
    pipelines = build_pipelines(store)
    steps = _all_steps(pipelines)
    completed = [s for s in steps if s.status == "approved"]
    breaches = sum(1 for s in completed if _is_breach(s))
    return SLAOverview(
        total_agencies=len(store.agencies),
        total_services=len(steps),
        total_completed_services=len(completed),
        overall_on_time_percentage=percentage(len(completed) - breaches, len(completed)),
        total_sla_breaches=breaches,
        avg_completion_days=round_half_up(mean(s.days_elapsed for s in completed)),
        total_active_investors=len(pipelines),
    )


def agency_sla_by_id(store: FixtureStore, agency_id: str) -> AgencySLAMetrics | None:
    return next((m for m in agency_sla_metrics(store) if m.agency_id == agency_id), None)
