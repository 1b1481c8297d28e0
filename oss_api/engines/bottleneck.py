"""
Bottleneck intelligence: where in the approval chain do cases lose time?

Works on stage samples, one per (application, stage) pair whose stage has
started and has a recorded duration. Stages without a recorded duration are
left out instead of being estimated.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from oss_api.engines.metrics import group_by, mean, percentage, rank, round_half_up
from oss_api.fixtures.applications import STAGE_AGENCIES, STAGE_NAMES, STAGE_SLA_DAYS
from oss_api.models.domain import Application, ApplicationStatus, ApprovalStatus

logger = logging.getLogger(__name__)

STANDARD_TIMELINE_DAYS = 60
DEFAULT_STAGE_SLA = 15
FDI_AT_RISK_RATE = 0.05
RETENTION_GAIN_RATE = 0.15
PROJECTED_GAIN_RATE = 0.12
TREND_WINDOW = 5


@dataclass
class StageSample:
    application_id: str
    stage: str
    agency: str
    days: int


@dataclass
class StageAverage:
    stage: str
    avg_days: int


@dataclass
class AgencyHeat:
    agency: str
    avg_delay: int
    cases: int
    sla_compliance: int
    stages: list[StageAverage] = field(default_factory=list)


@dataclass
class DelayStage:
    stage: str
    avg_delay: int
    cases: int
    agency: str
    trend: str   # improving | stable | worsening


@dataclass
class PotentialSaving:
    stage: str
    days: int
    fdi_value: int


@dataclass
class ImpactAnalysis:
    total_days_lost: int
    estimated_fdi_lost: float
    potential_savings: list[PotentialSaving] = field(default_factory=list)


@dataclass
class BottleneckReport:
    agency_heatmap: list[AgencyHeat]
    top_delay_stages: list[DelayStage]
    impact: ImpactAnalysis


def collect_samples(applications: list[Application]) -> list[StageSample]:
    samples = []
    for app in applications:
        durations = app.stage_durations or {}
        for stage, status in app.approvals.items():
            if status in (ApprovalStatus.not_required, ApprovalStatus.not_started):
                continue
            if stage not in durations:
                continue
            samples.append(StageSample(app.id, stage, STAGE_AGENCIES.get(stage, "Unknown"), durations[stage]))
    return samples


def _trend(days: list[int]) -> str:
    """Compare the latest samples with the earliest ones."""
    recent = mean(days[-TREND_WINDOW:])
    older = mean(days[:TREND_WINDOW])
    if recent < older * 0.85:
        return "improving"
    if recent > older * 1.15:
        return "worsening"
    return "stable"


def _agency_heatmap(samples: list[StageSample]) -> list[AgencyHeat]:
    heatmap = []
    for agency, agency_samples in group_by(samples, key=lambda s: s.agency).items():
        within_sla = sum(
            1 for s in agency_samples if s.days <= STAGE_SLA_DAYS.get(s.stage, DEFAULT_STAGE_SLA)
        )
        stages = [
            StageAverage(STAGE_NAMES.get(stage, stage), round_half_up(mean(s.days for s in group)))
            for stage, group in group_by(agency_samples, key=lambda s: s.stage).items()
        ]
        heatmap.append(AgencyHeat(
            agency=agency,
            avg_delay=round_half_up(mean(s.days for s in agency_samples)),
            cases=len(agency_samples),
            sla_compliance=percentage(within_sla, len(agency_samples)),
            stages=rank(stages, key=lambda st: st.avg_days),
        ))
    return rank(heatmap, key=lambda h: h.avg_delay)


def _delay_stages(samples: list[StageSample]) -> list[tuple[str, DelayStage]]:
    stages = []
    for stage, group in group_by(samples, key=lambda s: s.stage).items():
        days = [s.days for s in group]
        stages.append((stage, DelayStage(
            stage=STAGE_NAMES.get(stage, stage),
            avg_delay=round_half_up(mean(days)),
            cases=len(days),
            agency=group[0].agency,
            trend=_trend(days),
        )))
    return rank(stages, key=lambda pair: pair[1].avg_delay, limit=5)


def _potential_savings(
    applications: list[Application], top_stages: list[tuple[str, DelayStage]],
) -> list[PotentialSaving]:
    typical_sla = mean(STAGE_SLA_DAYS.values())
    average_investment = mean(app.investment_amount for app in applications)
    savings = []
    for stage_key, stage in top_stages[:3]:
        affected_value = sum(
            app.investment_amount
            for app in applications
            if app.approvals.get(stage_key) not in (None, ApprovalStatus.not_required, ApprovalStatus.approved)
        )
        if affected_value > 0:
            fdi_value = affected_value * RETENTION_GAIN_RATE
        else:
            fdi_value = average_investment * stage.cases * PROJECTED_GAIN_RATE
        savings.append(PotentialSaving(
            stage=stage.stage,
            days=round_half_up(max(0.0, stage.avg_delay - typical_sla)),
            fdi_value=round_half_up(fdi_value),
        ))
    return savings


def analyze_bottlenecks(applications: list[Application], reference_date: date) -> BottleneckReport:
    samples = collect_samples(applications)
    top_stages = _delay_stages(samples)

    days_lost = sum(
        max(0, (reference_date - app.submitted_date).days - STANDARD_TIMELINE_DAYS)
        for app in applications
        if app.submitted_date is not None and app.status is not ApplicationStatus.rejected
    )
    at_risk = sum(app.investment_amount for app in applications if app.is_open)

    logger.debug("Bottleneck analysis over %d stage samples", len(samples))
    return BottleneckReport(
        agency_heatmap=_agency_heatmap(samples),
        top_delay_stages=[stage for _, stage in top_stages],
        impact=ImpactAnalysis(
            total_days_lost=days_lost,
            estimated_fdi_lost=at_risk * FDI_AT_RISK_RATE,
            potential_savings=_potential_savings(applications, top_stages),
        ),
    )
