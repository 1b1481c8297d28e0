"""
National FDI pulse: one snapshot of pipeline health for the command center.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from oss_api import config
from oss_api.engines.metrics import count_by, group_by, mean, rank, round_half_up, top_n
from oss_api.fixtures.applications import STAGE_AGENCIES
from oss_api.models.domain import Application, ApplicationStatus, ApprovalStatus

logger = logging.getLogger(__name__)

VIP_INVESTMENT = 10_000_000
MAX_ALERTS = 10


@dataclass
class DelayingAgency:
    agency: str
    avg_delay: float
    count: int


@dataclass
class OverloadedOfficer:
    officer: str
    load: int
    max_capacity: int


@dataclass
class Alert:
    id: str
    type: str        # sla_breach | officer_overload
    severity: str    # low | medium | high | critical
    message: str
    timestamp: datetime
    application_id: str | None = None
    officer_id: str | None = None


@dataclass
class NationalPulse:
    total_pipeline_value: float
    approvals_this_month: int
    avg_approval_time: int
    active_applications: int
    pending_applications: int
    under_review_applications: int
    delaying_agencies: list[DelayingAgency] = field(default_factory=list)
    overloaded_officers: list[OverloadedOfficer] = field(default_factory=list)
    vip_applications_active: int = 0
    live_alerts: list[Alert] = field(default_factory=list)
    system_health: str = "healthy"   # healthy | warning | critical


def format_currency(amount: float) -> str:
    """Compact dollar string: $1.50B, $12.00M, $3.20K, $950.00."""
    if amount >= 1_000_000_000:
        return f"${amount / 1_000_000_000:.2f}B"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.2f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.2f}K"
    return f"${amount:.2f}"


def _delaying_agencies(applications: list[Application]) -> list[DelayingAgency]:
    waiting = [
        (stage, app.days_in_current_stage)
        for app in applications
        for stage, status in app.approvals.items()
        if status in (ApprovalStatus.pending, ApprovalStatus.delayed)
    ]
    agencies = [
        DelayingAgency(
            agency=STAGE_AGENCIES.get(stage, stage),
            avg_delay=round(mean(days for _, days in group), 1),
            count=len(group),
        )
        for stage, group in group_by(waiting, key=lambda pair: pair[0]).items()
    ]
    return rank(agencies, key=lambda a: a.avg_delay, limit=5)


def _system_health(alerts: list[Alert]) -> str:
    critical = sum(1 for a in alerts if a.severity == "critical")
    high = sum(1 for a in alerts if a.severity == "high")
    if critical > 0 or high > 5:
        return "critical"
    if high > 0 or len(alerts) > MAX_ALERTS:
        return "warning"
    return "healthy"


def calculate_national_pulse(
    applications: list[Application],
    now: datetime,
    officer_capacity: int | None = None,
) -> NationalPulse:
    capacity = config.OFFICER_CAPACITY if officer_capacity is None else officer_capacity
    today = now.date()

    approved = [a for a in applications if a.status is ApplicationStatus.approved]
    this_month = [
        a for a in approved
        if a.approval_date and (a.approval_date.year, a.approval_date.month) == (today.year, today.month)
    ]
    approval_days = [
        (a.approval_date - a.submitted_date).days
        for a in approved
        if a.approval_date and a.submitted_date
    ]

    loads = count_by([a for a in applications if a.is_open and a.assigned_officer], key=lambda a: a.assigned_officer)
    overloaded = rank(
        [OverloadedOfficer(name, load, capacity) for name, load in loads.items() if load > capacity],
        key=lambda o: o.load,
    )

    alerts = [
        Alert(
            id=f"sla-{a.id}",
            type="sla_breach",
            severity="high",
            message=f"SLA breached for {a.company_name} ({a.id})",
            timestamp=now,
            application_id=a.id,
        )
        for a in applications
        if a.is_open and a.sla_deadline is not None and a.sla_deadline < today
    ]
    alerts += [
        Alert(
            id=f"overload-{o.officer}",
            type="officer_overload",
            severity="medium",
            message=f"Officer {o.officer} handling {o.load} cases (max {o.max_capacity})",
            timestamp=now,
            officer_id=o.officer,
        )
        for o in overloaded
    ]

    under_review = sum(1 for a in applications if a.status is ApplicationStatus.under_review)
    if alerts:
        logger.info("National pulse raised %d alerts", len(alerts))

    return NationalPulse(
        total_pipeline_value=sum(a.investment_amount for a in applications if a.status is not ApplicationStatus.rejected),
        approvals_this_month=len(this_month),
        avg_approval_time=round_half_up(mean(approval_days)),
        active_applications=under_review,
        pending_applications=sum(1 for a in applications if a.status is ApplicationStatus.pending),
        under_review_applications=under_review,
        delaying_agencies=_delaying_agencies(applications),
        overloaded_officers=overloaded,
        vip_applications_active=sum(
            1 for a in applications
            if a.is_open and (a.investment_amount > VIP_INVESTMENT or a.is_strategic_sector)
        ),
        live_alerts=top_n(alerts, MAX_ALERTS),
        system_health=_system_health(alerts),
    )
