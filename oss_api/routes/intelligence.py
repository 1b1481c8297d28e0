"""
GET /v1/intelligence/* -- Bottleneck analysis and the national FDI pulse.
"""

from fastapi import APIRouter, Depends

from oss_api.engines.bottleneck import BottleneckReport, analyze_bottlenecks
from oss_api.engines.pulse import NationalPulse, calculate_national_pulse, format_currency
from oss_api.models.domain import FixtureStore
from oss_api.store import get_store

router = APIRouter()


@router.get(
    "/v1/intelligence/bottlenecks",
    summary="Bottleneck analysis",
    description=(
        "Agency heatmap, the five slowest stages with their trend, and the "
        "estimated cost of delays in days and FDI."
    ),
    tags=["Intelligence"],
)
async def get_bottleneck_report(store: FixtureStore = Depends(get_store)) -> BottleneckReport:
    return analyze_bottlenecks(store.applications, store.reference_date)


@router.get(
    "/v1/intelligence/pulse",
    summary="National FDI pulse",
    description="Pipeline, approvals, delaying agencies, overloaded officers and live alerts.",
    tags=["Intelligence"],
)
async def get_national_pulse(store: FixtureStore = Depends(get_store)) -> NationalPulse:
    return calculate_national_pulse(store.applications, store.reference_datetime)


@router.get(
    "/v1/intelligence/headline",
    summary="Pulse headline",
    description="The pulse figures the command-center ticker shows, with the pipeline pre-formatted.",
    tags=["Intelligence"],
)
async def get_headline(store: FixtureStore = Depends(get_store)) -> dict:
    pulse = calculate_national_pulse(store.applications, store.reference_datetime)
    return {
        "pipeline": format_currency(pulse.total_pipeline_value),
        "approvals_this_month": pulse.approvals_this_month,
        "avg_approval_time": pulse.avg_approval_time,
        "vip_applications_active": pulse.vip_applications_active,
        "system_health": pulse.system_health,
    }
