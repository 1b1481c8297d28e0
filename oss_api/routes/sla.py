"""
GET /v1/sla/* -- Public SLA transparency.

Agency and service performance against published SLAs, computed from the
approval pipelines of every case in the system.
"""

from fastapi import APIRouter, Depends, HTTPException

from oss_api.engines import sla
from oss_api.models.domain import FixtureStore
from oss_api.store import get_store

router = APIRouter()


@router.get("/v1/sla/overview", summary="SLA overview", tags=["SLA"])
async def get_overview(store: FixtureStore = Depends(get_store)) -> sla.SLAOverview:
    return sla.sla_overview(store)


@router.get("/v1/sla/agencies", summary="SLA performance per agency", tags=["SLA"])
async def get_agency_metrics(store: FixtureStore = Depends(get_store)) -> list[sla.AgencySLAMetrics]:
    return sla.agency_sla_metrics(store)


@router.get("/v1/sla/agencies/{agency_id}", summary="SLA performance for one agency", tags=["SLA"])
async def get_agency(agency_id: str, store: FixtureStore = Depends(get_store)) -> sla.AgencySLAMetrics:
    metrics = sla.agency_sla_by_id(store, agency_id)
    if metrics is None:
        raise HTTPException(status_code=404, detail=f"No SLA data for agency '{agency_id}'.")
    return metrics


@router.get(
    "/v1/sla/services",
    summary="SLA performance per service",
    description="Completed instances of each service, busiest first.",
    tags=["SLA"],
)
async def get_service_metrics(store: FixtureStore = Depends(get_store)) -> list[sla.ServiceSLAMetrics]:
    return sla.service_sla_metrics(store)


@router.get(
    "/v1/sla/bottlenecks",
    summary="Services causing delays",
    description="Services that finished past their SLA or have fewer than three days left.",
    tags=["SLA"],
)
async def get_bottlenecks(store: FixtureStore = Depends(get_store)) -> list[sla.SLABottleneck]:
    return sla.sla_bottlenecks(store)


@router.get("/v1/sla/pipelines", summary="Approval pipelines", tags=["SLA"])
async def get_pipelines(store: FixtureStore = Depends(get_store)) -> list[sla.ApprovalPipeline]:
    return sla.build_pipelines(store)
