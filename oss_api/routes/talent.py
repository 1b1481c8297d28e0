"""
Talent intelligence endpoints.

/v1/talent/districts/*  local workforce: skill density, wages, language skills
/v1/talent/pool/*       expatriate candidates for approved work permits
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from oss_api.engines import talent
from oss_api.models.domain import DistrictTalent, FixtureStore, TalentCandidate
from oss_api.models.schemas import HeadcountRequest, TalentGapRequest
from oss_api.store import get_store

router = APIRouter()


# ---------------------------------------------------------------------------
# Districts
# ---------------------------------------------------------------------------

@router.get("/v1/talent/districts", summary="All districts", tags=["Talent"])
async def list_districts(store: FixtureStore = Depends(get_store)) -> list[DistrictTalent]:
    return talent.all_district_talent(store)


@router.get(
    "/v1/talent/rankings",
    summary="Districts ranked for a sector",
    description=(
        "Suitability blends skill density (40%), immediate availability (25%), "
        "wage cost (20%) and graduate output (15%)."
    ),
    tags=["Talent"],
)
async def rank_districts(
    sector: str = Query(examples=["Textile & Garment"]),
    store: FixtureStore = Depends(get_store),
) -> list[talent.DistrictRanking]:
    return talent.rank_districts_by_sector(store, sector)


@router.get("/v1/talent/heatmap", summary="Skill density heatmap", tags=["Talent"])
async def get_heatmap(store: FixtureStore = Depends(get_store)) -> list[talent.DensityCell]:
    return talent.talent_density_heatmap(store)


@router.get(
    "/v1/talent/wages",
    summary="Compare district wages",
    description="Repeat the district parameter once per district. Unknown districts come back with a zero average.",
    tags=["Talent"],
)
async def compare_wages(
    district: list[str] = Query(examples=[["Dhaka", "Gazipur"]]),
    store: FixtureStore = Depends(get_store),
) -> list[talent.WageComparison]:
    return talent.compare_district_wages(store, district)


@router.post("/v1/talent/gaps", summary="Talent gap analysis", tags=["Talent"])
async def find_gaps(request: TalentGapRequest, store: FixtureStore = Depends(get_store)) -> talent.TalentGaps:
    return talent.find_talent_gaps(store, request.required_skills, request.district)


@router.get("/v1/talent/districts/{district}", summary="One district", tags=["Talent"])
async def get_district(district: str, store: FixtureStore = Depends(get_store)) -> DistrictTalent:
    found = talent.get_district_talent(store, district)
    if found is None:
        raise HTTPException(status_code=404, detail=f"District '{district}' not found.")
    return found


@router.post("/v1/talent/districts/{district}/costs", summary="Monthly payroll estimate", tags=["Talent"])
async def estimate_costs(
    district: str,
    request: HeadcountRequest,
    store: FixtureStore = Depends(get_store),
) -> talent.TalentCost:
    cost = talent.calculate_talent_costs(store, district, request.model_dump())
    if cost is None:
        raise HTTPException(status_code=404, detail=f"District '{district}' not found.")
    return cost


@router.get(
    "/v1/talent/districts/{district}/languages/{language}",
    summary="Language proficiency",
    description="Percent of the workforce proficient in the language. 0 for unknown districts or languages.",
    tags=["Talent"],
)
async def get_language_proficiency(
    district: str,
    language: str,
    store: FixtureStore = Depends(get_store),
) -> dict:
    return {
        "district": district,
        "language": language.lower(),
        "proficiency": talent.language_proficiency(store, district, language),
    }


# ---------------------------------------------------------------------------
# Expatriate pool
# ---------------------------------------------------------------------------

@router.get("/v1/talent/pool", summary="Search the talent pool", tags=["Talent pool"])
async def search_pool(
    q: str | None = Query(default=None, description="Matches name, position, country or skill."),
    country: str | None = Query(default=None),
    category: str | None = Query(default=None, description="management, technical or specialized."),
    store: FixtureStore = Depends(get_store),
) -> list[TalentCandidate]:
    if q:
        return talent.search_talent(store, q)
    if country:
        return talent.get_talent_by_country(store, country)
    if category:
        return talent.get_talent_by_category(store, category)
    return list(store.talent_pool)


@router.get("/v1/talent/pool/stats", summary="Talent pool statistics", tags=["Talent pool"])
async def get_pool_stats(store: FixtureStore = Depends(get_store)) -> talent.TalentPoolStats:
    return talent.talent_pool_stats(store)


@router.get(
    "/v1/talent/pool/recommendations",
    summary="Recommended candidates",
    description="Candidates whose skills fit the sector, sized to the approved work-permit quota.",
    tags=["Talent pool"],
)
async def recommend_candidates(
    sector: str = Query(examples=["it"]),
    approved_work_permits: int = Query(default=0, ge=0),
    position: list[str] | None = Query(default=None),
    store: FixtureStore = Depends(get_store),
) -> list[TalentCandidate]:
    return talent.recommend_talent(
        store, sector, approved_work_permits=approved_work_permits, required_positions=position,
    )


@router.get("/v1/talent/pool/{candidate_id}", summary="One candidate", tags=["Talent pool"])
async def get_candidate(candidate_id: str, store: FixtureStore = Depends(get_store)) -> TalentCandidate:
    candidate = talent.get_candidate_by_id(store, candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail=f"Candidate '{candidate_id}' not found.")
    return candidate
