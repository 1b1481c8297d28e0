"""
Talent intelligence: local workforce by district and the expatriate pool.
"""

import logging
from dataclasses import dataclass, field

from oss_api.engines.metrics import count_by, mean, rank, round_half_up
from oss_api.models.domain import DistrictTalent, FixtureStore, TalentCandidate

logger = logging.getLogger(__name__)

# Sector used when the investor has not named one.
DEFAULT_TALENT_SECTOR = "it"

# Business sector -> skills an expatriate hire should bring.
SECTOR_SKILL_MAP = {
    "manufacturing": ["Lean Manufacturing", "Quality Control", "Production Management", "Supply Chain"],
    "textile": ["Garment Production", "Quality Control", "Lean Manufacturing"],
    "pharmaceutical": ["GMP Compliance", "Quality Systems", "Regulatory Affairs", "Validation"],
    "it": ["Cloud Architecture", "Software Development", "DevOps", "System Design"],
    "software": ["System Design", "Microservices", "Team Leadership"],
    "agriculture": ["HACCP", "Food Safety", "Quality Assurance"],
    "food-processing": ["Food Safety", "HACCP", "Quality Assurance"],
    "construction": ["Project Management", "Civil Engineering", "Safety"],
    "infrastructure": ["Project Management", "Cost Control"],
    "finance": ["Financial Planning", "Tax Strategy", "Compliance"],
}

CATEGORY_KEYWORDS = {
    "management": ["director", "manager", "chief", "head"],
    "technical": ["engineer", "architect", "specialist"],
    "specialized": ["phd", "doctor", "consultant", "expert"],
}

WAGE_LEVELS = ("entrylevel", "skilled", "professional", "managerial")
AVAILABLE_DENSITY = 500
TRAINABLE_DENSITY = 200


@dataclass
class DistrictRanking:
    district: DistrictTalent
    suitability_score: float
    strengths: list[str] = field(default_factory=list)


@dataclass
class TalentCost:
    monthly_cost: int
    annual_cost: int
    breakdown: dict[str, int]


@dataclass
class TalentGaps:
    available: list[str] = field(default_factory=list)
    scarce: list[str] = field(default_factory=list)
    training_recommended: list[str] = field(default_factory=list)


@dataclass
class WageComparison:
    district: str
    average_wage: float
    competitiveness: str   # high | medium | low


@dataclass
class DensityCell:
    district: str
    coordinates: dict[str, float]
    total_density: int
    top_skills: list[dict]


@dataclass
class TalentPoolStats:
    total: int
    by_country: dict[str, int]
    by_availability: dict[str, int]
    average_match_score: int


def map_sector_to_skill(sector: str | None) -> str:
    """Business sector -> skill-density key. Unmatched sectors count as
    manufacturing."""
    if not sector:
        return "manufacturing"
    lowered = sector.lower()
    words = lowered.replace("&", " ").replace("/", " ").split()

    if "textile" in lowered or "garment" in lowered:
        return "textile"
    if "tech" in lowered or "software" in lowered or "it" in words:
        return "technology"
    if "engineer" in lowered or "heavy" in lowered:
        return "engineering"
    if "pharma" in lowered or "health" in lowered:
        return "healthcare"
    if "logistic" in lowered or "transport" in lowered:
        return "logistics"
    if "agri" in lowered or "farm" in lowered:
        return "agriculture"
    if "finance" in lowered or "bank" in lowered:
        return "finance"
    return "manufacturing"


# ---------------------------------------------------------------------------
# District workforce
# ---------------------------------------------------------------------------

def get_district_talent(store: FixtureStore, district: str) -> DistrictTalent | None:
    """Look a district up by name or code, ignoring case."""
    wanted = district.lower()
    return next(
        (d for d in store.districts if wanted in (d.district_name.lower(), d.district_code.lower())),
        None,
    )


def all_district_talent(store: FixtureStore) -> list[DistrictTalent]:
    return list(store.districts)


def rank_districts_by_sector(store: FixtureStore, sector: str) -> list[DistrictRanking]:
    skill = map_sector_to_skill(sector)
    rankings = []
    for d in store.districts:
        skill_score = d.skill_density.get(skill, 0)
        availability = d.availability["immediate"]
        cost_score = 100 - d.wages["skilled"] / 500
        education_score = min(100, d.education["graduates_per_year"] / 1000)
        score = skill_score * 0.4 + availability * 0.25 + cost_score * 0.2 + education_score * 0.15

        strengths = []
        if skill_score > 800:
            strengths.append("High skill density")
        if availability > 80:
            strengths.append("Immediate workforce availability")
        if d.wages["skilled"] < 20_000:
            strengths.append("Cost competitive")
        if d.education["graduates_per_year"] > 20_000:
            strengths.append("Strong education pipeline")
        rankings.append(DistrictRanking(d, round(score, 2), strengths))
    return rank(rankings, key=lambda r: r.suitability_score)


def calculate_talent_costs(store: FixtureStore, district: str, headcount: dict[str, int]) -> TalentCost | None:
    found = get_district_talent(store, district)
    if found is None:
        return None
    breakdown = {level: headcount.get(level, 0) * found.wages[level] for level in WAGE_LEVELS}
    monthly = sum(breakdown.values())
    return TalentCost(monthly_cost=monthly, annual_cost=monthly * 12, breakdown=breakdown)


def find_talent_gaps(store: FixtureStore, required_skills: list[str], district: str) -> TalentGaps:
    """Sort required skills by how easy they are to hire locally.

    Every skill is scarce (and needs training) in an unknown district."""
    found = get_district_talent(store, district)
    if found is None:
        return TalentGaps(scarce=list(required_skills), training_recommended=list(required_skills))

    gaps = TalentGaps()
    for skill in required_skills:
        density = found.skill_density.get(map_sector_to_skill(skill), 0)
        if density > AVAILABLE_DENSITY:
            gaps.available.append(skill)
        elif density > TRAINABLE_DENSITY:
            gaps.training_recommended.append(skill)
        else:
            gaps.scarce.append(skill)
    return gaps


def language_proficiency(store: FixtureStore, district: str, language: str) -> int:
    found = get_district_talent(store, district)
    if found is None:
        return 0
    return found.language_skills.get(language.lower(), 0)


def compare_district_wages(store: FixtureStore, districts: list[str]) -> list[WageComparison]:
    comparisons = []
    for name in districts:
        found = get_district_talent(store, name)
        if found is None:
            comparisons.append(WageComparison(name, 0, "low"))
            continue
        average = mean(found.wages[level] for level in WAGE_LEVELS)
        if average < 25_000:
            competitiveness = "high"
        elif average > 40_000:
            competitiveness = "low"
        else:
            competitiveness = "medium"
        comparisons.append(WageComparison(found.district_name, average, competitiveness))
    return comparisons


def talent_density_heatmap(store: FixtureStore) -> list[DensityCell]:
    cells = []
    for d in store.districts:
        densities = list(d.skill_density.items())
        top = rank(densities, key=lambda pair: pair[1], limit=3)
        cells.append(DensityCell(
            district=d.district_name,
            coordinates=dict(d.coordinates),
            total_density=sum(density for _, density in densities),
            top_skills=[{"skill": skill, "density": density} for skill, density in top],
        ))
    return cells


# ---------------------------------------------------------------------------
# Expatriate talent pool
# ---------------------------------------------------------------------------

def recommend_talent(
    store: FixtureStore,
    sector: str | None,
    approved_work_permits: int = 0,
    required_positions: list[str] | None = None,
) -> list[TalentCandidate]:
    """Candidates whose skills fit the sector, best match first.

    The list is sized to the work-permit quota: permits + 3 (at most 10),
    or 5 when no permits are approved yet."""
    relevant = [s.lower() for s in SECTOR_SKILL_MAP.get((sector or DEFAULT_TALENT_SECTOR).lower(), [])]

    def fits(candidate: TalentCandidate) -> bool:
        skills = [s.lower() for s in candidate.skillset]
        has_skill = any(r in s for r in relevant for s in skills)
        if required_positions is None:
            return has_skill
        position = candidate.position.lower()
        return has_skill and any(p.lower() in position for p in required_positions)

    limit = min(approved_work_permits + 3, 10) if approved_work_permits > 0 else 5
    logger.debug("Recommending up to %d candidates for sector %r", limit, sector)
    return rank([c for c in store.talent_pool if fits(c)], key=lambda c: c.match_score, limit=limit)


def talent_pool_stats(store: FixtureStore) -> TalentPoolStats:
    pool = store.talent_pool
    return TalentPoolStats(
        total=len(pool),
        by_country=count_by(pool, key=lambda c: c.country),
        by_availability=count_by(pool, key=lambda c: c.availability),
        average_match_score=round_half_up(mean(c.match_score for c in pool)),
    )


def get_candidate_by_id(store: FixtureStore, candidate_id: str) -> TalentCandidate | None:
    return next((c for c in store.talent_pool if c.id == candidate_id), None)


def search_talent(store: FixtureStore, keyword: str) -> list[TalentCandidate]:
    needle = keyword.lower()
    return [
        c for c in store.talent_pool
        if needle in c.name.lower()
        or needle in c.position.lower()
        or needle in c.country.lower()
        or any(needle in skill.lower() for skill in c.skillset)
    ]


def get_talent_by_country(store: FixtureStore, country: str) -> list[TalentCandidate]:
    return [c for c in store.talent_pool if c.country.lower() == country.lower()]


def get_talent_by_category(store: FixtureStore, category: str) -> list[TalentCandidate]:
    keywords = CATEGORY_KEYWORDS.get(category, [])
    return [c for c in store.talent_pool if any(kw in c.position.lower() for kw in keywords)]
