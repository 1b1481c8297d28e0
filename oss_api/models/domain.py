"""
Domain records held in the fixture store.

These are plain dataclasses rather than Pydantic models: they never cross a
validation boundary on the way in (fixtures are hand-authored), and FastAPI
serialises dataclasses directly on the way out. Request bodies live in
schemas.py.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------

class ApplicationStatus(str, Enum):
    pending = "pending"
    under_review = "under_review"
    approved = "approved"
    rejected = "rejected"


class ApprovalStatus(str, Enum):
    """Status of one agency stage inside an application."""

    approved = "approved"
    pending = "pending"
    delayed = "delayed"
    rejected = "rejected"
    not_started = "not_started"
    not_required = "not_required"


class DurationSource(str, Enum):
    """Which field an application's elapsed time is measured from."""

    stage_durations = "stage_durations"
    days_in_current_stage = "days_in_current_stage"
    submitted_date = "submitted_date"
    unknown = "unknown"


TERMINAL_STATUSES = (ApplicationStatus.approved, ApplicationStatus.rejected)


@dataclass
class Application:
    id: str
    company_name: str
    investor_name: str
    sector: str
    country: str
    investment_amount: float
    status: ApplicationStatus
    submitted_date: date | None
    sla_deadline: date | None
    assigned_officer: str
    current_step: str
    days_in_current_stage: int
    duration_source: DurationSource
    is_strategic_sector: bool = False
    approval_date: date | None = None
    approvals: dict[str, ApprovalStatus] = field(default_factory=dict)
    stage_durations: dict[str, int] | None = None

    @property
    def is_open(self) -> bool:
        return self.status not in TERMINAL_STATUSES

    @staticmethod
    def infer_duration_source(
        stage_durations: dict[str, int] | None,
        days_in_current_stage: int,
        submitted_date: date | None,
    ) -> DurationSource:
        """Pick the most precise source available, in priority order.

        A present-but-empty stage_durations map still wins: the case was
        recorded stage by stage and simply hasn't spent time in one yet."""
        if stage_durations is not None:
            return DurationSource.stage_durations
        if days_in_current_stage:
            return DurationSource.days_in_current_stage
        if submitted_date is not None:
            return DurationSource.submitted_date
        return DurationSource.unknown


def days_in_progress(app: Application, reference_date: date) -> int:
    """Total days an application has been in the pipeline."""
    source = app.duration_source
    if source is DurationSource.stage_durations:
        return sum((app.stage_durations or {}).values())
    if source is DurationSource.days_in_current_stage:
        return app.days_in_current_stage
    if source is DurationSource.submitted_date:
        if app.submitted_date is None:
            raise ValueError(f"{app.id}: duration source is submitted_date but no date is set")
        return abs((reference_date - app.submitted_date).days)
    if source is DurationSource.unknown:
        return 0
    raise ValueError(f"Unhandled duration source: {source!r}")


# ---------------------------------------------------------------------------
# People and agencies
# ---------------------------------------------------------------------------

@dataclass
class Officer:
    id: int
    name: str
    email: str
    department: str
    expertise: list[str] = field(default_factory=list)
    years_experience: int = 0


@dataclass
class Agency:
    id: int
    name: str
    full_name: str
    stage_key: str           # key used in Application.approvals
    sla_target: float        # days
    avg_response_time: float  # days


# ---------------------------------------------------------------------------
# Starter bundles
# ---------------------------------------------------------------------------

@dataclass
class ServiceItem:
    service_id: str
    service_name: str
    agency: str
    processing_days: int
    fee: float
    required: bool = True
    currency: str = "USD"
    description: str | None = None


@dataclass
class StarterBundle:
    bundle_id: str
    name: str
    description: str
    target_sectors: list[str]
    target_investment_size: str   # small | medium | large | any
    services: list[ServiceItem]
    total_savings: float
    total_days: int
    fast_track_days: int
    individual_price: float
    bundle_price: float
    discount_percentage: int
    eligibility_criteria: list[str]
    recommended_for: list[str]
    popularity: int
    used_by: int
    active: bool = True
    name_local: str | None = None
    currency: str = "USD"


class PurchaseStatus(str, Enum):
    pending_payment = "pending_payment"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


@dataclass
class BundlePurchase:
    purchase_id: str
    bbid: str
    company_name: str
    bundle: StarterBundle
    purchase_date: datetime
    estimated_completion_date: datetime
    invoice_id: str
    status: PurchaseStatus = PurchaseStatus.pending_payment
    investor_id: str | None = None
    services_completed: list[str] = field(default_factory=list)
    current_service: str | None = None
    amount_paid: float | None = None
    payment_date: datetime | None = None
    actual_completion_date: datetime | None = None
    assigned_officer: str | None = None
    notes: list[str] = field(default_factory=list)

    @property
    def bundle_id(self) -> str:
        return self.bundle.bundle_id


@dataclass
class BundleProgress:
    purchase_id: str
    bundle_name: str
    total_services: int
    completed_services: list[str]
    progress_percentage: int
    remaining_days: int
    status: PurchaseStatus
    next_service: ServiceItem | None


# ---------------------------------------------------------------------------
# Deal-room documents
# ---------------------------------------------------------------------------

@dataclass
class AccessLogEntry:
    user_id: str
    user_name: str
    action: str              # viewed | downloaded | shared
    timestamp: datetime


@dataclass
class DealDocument:
    id: str
    investor_id: str
    name: str
    type: str
    uploaded_at: datetime
    size: str
    confidential: bool = False
    watermark: bool = False
    shared_with: list[str] = field(default_factory=list)
    access_log: list[AccessLogEntry] = field(default_factory=list)
    expiry_date: date | None = None


# ---------------------------------------------------------------------------
# Talent
# ---------------------------------------------------------------------------

@dataclass
class DistrictTalent:
    district_name: str
    district_code: str
    coordinates: dict[str, float]
    total_workforce: int
    unemployment_rate: float
    youth_population: int
    skill_density: dict[str, int]        # per 10,000 population
    education: dict[str, int]
    language_skills: dict[str, int]      # percent proficient
    wages: dict[str, int]                # BDT per month
    availability: dict[str, int]         # 0-100


@dataclass
class TalentCandidate:
    id: str
    name: str
    country: str
    position: str
    skillset: list[str]
    experience: str
    qualification: str
    languages: list[str]
    availability: str                    # immediate | within-30-days | within-60-days
    estimated_salary: str
    match_score: int


# ---------------------------------------------------------------------------
# Blockchain license registry
# ---------------------------------------------------------------------------

@dataclass
class BlockchainRecord:
    tx_hash: str
    block_number: int
    timestamp: datetime
    document_type: str
    document_id: str
    issuer: str
    holder: str
    status: str                 # verified | pending | revoked | expired
    verification_level: str     # gold | silver | bronze
    merkle_root: str
    ipfs_hash: str
    smart_contract_address: str
    gas_used: int
    confirmations: int
    metadata: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Fixture store
# ---------------------------------------------------------------------------

@dataclass
class FixtureStore:
    """Every collection the engines read, plus the date elapsed-day
    arithmetic is measured against."""

    reference_date: date
    applications: list[Application] = field(default_factory=list)
    officers: list[Officer] = field(default_factory=list)
    agencies: list[Agency] = field(default_factory=list)
    bundles: list[StarterBundle] = field(default_factory=list)
    # purchase_id -> purchase, insertion ordered
    purchases: dict[str, BundlePurchase] = field(default_factory=dict)
    documents: list[DealDocument] = field(default_factory=list)
    districts: list[DistrictTalent] = field(default_factory=list)
    talent_pool: list[TalentCandidate] = field(default_factory=list)
    blockchain_records: list[BlockchainRecord] = field(default_factory=list)

    @property
    def reference_datetime(self) -> datetime:
        """Start of the working day on the reference date, in UTC."""
        return datetime.combine(self.reference_date, time(9, 0), tzinfo=timezone.utc)
