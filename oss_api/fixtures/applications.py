"""
Case universe: the 15 investment applications, the officers who handle them
and the agencies that sign off each stage.

Every admin, intelligence and SLA view is derived from these three lists.
Records are written as compact rows and expanded by build_applications() so
each call hands out fresh objects.
"""

from datetime import date

from oss_api.models.domain import (
    Agency,
    Application,
    ApplicationStatus,
    ApprovalStatus,
    Officer,
)

A = ApprovalStatus

# (id, company, investor, sector, country, amount, status, submitted, sla_deadline,
#  approval_date, officer, current_step, days_in_stage, strategic, approvals, stage_durations)
_APPLICATION_ROWS = [
    ("APP-2026-001", "Global Textiles Ltd", "John Smith", "Textile & Garment", "United States",
     5_000_000, "under_review", "2026-01-15", "2026-03-15", None, "Ahmed Khan",
     "Bangladesh Bank FX Approval", 12, False,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.pending,
      "environment": A.pending, "fire": A.approved},
     {"rjsc": 8, "nbr": 6, "bangladesh_bank": 12, "fire": 5}),
    ("APP-2026-002", "Shanghai Pharma BD", "Li Wei", "Pharmaceutical", "China",
     12_000_000, "under_review", "2026-01-20", "2026-04-20", None, "Ahmed Khan",
     "Drug Administration", 18, True,
     {"rjsc": A.approved, "nbr": A.pending, "bangladesh_bank": A.approved, "drug_admin": A.pending},
     {"rjsc": 10, "bangladesh_bank": 14, "drug_admin": 18}),
    ("APP-2026-003", "Tech Innovations Inc", "Emma Johnson", "IT & Software", "United Kingdom",
     800_000, "approved", "2026-01-05", "2026-02-05", "2026-01-28", "Fatima Rahman",
     "Completed", 0, True,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "bida_final": A.approved},
     {"rjsc": 7, "nbr": 5, "bangladesh_bank": 8, "bida_final": 3}),
    ("APP-2026-004", "Green Energy Solutions", "Hans Mueller", "Renewable Energy", "Germany",
     25_000_000, "under_review", "2026-01-10", "2026-04-15", None, "Dr. Rahman",
     "Environmental Clearance", 25, True,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "environment": A.pending},
     {"rjsc": 9, "nbr": 7, "bangladesh_bank": 11, "environment": 25}),
    ("APP-2026-005", "Korea Manufacturing Co", "Park Min-jun", "Manufacturing", "South Korea",
     8_500_000, "pending", "2026-01-28", "2026-04-28", None, "Ms. Sultana",
     "RJSC Company Registration", 7, False,
     {"rjsc": A.pending, "nbr": A.not_started, "bangladesh_bank": A.not_started},
     {"rjsc": 7}),
    ("APP-2026-006", "Dubai Real Estate Ltd", "Ahmed Al-Maktoum", "Real Estate", "UAE",
     15_000_000, "rejected", "2025-12-20", "2026-02-20", None, "Ahmed Khan",
     "Rejected", 0, False,
     {"rjsc": A.approved, "nbr": A.rejected, "bangladesh_bank": A.pending},
     {"rjsc": 12, "nbr": 15}),
    ("APP-2026-007", "Tokyo Electronics", "Yuki Tanaka", "Electronics", "Japan",
     18_000_000, "under_review", "2026-01-12", "2026-03-12", None, "Fatima Rahman",
     "Fire Safety License", 14, True,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "fire": A.pending},
     {"rjsc": 6, "nbr": 5, "bangladesh_bank": 9, "fire": 14}),
    ("APP-2026-008", "Singapore Logistics Hub", "Tan Wei Ming", "Logistics", "Singapore",
     6_000_000, "under_review", "2026-01-18", "2026-03-18", None, "Dr. Rahman",
     "RJSC Company Registration", 17, False,
     {"rjsc": A.pending, "nbr": A.not_started, "bangladesh_bank": A.not_started},
     {"rjsc": 17}),
    ("APP-2026-009", "Australian Mining Corp", "James Wilson", "Mining", "Australia",
     30_000_000, "under_review", "2026-01-08", "2026-03-08", None, "Ahmed Khan",
     "Environmental Clearance", 27, False,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "environment": A.delayed},
     {"rjsc": 11, "nbr": 8, "bangladesh_bank": 13, "environment": 27}),
    ("APP-2026-010", "Indian Tech Solutions", "Rajesh Kumar", "IT & Software", "India",
     2_500_000, "approved", "2026-01-02", "2026-02-02", "2026-01-25", "Fatima Rahman",
     "Completed", 0, True,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "bida_final": A.approved},
     {"rjsc": 5, "nbr": 4, "bangladesh_bank": 9, "bida_final": 2}),
    ("APP-2026-011", "French Automotive Parts", "Marie Dubois", "Manufacturing", "France",
     11_000_000, "under_review", "2026-01-22", "2026-04-22", None, "Ms. Sultana",
     "NBR Tax Registration", 8, False,
     {"rjsc": A.approved, "nbr": A.pending, "bangladesh_bank": A.not_started},
     {"rjsc": 9, "nbr": 8}),
    ("APP-2026-012", "Canadian Food Processing", "Robert Taylor", "Food & Beverage", "Canada",
     4_200_000, "approved", "2025-12-28", "2026-02-28", "2026-02-01", "Dr. Rahman",
     "Completed", 0, False,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "bida_final": A.approved},
     {"rjsc": 7, "nbr": 6, "bangladesh_bank": 10, "bida_final": 3}),
    ("APP-2026-013", "Brazilian Steel Industries", "Carlos Silva", "Manufacturing", "Brazil",
     22_000_000, "under_review", "2026-01-14", "2026-03-14", None, "Ahmed Khan",
     "Bangladesh Bank FX Approval", 16, True,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.pending, "environment": A.pending},
     {"rjsc": 10, "nbr": 7, "bangladesh_bank": 16}),
    ("APP-2026-014", "Thai Agriculture Export", "Somchai Prasert", "Agriculture", "Thailand",
     3_800_000, "pending", "2026-02-01", "2026-04-01", None, "Ms. Sultana",
     "Initial Review", 3, False,
     {"rjsc": A.not_started, "nbr": A.not_started, "bangladesh_bank": A.not_started},
     {}),
    ("APP-2026-015", "Netherlands Dairy Products", "Jan van der Berg", "Food & Beverage", "Netherlands",
     7_500_000, "under_review", "2026-01-25", "2026-03-25", None, "Fatima Rahman",
     "Fire Safety License", 12, False,
     {"rjsc": A.approved, "nbr": A.approved, "bangladesh_bank": A.approved, "fire": A.pending},
     {"rjsc": 6, "nbr": 5, "bangladesh_bank": 8, "fire": 12}),
]


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def build_applications() -> list[Application]:
    apps = []
    for (app_id, company, investor, sector, country, amount, status, submitted, deadline,
         approved_on, officer, step, days_in_stage, strategic, approvals, durations) in _APPLICATION_ROWS:
        submitted_date = _parse_date(submitted)
        apps.append(Application(
            id=app_id,
            company_name=company,
            investor_name=investor,
            sector=sector,
            country=country,
            investment_amount=amount,
            status=ApplicationStatus(status),
            submitted_date=submitted_date,
            sla_deadline=_parse_date(deadline),
            approval_date=_parse_date(approved_on),
            assigned_officer=officer,
            current_step=step,
            days_in_current_stage=days_in_stage,
            is_strategic_sector=strategic,
            approvals=dict(approvals),
            stage_durations=dict(durations),
            duration_source=Application.infer_duration_source(durations, days_in_stage, submitted_date),
        ))
    return apps


def build_officers() -> list[Officer]:
    return [
        Officer(
            id=1,
            name="Ahmed Khan",
            email="ahmed.khan@bida.gov.bd",
            department="Investment Services",
            expertise=["Textile & Garment", "Manufacturing"],
            years_experience=8,
        ),
        Officer(
            id=2,
            name="Fatima Rahman",
            email="fatima.rahman@bida.gov.bd",
            department="Compliance",
            expertise=["IT & Software", "Electronics"],
            years_experience=6,
        ),
        Officer(
            id=3,
            name="Dr. Rahman",
            email="dr.rahman@bida.gov.bd",
            department="Sector Specialist",
            expertise=["Pharmaceutical", "Healthcare"],
            years_experience=12,
        ),
    ]


def build_agencies() -> list[Agency]:
    return [
        Agency(1, "RJSC", "Registrar of Joint Stock Companies", "rjsc", 15, 8.5),
        Agency(2, "NBR", "National Board of Revenue", "nbr", 10, 6.2),
        Agency(3, "Bangladesh Bank", "Bangladesh Bank", "bangladesh_bank", 15, 14.3),
        Agency(4, "Fire Service", "Fire Service and Civil Defence", "fire", 10, 7.1),
        Agency(5, "Drug Admin", "Directorate General of Drug Administration", "drug_admin", 30, 12.5),
        Agency(6, "DoE", "Department of Environment", "environment", 20, 18.7),
    ]


# Stage key -> display name, owning agency and per-stage SLA (days).
STAGE_NAMES = {
    "rjsc": "RJSC Company Registration",
    "nbr": "NBR Tax Registration",
    "bangladesh_bank": "Bangladesh Bank FX Approval",
    "environment": "Environmental Clearance",
    "fire": "Fire Safety License",
    "drug_admin": "Drug Administration",
    "bida_initial": "BIDA Initial Review",
    "bida_final": "BIDA Final Approval",
}

STAGE_AGENCIES = {
    "rjsc": "RJSC",
    "nbr": "NBR",
    "bangladesh_bank": "Bangladesh Bank",
    "environment": "DoE",
    "fire": "Fire Service",
    "drug_admin": "Drug Admin",
    "bida_initial": "BIDA",
    "bida_final": "BIDA",
}

STAGE_SLA_DAYS = {
    "rjsc": 15,
    "nbr": 10,
    "bangladesh_bank": 15,
    "environment": 20,
    "fire": 10,
    "drug_admin": 30,
    "bida_initial": 7,
    "bida_final": 5,
}
