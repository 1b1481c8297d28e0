"""
OSS Insights API -- Pydantic request and system models.

Request bodies are validated here before they reach an engine. Responses
are the engines' own dataclasses, which FastAPI serialises directly, so
only the health check has a response model of its own.

The Field() calls add descriptions and examples that show up in the
interactive docs at /docs.
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Bundle purchases
# ---------------------------------------------------------------------------

class PurchaseRequest(BaseModel):
    """Buy a starter bundle on behalf of a registered business."""

    bbid: str = Field(
        description="Bangladesh Business ID of the purchasing company.",
        examples=["BBID-2026-MFG-000123"],
    )
    company_name: str = Field(
        description="Registered company name.",
        examples=["Global Tech Manufacturing Ltd."],
    )
    bundle_id: str = Field(
        description="Catalogue id of the bundle to buy.",
        examples=["BUNDLE-001"],
    )
    investor_id: str | None = Field(
        default=None,
        description="Investor account the purchase belongs to, if known.",
        examples=["INV-001"],
    )


class PaymentRequest(BaseModel):
    payment_date: datetime | None = Field(
        default=None,
        description="When the invoice was paid. Defaults to now.",
    )


class CompleteServiceRequest(BaseModel):
    service_id: str = Field(
        description="Service within the bundle that the agency has finished.",
        examples=["SRV-001"],
    )


class CancelRequest(BaseModel):
    reason: str = Field(
        description="Why the purchase is being cancelled. Stored in the purchase notes.",
        examples=["Investor withdrew"],
    )


class AssignOfficerRequest(BaseModel):
    officer_id: str = Field(
        description="Relationship officer handling the purchase.",
        examples=["OFF-001"],
    )


class NoteRequest(BaseModel):
    note: str = Field(
        description="Free-text note appended to the purchase history.",
        min_length=1,
        examples=["Called investor about fire safety inspection date"],
    )


# ---------------------------------------------------------------------------
# Deal-room documents
# ---------------------------------------------------------------------------

class DocumentCreate(BaseModel):
    """A document uploaded into an investor's deal room."""

    id: str = Field(description="Document id, unique within the deal room.", examples=["DOC-003"])
    investor_id: str = Field(description="Owning investor.", examples=["INV-001"])
    name: str = Field(description="File name.", examples=["Land Lease Agreement.pdf"])
    type: str = Field(description="Document category.", examples=["lease_agreement"])
    size: str = Field(description="Human-readable file size.", examples=["1.8 MB"])
    confidential: bool = Field(default=False, description="Restrict to explicitly shared officers.")
    watermark: bool = Field(default=False, description="Stamp downloads with the viewer's identity.")
    shared_with: list[str] = Field(default=[], description="Officer ids with access.")
    expiry_date: date | None = Field(default=None, description="Access expires after this date.")


class SharingRequest(BaseModel):
    officer_ids: list[str] = Field(
        description="Officers who may open the document. Replaces the previous list.",
        examples=[["OFF-001", "OFF-002"]],
    )


class AccessLogRequest(BaseModel):
    user_id: str = Field(examples=["OFF-002"])
    user_name: str = Field(examples=["Fatima Rahman"])
    action: Literal["viewed", "downloaded", "shared"] = Field(
        description="What the user did with the document.",
    )
    timestamp: datetime | None = Field(
        default=None,
        description="When it happened. Defaults to now.",
    )


class ConfidentialRequest(BaseModel):
    confidential: bool


# ---------------------------------------------------------------------------
# Talent
# ---------------------------------------------------------------------------

class HeadcountRequest(BaseModel):
    """Planned monthly headcount per wage level."""

    entrylevel: int = Field(default=0, ge=0)
    skilled: int = Field(default=0, ge=0)
    professional: int = Field(default=0, ge=0)
    managerial: int = Field(default=0, ge=0)


class TalentGapRequest(BaseModel):
    district: str = Field(description="District name or code.", examples=["Gazipur"])
    required_skills: list[str] = Field(
        description="Skills or sectors the investment needs.",
        examples=[["Textile", "Engineering", "Finance"]],
    )


# ---------------------------------------------------------------------------
# Policy simulation
# ---------------------------------------------------------------------------

class PolicyScenarioRequest(BaseModel):
    """
    An incentive package to test before it is announced.

    Every field defaults to the policy currently in force, so an empty body
    simulates the status quo.
    """

    tax_holiday_years: float = Field(default=5, ge=0, le=20, description="Corporate tax holiday length.")
    duty_exemption_percent: float = Field(
        default=50, ge=0, le=100,
        description="Share of import duty waived on capital machinery.",
    )
    sector_incentives: dict[str, float] = Field(
        default={
            "Textile & Garment": 10,
            "Pharmaceutical": 15,
            "IT & Software": 20,
            "Renewable Energy": 25,
            "Manufacturing": 10,
        },
        description="Extra incentive percentage per sector.",
    )
    land_subsidy_percent: float = Field(default=20, ge=0, le=100, description="Share of land cost subsidised.")
    fast_track_threshold: float = Field(
        default=5_000_000, ge=0,
        description="Investment size in USD above which a case is fast-tracked.",
        examples=[3_000_000],
    )


# ---------------------------------------------------------------------------
# System
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = Field(examples=["healthy"])
    version: str
    reference_date: date = Field(description="Date elapsed-day metrics are measured against.")
    applications: int
    purchases: int
    documents: int
