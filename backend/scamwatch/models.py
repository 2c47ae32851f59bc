"""Pydantic models for intelligence entries and search parameters."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScamCategory(StrEnum):
    """Scam ecosystems tracked by the dashboard."""

    ROMANCE = "Romance Scams"
    SEXTORTION = "Sextortion / Blackmail"
    FAKE_JOB = "Fake Job & Task Scams"
    CRYPTO_FRAUD = "Crypto / Forex Fraud"
    IMPERSONATION = "Impersonation"
    CHARITY_FRAUD = "Charity & Donation"
    BEC = "Business Email Compromise (BEC)"


class Severity(StrEnum):
    """Threat severity label."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


Confidence = Literal["High", "Medium", "Low"]

ALL_CATEGORIES = "All"

# Platforms offered by the research form; free text is still accepted.
PLATFORMS = [
    "Telegram",
    "WhatsApp",
    "Facebook",
    "Instagram",
    "Dating Apps",
    "Email",
    "Fake Websites",
]


# ============================================================================
# Intelligence Entries
# ============================================================================


class EstimatedLoss(BaseModel):
    """Estimated loss range in USD."""

    model_config = ConfigDict(frozen=True)

    min: float | None
    max: float | None


class FinancialImpact(BaseModel):
    """Reported, estimated and recovered loss figures for one entry."""

    model_config = ConfigDict(frozen=True)

    reported_loss_usd: float | None = Field(
        description="Aggregated loss reported in public sources (USD)"
    )
    estimated_loss_usd: EstimatedLoss = Field(
        description="Estimated loss range including unreported cases (USD)"
    )
    time_period: str = Field(description="Observation period as YYYY or YYYY–YYYY")
    currency: Literal["USD"]
    confidence: Confidence
    recovered_usd: float | None = Field(description="Amount seized or returned (USD)")
    notes: str = Field(description="How the figures were derived")


class IntelligenceEntry(BaseModel):
    """One synthesized record describing a scam pattern and its financial impact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    category: ScamCategory
    platform: str
    tactic: str
    description: str
    target_regions: list[str] = Field(alias="targetRegions")
    severity: Severity
    source_type: str = Field(alias="sourceType")
    date_added: str = Field(alias="dateAdded")
    signals: list[str]
    financial_impact: FinancialImpact


class IntelligenceBatch(BaseModel):
    """Structured output envelope requested from the generation model."""

    entries: list[IntelligenceEntry] = Field(
        description="Distinct intelligence entries. Every field of every entry is required."
    )


# ============================================================================
# Requests
# ============================================================================


class SearchParams(BaseModel):
    """Optional filters for intelligence generation. Absence means unconstrained."""

    count: int = Field(default=30, ge=1)
    query: str | None = None
    category: str | None = None
    platform: str | None = None
    date_range: str | None = None

    @field_validator("query", "category", "platform", "date_range", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Strip filter text; whitespace-only values are absent."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @property
    def category_filter(self) -> str | None:
        """Category constraint, with the 'All' sentinel treated as no constraint."""
        if not self.category or self.category == ALL_CATEGORIES:
            return None
        return self.category

    def is_empty(self) -> bool:
        """True when no filter field carries a value."""
        return not any(
            [self.query, self.category_filter, self.platform, self.date_range]
        )

    def display_query(self) -> str:
        """Human-readable summary of the active filters joined with ' | '."""
        parts = [self.query, self.category_filter, self.platform, self.date_range]
        return " | ".join(p for p in parts if p)


# ============================================================================
# Aggregates
# ============================================================================


class CategoryLoss(BaseModel):
    name: str
    value: float


class PlatformCount(BaseModel):
    name: str
    count: int


class DashboardStats(BaseModel):
    """Aggregates shown on the dashboard view."""

    total_entries: int
    total_reported_loss: float
    total_recovered: float
    average_loss: float
    category_losses: list[CategoryLoss]
    platform_counts: list[PlatformCount]
    top_category: str | None
    top_platform: str | None
    most_targeted_region: str | None
