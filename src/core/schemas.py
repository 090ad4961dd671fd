"""Core data models for the listings engine."""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Trend = Literal["growing", "declining", "stable"]


class JobLocation(BaseModel):
    """Display name plus positional area breakdown (city, region, country)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    display_name: str = ""
    area: list[str] = Field(default_factory=list)


class JobListing(BaseModel):
    """A job listing as returned by the search provider.

    Frozen: every derived value (stats, formatted view) lives in a new model.
    """

    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True,
    )

    id: str | None = None
    adref: str | None = None
    title: str = ""
    description: str = ""
    company: str = ""
    location: JobLocation = Field(default_factory=JobLocation)
    salary_min: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    salary_max: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    salary_is_predicted: bool = False
    contract_type: str | None = None
    is_remote: bool = False
    category: str | None = None
    created_at: datetime | None = None
    url: str = ""

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> datetime | None:
        """Unparseable timestamps become None instead of failing validation."""
        if isinstance(v, datetime):
            return as_utc(v)
        if not isinstance(v, str) or not v.strip():
            return None
        try:
            return as_utc(datetime.fromisoformat(v.strip()))
        except ValueError:
            return None

    @property
    def listing_id(self) -> str:
        """Identifier, falling back to the alternate reference field."""
        return self.id or self.adref or ""


class FilterQuery(BaseModel):
    """A free-text keyword with its normalized form and significant tokens."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    normalized: str
    tokens: list[str] = Field(default_factory=list)


class FilteredResult(BaseModel):
    """Listings that passed relevance filtering, in source order."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    original_count: int
    filtered_count: int
    results: list[JobListing] = Field(default_factory=list)
    fallback: bool = False
    # match count reported by the provider, when the batch carried one
    total_count: int | None = None


class SalaryBandCount(BaseModel):
    """Count of salary-bearing listings inside one band."""

    model_config = ConfigDict(frozen=True)

    label: str
    min: float
    max: float | None
    count: int
    percentage: float


class SalaryStats(BaseModel):
    """Salary block of the statistics report. Scalars are None without data."""

    model_config = ConfigDict(frozen=True)

    avg: int | None = None
    min: float | None = None
    max: float | None = None
    median: float | None = None
    distribution: list[SalaryBandCount] = Field(default_factory=list)


class TimelineStats(BaseModel):
    """Overlapping rolling windows: a 3-day-old listing counts in all three."""

    model_config = ConfigDict(frozen=True)

    last_7_days: int = 0
    last_30_days: int = 0
    last_90_days: int = 0


class RankedEntry(BaseModel):
    """One row of a top-N ranking."""

    model_config = ConfigDict(frozen=True)

    name: str
    count: int
    percentage: float


class SeniorityHistogram(BaseModel):
    """Mutually exclusive seniority bands."""

    model_config = ConfigDict(frozen=True)

    junior: int = 0
    mid: int = 0
    senior: int = 0
    executive: int = 0
    unspecified: int = 0


class StatisticsReport(BaseModel):
    """Aggregate statistics over a deduplicated listing sample."""

    model_config = ConfigDict(frozen=True)

    salary: SalaryStats = Field(default_factory=SalaryStats)
    timeline: TimelineStats = Field(default_factory=TimelineStats)
    locations: list[RankedEntry] = Field(default_factory=list)
    companies: list[RankedEntry] = Field(default_factory=list)
    contract_types: dict[str, int] = Field(default_factory=dict)
    remote_jobs: int = 0
    remote_percentage: float = 0.0
    seniority: SeniorityHistogram = Field(default_factory=SeniorityHistogram)
    categories: dict[str, int] = Field(default_factory=dict)
    trend: Trend = "stable"
    total_analyzed: int = 0


class FormattedLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    region: str
    country: str


class FormattedSalary(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float | None
    max: float | None
    currency: str
    displayed: str


class FormattedListing(BaseModel):
    """Display view of a listing with every optional field defaulted."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    company: str
    location: FormattedLocation
    salary: FormattedSalary
    description: str
    snippet: str
    url: str
    created: datetime
    category: str
    contract_type: str
    is_remote: bool
    source: str


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
