"""Configuration models and YAML loader for the listings engine."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

SeniorityBand = Literal["junior", "mid", "senior", "executive"]

DEFAULT_EXCLUSIONS: dict[str, list[str]] = {
    "banca": ["banco", "banchista", "banconista", "addetto al banco", "operatore di banco"],
    "banco": ["banca", "bancario", "bancaria"],
    "developer": ["development", "developing"],
}


class FilterConfig(BaseModel):
    """Relevance filter tuning."""

    min_token_length: int = Field(default=3, ge=1)
    exclusions: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_EXCLUSIONS.items()},
    )

    @field_validator("exclusions")
    @classmethod
    def normalize_keys(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        return {
            " ".join(k.lower().split()): [t.lower().strip() for t in terms if t.strip()]
            for k, terms in v.items()
            if k.strip()
        }


class SalaryBandConfig(BaseModel):
    """A half-open salary band [min, max). max=None means unbounded."""

    label: str
    min: float = Field(ge=0.0)
    max: float | None = None

    @model_validator(mode="after")
    def min_below_max(self) -> "SalaryBandConfig":
        if self.max is not None and self.max <= self.min:
            msg = f"band '{self.label}': max must be greater than min"
            raise ValueError(msg)
        return self


def _default_bands() -> list[SalaryBandConfig]:
    return [
        SalaryBandConfig(label="0-25k", min=0, max=25000),
        SalaryBandConfig(label="25k-35k", min=25000, max=35000),
        SalaryBandConfig(label="35k-45k", min=35000, max=45000),
        SalaryBandConfig(label="45k-60k", min=45000, max=60000),
        SalaryBandConfig(label="60k-80k", min=60000, max=80000),
        SalaryBandConfig(label="80k+", min=80000, max=None),
    ]


class SalaryConfig(BaseModel):
    """Salary distribution bands."""

    bands: list[SalaryBandConfig] = Field(default_factory=_default_bands)

    @field_validator("bands")
    @classmethod
    def bands_cover_all_salaries(cls, v: list[SalaryBandConfig]) -> list[SalaryBandConfig]:
        if not v:
            msg = "at least one salary band must be configured"
            raise ValueError(msg)
        if v[0].min != 0:
            msg = "first salary band must start at 0"
            raise ValueError(msg)
        for prev, band in zip(v, v[1:]):
            if prev.max != band.min:
                msg = f"salary bands must be contiguous: '{prev.label}' -> '{band.label}'"
                raise ValueError(msg)
        if v[-1].max is not None:
            msg = "last salary band must be unbounded (max: null)"
            raise ValueError(msg)
        return v


class SeniorityRule(BaseModel):
    """Keywords that place a listing into one seniority band."""

    band: SeniorityBand
    keywords: list[str]

    @field_validator("keywords")
    @classmethod
    def lowercase_keywords(cls, v: list[str]) -> list[str]:
        return [kw.lower().strip() for kw in v if kw.strip()]


def _default_seniority_rules() -> list[SeniorityRule]:
    return [
        SeniorityRule(
            band="junior",
            keywords=[
                "junior", "jr", "entry", "entry level", "primo impiego",
                "neoassunto", "trainee", "stagista",
            ],
        ),
        SeniorityRule(
            band="mid",
            keywords=["mid", "middle", "intermedio", "esperto", "specialist", "specialista"],
        ),
        SeniorityRule(
            band="senior",
            keywords=["senior", "sr", "lead", "principle", "esperto", "specialista senior"],
        ),
        SeniorityRule(
            band="executive",
            keywords=[
                "executive", "manager", "director", "head", "chief", "cto", "cfo",
                "ceo", "vice president", "vicepresidente",
            ],
        ),
    ]


class SeniorityConfig(BaseModel):
    """Ordered seniority taxonomy. The first matching rule wins."""

    rules: list[SeniorityRule] = Field(default_factory=_default_seniority_rules)


class TrendConfig(BaseModel):
    """Ratios comparing last-7-day volume against the prior 23 days."""

    growing_ratio: float = Field(default=0.3, ge=0.0)
    declining_ratio: float = Field(default=0.2, ge=0.0)


class ReportConfig(BaseModel):
    """Ranking and labelling options for the statistics report."""

    top_n: int = Field(default=10, ge=1)
    unspecified_label: str = "Not specified"
    default_location: str = "Italia"


class FormattingConfig(BaseModel):
    """Display options for formatted listings."""

    snippet_length: int = Field(default=200, ge=1)
    currency: str = "EUR"
    currency_symbol: str = "€"
    default_country: str = "IT"
    source: str = "Adzuna"


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    filter: FilterConfig = Field(default_factory=FilterConfig)
    salary: SalaryConfig = Field(default_factory=SalaryConfig)
    seniority: SeniorityConfig = Field(default_factory=SeniorityConfig)
    trend: TrendConfig = Field(default_factory=TrendConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
