"""Tests for listing display formatting."""

from datetime import datetime, timezone

import pytest

from src.core.config import FormattingConfig
from src.core.schemas import JobListing, JobLocation
from src.platforms.adzuna.formatter import (
    extract_snippet,
    format_amount,
    format_listing,
    format_salary,
)

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


class TestFormatSalary:
    def test_range(self) -> None:
        assert format_salary(35000, 45000) == "€35.000 - €45.000"

    def test_min_only(self) -> None:
        assert format_salary(30000, None) == "From €30.000"

    def test_max_only(self) -> None:
        assert format_salary(None, 1250000) == "Up to €1.250.000"

    @pytest.mark.parametrize(("low", "high"), [(None, None), (0, 0), (0, None)])
    def test_not_specified(self, low: float | None, high: float | None) -> None:
        assert format_salary(low, high) == "Not specified"

    def test_amount_rounded(self) -> None:
        assert format_amount(32499.6) == "€32.500"

    def test_custom_symbol(self) -> None:
        assert format_salary(900, None, symbol="£") == "From £900"


class TestExtractSnippet:
    def test_strips_markup(self) -> None:
        assert extract_snippet("<p>Join <b>our</b> team</p>") == "Join our team"

    def test_truncates(self) -> None:
        snippet = extract_snippet("x" * 250)
        assert snippet == "x" * 200 + "..."

    def test_short_not_truncated(self) -> None:
        assert extract_snippet("short text", max_length=10) == "short text"

    def test_empty(self) -> None:
        assert extract_snippet("") == "Description not available"


class TestFormatListing:
    def test_full_listing(self) -> None:
        listing = JobListing(
            id="42",
            title="Data Analyst",
            description="<p>Analisi dati</p>",
            company="Acme",
            location=JobLocation(display_name="Torino", area=["Italia", "Piemonte", "Torino"]),
            salary_min=30000,
            salary_max=36000,
            contract_type="permanent",
            category="IT Jobs",
            is_remote=True,
            created_at="2026-02-01T00:00:00Z",
            url="https://example.com/42",
        )
        f = format_listing(listing)
        assert f.id == "42"
        assert f.title == "Data Analyst"
        assert f.company == "Acme"
        assert f.location.city == "Torino"
        assert f.location.region == "Piemonte"
        assert f.location.country == "Torino"
        assert f.salary.displayed == "€30.000 - €36.000"
        assert f.salary.currency == "EUR"
        assert f.snippet == "Analisi dati"
        assert f.description == "<p>Analisi dati</p>"
        assert f.is_remote is True
        assert f.source == "Adzuna"
        assert f.created == datetime(2026, 2, 1, tzinfo=timezone.utc)

    def test_defaults(self) -> None:
        f = format_listing(JobListing(adref="ref-9"), now=NOW)
        assert f.id == "ref-9"
        assert f.title == "Title not available"
        assert f.company == "Company not specified"
        assert f.location.city == "N/A"
        assert f.location.region == ""
        assert f.location.country == "IT"
        assert f.salary.displayed == "Not specified"
        assert f.snippet == "Description not available"
        assert f.url == "#"
        assert f.created == NOW
        assert f.category == "Not specified"
        assert f.contract_type == "Not specified"

    def test_city_from_area(self) -> None:
        f = format_listing(JobListing(location=JobLocation(area=["Italia"])))
        assert f.location.city == "Italia"

    def test_predicted_salary_currency(self) -> None:
        f = format_listing(JobListing(salary_min=30000, salary_is_predicted=True))
        assert f.salary.currency == "EUR (estimated)"

    def test_config_applied(self) -> None:
        config = FormattingConfig(
            snippet_length=5, currency="GBP", currency_symbol="£", default_country="gb", source="Test",
        )
        f = format_listing(JobListing(description="abcdefgh", salary_max=50000), config)
        assert f.snippet == "abcde..."
        assert f.salary.displayed == "Up to £50.000"
        assert f.salary.currency == "GBP"
        assert f.location.country == "GB"
        assert f.source == "Test"
