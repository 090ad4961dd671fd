"""Tests for the statistics aggregator."""

from datetime import datetime, timedelta, timezone

from src.analysis.aggregator import aggregate
from src.core.config import ReportConfig, Settings
from src.core.schemas import JobListing, JobLocation, StatisticsReport

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


def _listing(
    *,
    id: str,
    title: str = "Python Developer",
    company: str = "Acme",
    city: str = "Milano",
    salary_min: float | None = None,
    salary_max: float | None = None,
    contract_type: str | None = "permanent",
    is_remote: bool = False,
    category: str | None = "IT Jobs",
    age_days: int = 1,
) -> JobListing:
    return JobListing(
        id=id,
        title=title,
        company=company,
        location=JobLocation(display_name=city),
        salary_min=salary_min,
        salary_max=salary_max,
        contract_type=contract_type,
        is_remote=is_remote,
        category=category,
        created_at=NOW - timedelta(days=age_days),
    )


def _sample() -> list[JobListing]:
    return [
        _listing(id="1", title="Junior Developer", salary_min=20000, salary_max=30000,
                 is_remote=True, age_days=2),
        _listing(id="2", title="Senior Developer", company="Globex", city="Roma",
                 salary_min=50000, age_days=10),
        _listing(id="3", company="Globex", city="Roma", contract_type=None, age_days=40),
        _listing(id="4", title="Engineering Manager", company="Initech", salary_max=70000,
                 is_remote=True, category=None, age_days=5),
    ]


class TestAggregate:
    def test_empty_report(self) -> None:
        report = aggregate([], now=NOW)
        assert report == StatisticsReport()
        assert report.salary.avg is None
        assert report.trend == "stable"
        assert report.total_analyzed == 0

    def test_totals(self) -> None:
        report = aggregate(_sample(), now=NOW)
        assert report.total_analyzed == 4
        assert report.remote_jobs == 2
        assert report.remote_percentage == 50.0

    def test_salary_block(self) -> None:
        report = aggregate(_sample(), now=NOW)
        # points: 25000, 50000, 70000
        assert report.salary.avg == 48333
        assert report.salary.min == 25000
        assert report.salary.max == 70000
        assert report.salary.median == 50000
        assert sum(b.count for b in report.salary.distribution) == 3
        assert report.salary.distribution[1].percentage == 33.3

    def test_timeline_and_trend(self) -> None:
        report = aggregate(_sample(), now=NOW)
        assert report.timeline.last_7_days == 2
        assert report.timeline.last_30_days == 3
        assert report.timeline.last_90_days == 4
        # recent 2 > prior 1 * 0.3
        assert report.trend == "growing"

    def test_rankings(self) -> None:
        report = aggregate(_sample(), now=NOW)
        assert [(e.name, e.count, e.percentage) for e in report.companies] == [
            ("Globex", 2, 50.0), ("Acme", 1, 25.0), ("Initech", 1, 25.0),
        ]
        assert [(e.name, e.count) for e in report.locations] == [("Milano", 2), ("Roma", 2)]

    def test_histograms(self) -> None:
        report = aggregate(_sample(), now=NOW)
        assert report.contract_types == {"permanent": 3, "Not specified": 1}
        assert report.categories == {"IT Jobs": 3, "Not specified": 1}

    def test_seniority(self) -> None:
        report = aggregate(_sample(), now=NOW)
        assert report.seniority.junior == 1
        assert report.seniority.senior == 1
        assert report.seniority.executive == 1
        assert report.seniority.unspecified == 1

    def test_report_settings_applied(self) -> None:
        settings = Settings(report=ReportConfig(top_n=1, unspecified_label="N/A"))
        report = aggregate(_sample(), settings, now=NOW)
        assert len(report.companies) == 1
        assert report.contract_types["N/A"] == 1

    def test_inputs_not_mutated(self) -> None:
        sample = _sample()
        before = [j.model_dump() for j in sample]
        aggregate(sample, now=NOW)
        assert [j.model_dump() for j in sample] == before
