"""Statistics aggregator: runs every analyzer over one listing sample.

Percentages in the report are relative to the analyzed listing count
(post-dedup), except the salary distribution, which is relative to the
salary-bearing subset.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from src.analysis.ranking import (
    category_key,
    company_key,
    contract_type_key,
    histogram,
    location_key,
    percentage,
    top_n,
)
from src.analysis.salary import analyze_salaries
from src.analysis.seniority import classify_seniority
from src.analysis.timeline import analyze_timeline
from src.analysis.trend import estimate_trend
from src.core.config import Settings
from src.core.schemas import JobListing, StatisticsReport

logger = logging.getLogger(__name__)


def aggregate(
    listings: Sequence[JobListing],
    settings: Settings | None = None,
    now: datetime | None = None,
) -> StatisticsReport:
    """Build the statistics report. An empty sample yields the zeroed report."""
    if not listings:
        logger.debug("aggregate: no listings, returning empty report")
        return StatisticsReport()

    settings = settings or Settings()
    report_cfg = settings.report
    total = len(listings)

    timeline = analyze_timeline(listings, now)
    remote_jobs = sum(1 for j in listings if j.is_remote)

    report = StatisticsReport(
        salary=analyze_salaries(listings, settings.salary.bands),
        timeline=timeline,
        locations=top_n(listings, location_key, report_cfg.top_n, report_cfg.unspecified_label),
        companies=top_n(listings, company_key, report_cfg.top_n, report_cfg.unspecified_label),
        contract_types=histogram(listings, contract_type_key, report_cfg.unspecified_label),
        remote_jobs=remote_jobs,
        remote_percentage=percentage(remote_jobs, total),
        seniority=classify_seniority(listings, settings.seniority.rules),
        categories=histogram(listings, category_key, report_cfg.unspecified_label),
        trend=estimate_trend(timeline, settings.trend),
        total_analyzed=total,
    )
    logger.debug(
        "aggregate: %d listings, %d with salary, trend=%s",
        total, sum(b.count for b in report.salary.distribution), report.trend,
    )
    return report
