"""Orchestrator: wires parser, relevance filter, dedupe, and aggregator.

Data flow:
  filter:  raw records → parse → RelevanceFilter → FilteredResult
  stats:   raw batches → parse each → dedupe → aggregate → StatisticsReport
Exports produce the camelCase dictionaries handed to the transport layer.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from src.analysis.aggregator import aggregate
from src.core.config import FormattingConfig, Settings
from src.core.schemas import FilteredResult, JobListing, RankedEntry, StatisticsReport
from src.pipeline.dedup import dedupe
from src.pipeline.matcher import RelevanceFilter
from src.platforms.adzuna.formatter import format_listing
from src.platforms.adzuna.parser import parse_batch, parse_total_count

logger = logging.getLogger(__name__)


def filter_listings(
    payload: Any,
    keyword: str,
    settings: Settings | None = None,
) -> FilteredResult:
    """Parse one raw batch and keep the listings relevant to keyword."""
    settings = settings or Settings()
    listings = parse_batch(payload)
    result = RelevanceFilter.from_config(settings.filter).filter(listings, keyword)
    result = result.model_copy(update={"total_count": parse_total_count(payload)})
    logger.info(
        "Filter '%s': %d parsed, %d kept%s",
        keyword, result.original_count, result.filtered_count,
        " (fallback)" if result.fallback else "",
    )
    return result


def compute_statistics(
    payloads: Iterable[Any],
    settings: Settings | None = None,
    now: datetime | None = None,
) -> StatisticsReport:
    """Parse every batch, merge duplicates, and aggregate the sample."""
    batches = [parse_batch(p) for p in payloads]
    listings = dedupe(batches)
    logger.info(
        "Stats: %d batches, %d listings, %d unique",
        len(batches), sum(len(b) for b in batches), len(listings),
    )
    return aggregate(listings, settings, now)


def total_jobs(payloads: Sequence[Any]) -> int:
    """Provider total of the first batch, or its parsed size when it reports none."""
    if not payloads:
        return 0
    first = payloads[0]
    count = parse_total_count(first)
    return count if count is not None else len(parse_batch(first))


def export_filtered(
    result: FilteredResult,
    formatting: FormattingConfig | None = None,
) -> dict[str, Any]:
    """Filter result as a JSON-ready dict.

    With formatting given, results are formatted listings instead of the
    parsed provider records. "count" is the provider total when the batch
    reported one, else the number of parsed listings.
    """
    if formatting is not None:
        results = [
            format_listing(j, formatting).model_dump(mode="json", by_alias=True)
            for j in result.results
        ]
    else:
        results = [_listing_dict(j) for j in result.results]
    return {
        "success": True,
        "keyword": result.keyword,
        "count": _reported_count(result),
        "originalCount": result.original_count,
        "filteredCount": result.filtered_count,
        "fallback": result.fallback,
        "results": results,
    }


def export_report(report: StatisticsReport) -> dict[str, Any]:
    """Statistics report as a JSON-ready dict with the transport field names."""
    salary = report.salary
    return {
        "salary": {
            "avg": salary.avg,
            "min": salary.min,
            "max": salary.max,
            "median": salary.median,
            "distribution": [b.model_dump(mode="json") for b in salary.distribution],
        },
        "timeline": {
            "last7days": report.timeline.last_7_days,
            "last30days": report.timeline.last_30_days,
            "last90days": report.timeline.last_90_days,
        },
        "locations": _ranked(report.locations),
        "companies": _ranked(report.companies),
        "contractTypes": dict(report.contract_types),
        "remoteJobs": report.remote_jobs,
        "remotePercentage": report.remote_percentage,
        "seniority": report.seniority.model_dump(),
        "categories": dict(report.categories),
        "trend": report.trend,
        "totalAnalyzed": report.total_analyzed,
    }


def _ranked(entries: Sequence[RankedEntry]) -> list[dict[str, Any]]:
    return [e.model_dump() for e in entries]


def _listing_dict(listing: JobListing) -> dict[str, Any]:
    data = listing.model_dump(mode="json", by_alias=True)
    data["id"] = listing.listing_id or None
    return data


def _reported_count(result: FilteredResult) -> int:
    if result.total_count is not None:
        return result.total_count
    return result.original_count
