"""Salary statistics over listings that carry a salary figure."""

import math
from collections.abc import Sequence

from src.core.config import SalaryBandConfig
from src.core.schemas import JobListing, SalaryBandCount, SalaryStats


def salary_point(listing: JobListing) -> float | None:
    """Mean of min/max when both are present, else whichever one is."""
    low, high = listing.salary_min, listing.salary_max
    if low and high:
        return (low + high) / 2
    return low or high or None


def analyze_salaries(
    listings: Sequence[JobListing],
    bands: Sequence[SalaryBandConfig],
) -> SalaryStats:
    """Compute avg/min/max/median and a banded distribution.

    Only listings whose point estimate is > 0 are counted; percentages are
    relative to that subset, not to the whole sample.
    """
    salaries = [s for s in (salary_point(j) for j in listings) if s is not None and s > 0]
    if not salaries:
        return SalaryStats()

    return SalaryStats(
        avg=_round_half_up(sum(salaries) / len(salaries)),
        min=min(salaries),
        max=max(salaries),
        median=median(salaries),
        distribution=salary_distribution(salaries, bands),
    )


def median(values: Sequence[float]) -> float:
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def salary_distribution(
    salaries: Sequence[float],
    bands: Sequence[SalaryBandConfig],
) -> list[SalaryBandCount]:
    if not salaries:
        return []
    counts = [0] * len(bands)
    for salary in salaries:
        for i, band in enumerate(bands):
            if salary >= band.min and (band.max is None or salary < band.max):
                counts[i] += 1
                break
    return [
        SalaryBandCount(
            label=band.label,
            min=band.min,
            max=band.max,
            count=count,
            percentage=round(count / len(salaries) * 100, 1),
        )
        for band, count in zip(bands, counts)
    ]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
