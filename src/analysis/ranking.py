"""Shared counting primitive for locations, companies, contract types, categories."""

from collections import Counter
from collections.abc import Callable, Sequence

from src.core.schemas import JobListing, RankedEntry

KeyFn = Callable[[JobListing], str | None]

NOT_SPECIFIED = "Not specified"


def count_by(
    listings: Sequence[JobListing],
    key_fn: KeyFn,
    unspecified_label: str = NOT_SPECIFIED,
) -> Counter[str]:
    """Count listings per key. Missing or blank keys use unspecified_label."""
    counts: Counter[str] = Counter()
    for listing in listings:
        key = (key_fn(listing) or "").strip()
        counts[key or unspecified_label] += 1
    return counts


def histogram(
    listings: Sequence[JobListing],
    key_fn: KeyFn,
    unspecified_label: str = NOT_SPECIFIED,
) -> dict[str, int]:
    return dict(count_by(listings, key_fn, unspecified_label))


def top_n(
    listings: Sequence[JobListing],
    key_fn: KeyFn,
    n: int = 10,
    unspecified_label: str = NOT_SPECIFIED,
    total: int | None = None,
) -> list[RankedEntry]:
    """Most frequent keys, count descending, ties in first-seen order.

    Percentages are count / total * 100 to one decimal; total defaults to
    the number of listings.
    """
    total = len(listings) if total is None else total
    counts = count_by(listings, key_fn, unspecified_label)
    # most_common sorts stably, so equal counts keep insertion order
    return [
        RankedEntry(name=name, count=count, percentage=percentage(count, total))
        for name, count in counts.most_common(n)
    ]


def percentage(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(count / total * 100, 1)


def location_key(listing: JobListing) -> str | None:
    area = listing.location.area
    return listing.location.display_name or (area[0] if area else None)


def company_key(listing: JobListing) -> str | None:
    return listing.company


def contract_type_key(listing: JobListing) -> str | None:
    return listing.contract_type


def category_key(listing: JobListing) -> str | None:
    return listing.category
