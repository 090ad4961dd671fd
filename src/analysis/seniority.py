"""Keyword-taxonomy seniority classification.

Rules are evaluated in configured order (junior, mid, senior, executive by
default) and the first rule with a keyword hit wins, so "Junior Senior
Developer" is junior.
"""

from collections.abc import Sequence

from src.core.config import SeniorityRule
from src.core.schemas import JobListing, SeniorityHistogram

UNSPECIFIED = "unspecified"


def classify_listing(listing: JobListing, rules: Sequence[SeniorityRule]) -> str:
    """Return the band of the first rule whose keyword occurs in title + description."""
    text = f"{listing.title} {listing.description}".lower()
    for rule in rules:
        if any(kw in text for kw in rule.keywords):
            return rule.band
    return UNSPECIFIED


def classify_seniority(
    listings: Sequence[JobListing],
    rules: Sequence[SeniorityRule],
) -> SeniorityHistogram:
    counts = dict.fromkeys(SeniorityHistogram.model_fields, 0)
    for listing in listings:
        counts[classify_listing(listing, rules)] += 1
    return SeniorityHistogram(**counts)
