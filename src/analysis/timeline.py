"""Posting-age buckets over rolling recency windows."""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from src.core.schemas import JobListing, TimelineStats, as_utc

WINDOWS_DAYS = (7, 30, 90)


def analyze_timeline(listings: Sequence[JobListing], now: datetime | None = None) -> TimelineStats:
    """Count listings created within the last 7, 30 and 90 days of now.

    Windows overlap. Listings without a creation time count as created now.
    """
    now = as_utc(now or datetime.now(timezone.utc))
    created = [j.created_at or now for j in listings]
    last_7, last_30, last_90 = (
        sum(1 for c in created if c >= now - timedelta(days=days)) for days in WINDOWS_DAYS
    )
    return TimelineStats(last_7_days=last_7, last_30_days=last_30, last_90_days=last_90)
