"""Merge listing batches into a unique set keyed by listing identity."""

import logging
from collections.abc import Iterable

from src.core.schemas import JobListing

logger = logging.getLogger(__name__)


def dedupe(batches: Iterable[Iterable[JobListing]]) -> list[JobListing]:
    """Flatten batches, keeping one listing per resolved id.

    The last occurrence of a key wins, but the key keeps the position where
    it was first seen. Listings without any identifier share the key "".
    """
    unique: dict[str, JobListing] = {}
    total = 0
    for batch in batches:
        for listing in batch:
            total += 1
            unique[listing.listing_id] = listing

    merged = total - len(unique)
    if merged:
        logger.debug("dedupe: merged %d duplicate listings", merged)
    return list(unique.values())
