"""Keyword relevance filter for provider listings.

Decision order per listing:
  1. Title exclusion:  title carries an exclusion term and no query token
  2. Match test:       any token in title, description or company
  3. Single token:     title match wins; description/company-only matches
                        are dropped when the title carries an exclusion term
Source order is preserved. An empty outcome from a non-empty input falls
back to the unfiltered input.
"""

import logging
from collections.abc import Sequence

from src.core.config import FilterConfig
from src.core.schemas import FilteredResult, FilterQuery, JobListing
from src.pipeline.exclusions import ExclusionTable
from src.pipeline.tokenizer import build_query

logger = logging.getLogger(__name__)


class RelevanceFilter:
    """Lexical keyword filter with an exclusion table for near-homonyms."""

    def __init__(
        self,
        exclusions: ExclusionTable | None = None,
        min_token_length: int = 3,
    ) -> None:
        self._exclusions = exclusions if exclusions is not None else ExclusionTable()
        self._min_token_length = min_token_length

    @classmethod
    def from_config(cls, config: FilterConfig) -> "RelevanceFilter":
        return cls(ExclusionTable.from_config(config), config.min_token_length)

    def filter(self, listings: Sequence[JobListing], keyword: str) -> FilteredResult:
        """Keep listings relevant to keyword, falling back to all on empty output."""
        query = build_query(keyword, self._min_token_length)
        exclusions = self._exclusions.lookup(query.normalized)

        result = [job for job in listings if self.matches(job, query, exclusions)]
        removed = len(listings) - len(result)
        if removed:
            logger.debug("RelevanceFilter: removed %d listings for '%s'", removed, keyword)

        fallback = not result and bool(listings)
        if fallback:
            logger.info(
                "No listings matched '%s', returning %d unfiltered listings",
                keyword, len(listings),
            )
            result = list(listings)

        return FilteredResult(
            keyword=keyword,
            original_count=len(listings),
            filtered_count=len(result),
            results=result,
            fallback=fallback,
        )

    def matches(
        self,
        listing: JobListing,
        query: FilterQuery,
        exclusions: frozenset[str] = frozenset(),
    ) -> bool:
        tokens = query.tokens
        if not tokens:
            return True

        title = listing.title.lower()
        description = listing.description.lower()
        company = listing.company.lower()

        title_excluded = _title_has_exclusion(title, exclusions)
        title_match = any(t in title for t in tokens)

        if title_excluded and not title_match:
            return False

        if not (
            title_match
            or any(t in description for t in tokens)
            or any(t in company for t in tokens)
        ):
            return False

        if len(tokens) == 1 and not title_match:
            return not title_excluded

        return True


def _title_has_exclusion(title: str, exclusions: frozenset[str]) -> bool:
    """True if a title word contains an exclusion term.

    Multi-word terms ("addetto al banco") are matched against the whole title.
    """
    if not exclusions:
        return False
    words = title.split()
    for term in exclusions:
        if " " in term:
            if term in title:
                return True
        elif any(term in word for word in words):
            return True
    return False
