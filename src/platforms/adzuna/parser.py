"""Adzuna record parser: converts provider JSON records into JobListing objects.

Design rules:
  - id falls back to adref; both are stringified (the API sends ints at times).
  - company prefers display_name, then name.
  - A salary of 0 means "not given" and becomes None; so does a non-finite one.
  - Missing or malformed optional fields never crash; a record that cannot
    be validated at all is skipped.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from src.core.schemas import JobListing

logger = logging.getLogger(__name__)


def parse_listings(records: Iterable[Any]) -> list[JobListing]:
    """Parse many records, skipping any that fail."""
    results: list[JobListing] = []
    skipped = 0
    for record in records:
        listing = parse_listing(record)
        if listing is None:
            skipped += 1
        else:
            results.append(listing)
    if skipped:
        logger.debug("parse_listings: skipped %d malformed records", skipped)
    return results


def parse_listing(record: Any) -> JobListing | None:
    """Parse a single provider record. Returns None if it is not usable."""
    if not isinstance(record, Mapping):
        logger.debug("Record is not a mapping (%s), skipping", type(record).__name__)
        return None

    try:
        return JobListing(
            id=_text_or_none(record.get("id")),
            adref=_text_or_none(record.get("adref")),
            title=_text(record.get("title")),
            description=_text(record.get("description")),
            company=_nested_text(record.get("company"), "display_name", "name"),
            location=_parse_location(record.get("location")),
            salary_min=_salary(record.get("salary_min")),
            salary_max=_salary(record.get("salary_max")),
            salary_is_predicted=_flag(record.get("salary_is_predicted")),
            contract_type=_text_or_none(record.get("contract_type")),
            is_remote=_flag(record.get("remote_working")),
            category=_nested_text(record.get("category"), "label") or None,
            created_at=record.get("created"),
            url=_text(record.get("redirect_url")) or _text(record.get("url")),
        )
    except ValidationError:
        logger.debug("Record failed validation, skipping", exc_info=True)
        return None


def parse_batch(payload: Any) -> list[JobListing]:
    """Parse a batch given as a record list or a provider response with 'results'."""
    if isinstance(payload, Mapping):
        payload = payload.get("results") or []
    if not isinstance(payload, list):
        logger.debug("Batch payload is not a list, treating as empty")
        return []
    return parse_listings(payload)


def parse_total_count(payload: Any) -> int | None:
    """Provider-reported match count of a response dict, if it has a usable one."""
    if not isinstance(payload, Mapping):
        return None
    count = payload.get("count")
    if isinstance(count, bool):
        return None
    if isinstance(count, float) and math.isfinite(count):
        count = int(count)
    if not isinstance(count, int) or count < 0:
        return None
    return count


# --- Private helpers ---


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _text_or_none(value: Any) -> str | None:
    return _text(value) or None


def _nested_text(value: Any, *keys: str) -> str:
    if not isinstance(value, Mapping):
        return ""
    for key in keys:
        text = _text(value.get(key))
        if text:
            return text
    return ""


def _parse_location(value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        return {}
    area = value.get("area")
    return {
        "display_name": _text(value.get("display_name")),
        "area": [_text(a) for a in area] if isinstance(area, list) else [],
    }


def _salary(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) and number > 0 else None


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)
