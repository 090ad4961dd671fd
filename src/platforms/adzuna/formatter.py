"""Display formatting for listings (salary text, snippets, defaulted fields)."""

import re
from datetime import datetime, timezone

from src.core.config import FormattingConfig
from src.core.schemas import FormattedListing, FormattedLocation, FormattedSalary, JobListing

_TAG_RE = re.compile(r"<[^>]*>")

NOT_SPECIFIED = "Not specified"
NO_TITLE = "Title not available"
NO_COMPANY = "Company not specified"
NO_DESCRIPTION = "Description not available"


def format_amount(amount: float, symbol: str = "€") -> str:
    """Whole-unit amount with dot thousands separators: 35000 → '€35.000'."""
    return f"{symbol}{round(amount):,}".replace(",", ".")


def format_salary(
    salary_min: float | None,
    salary_max: float | None,
    symbol: str = "€",
) -> str:
    if salary_min and salary_max:
        return f"{format_amount(salary_min, symbol)} - {format_amount(salary_max, symbol)}"
    if salary_min:
        return f"From {format_amount(salary_min, symbol)}"
    if salary_max:
        return f"Up to {format_amount(salary_max, symbol)}"
    return NOT_SPECIFIED


def extract_snippet(description: str, max_length: int = 200) -> str:
    """Strip markup and truncate to max_length characters plus an ellipsis."""
    if not description:
        return NO_DESCRIPTION
    clean = _TAG_RE.sub("", description).strip()
    if len(clean) > max_length:
        return clean[:max_length] + "..."
    return clean


def format_listing(
    listing: JobListing,
    config: FormattingConfig | None = None,
    now: datetime | None = None,
) -> FormattedListing:
    """Build the display view of a listing. The listing itself is untouched."""
    config = config or FormattingConfig()
    area = listing.location.area

    currency = config.currency
    if listing.salary_is_predicted:
        currency = f"{currency} (estimated)"

    return FormattedListing(
        id=listing.listing_id,
        title=listing.title or NO_TITLE,
        company=listing.company or NO_COMPANY,
        location=FormattedLocation(
            city=listing.location.display_name or (area[0] if area else "") or "N/A",
            region=area[1] if len(area) > 1 else "",
            country=(area[2] if len(area) > 2 else "") or config.default_country.upper(),
        ),
        salary=FormattedSalary(
            min=listing.salary_min,
            max=listing.salary_max,
            currency=currency,
            displayed=format_salary(listing.salary_min, listing.salary_max, config.currency_symbol),
        ),
        description=listing.description,
        snippet=extract_snippet(listing.description, config.snippet_length),
        url=listing.url or "#",
        created=listing.created_at or now or datetime.now(timezone.utc),
        category=listing.category or NOT_SPECIFIED,
        contract_type=listing.contract_type or NOT_SPECIFIED,
        is_remote=listing.is_remote,
        source=config.source,
    )
