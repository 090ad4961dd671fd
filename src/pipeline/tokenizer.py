"""Query tokenizer: lowercase, whitespace-split, short tokens dropped as noise."""

from src.core.schemas import FilterQuery

DEFAULT_MIN_TOKEN_LENGTH = 3


def normalize_keyword(keyword: str) -> str:
    """Lowercase, trim and collapse internal whitespace. Idempotent."""
    return " ".join(keyword.lower().split())


def tokenize(keyword: str, min_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> list[str]:
    """Split a keyword into unique significant tokens, first-seen order."""
    words = normalize_keyword(keyword).split(" ")
    return list(dict.fromkeys(w for w in words if len(w) >= min_length))


def build_query(keyword: str, min_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> FilterQuery:
    return FilterQuery(
        keyword=keyword,
        normalized=normalize_keyword(keyword),
        tokens=tokenize(keyword, min_length),
    )
