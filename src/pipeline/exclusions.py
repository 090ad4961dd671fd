"""Keyword → disqualifying title terms, kept apart from the filter logic.

A query for "banca" (bank) should not surface counter-staff listings titled
"banco"; the table records such near-homonyms per normalized keyword.
"""

from collections.abc import Iterable, Mapping

from src.core.config import FilterConfig
from src.pipeline.tokenizer import normalize_keyword


class ExclusionTable:
    """Immutable lookup table of exclusion terms.

    Usage::

        table = ExclusionTable({"banca": ["banco"]})
        table.lookup("Banca")          # frozenset({"banco"})
        table = table.with_rule("sql", ["nosql"])
    """

    def __init__(self, rules: Mapping[str, Iterable[str]] | None = None) -> None:
        self._rules: dict[str, frozenset[str]] = {}
        for keyword, terms in (rules or {}).items():
            key = normalize_keyword(keyword)
            if not key:
                continue
            cleaned = frozenset(t.lower().strip() for t in terms if t.strip())
            self._rules[key] = self._rules.get(key, frozenset()) | cleaned

    @classmethod
    def from_config(cls, config: FilterConfig) -> "ExclusionTable":
        return cls(config.exclusions)

    def lookup(self, keyword: str) -> frozenset[str]:
        """Return exclusion terms for a keyword (empty if none registered)."""
        return self._rules.get(normalize_keyword(keyword), frozenset())

    def with_rule(self, keyword: str, terms: Iterable[str]) -> "ExclusionTable":
        """Return a new table with extra terms merged in for keyword."""
        merged: dict[str, Iterable[str]] = dict(self._rules)
        key = normalize_keyword(keyword)
        merged[key] = set(self._rules.get(key, frozenset())) | set(terms)
        return ExclusionTable(merged)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and normalize_keyword(keyword) in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ExclusionTable({len(self._rules)} keywords)"
