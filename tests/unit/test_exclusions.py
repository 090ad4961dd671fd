"""Tests for the exclusion lookup table."""

from src.core.config import FilterConfig
from src.pipeline.exclusions import ExclusionTable


class TestExclusionTable:
    def test_lookup_normalizes_keyword(self) -> None:
        table = ExclusionTable({"banca": ["banco"]})
        assert table.lookup("  BANCA ") == frozenset({"banco"})

    def test_missing_keyword_is_empty(self) -> None:
        assert ExclusionTable({"banca": ["banco"]}).lookup("python") == frozenset()

    def test_empty_table(self) -> None:
        table = ExclusionTable()
        assert len(table) == 0
        assert table.lookup("banca") == frozenset()

    def test_terms_lowercased_and_blank_dropped(self) -> None:
        table = ExclusionTable({"Developer": [" Development ", "", "DEVELOPING"]})
        assert table.lookup("developer") == frozenset({"development", "developing"})

    def test_keys_merged_after_normalization(self) -> None:
        table = ExclusionTable({"banca": ["banco"], " Banca": ["banchista"]})
        assert table.lookup("banca") == frozenset({"banco", "banchista"})
        assert len(table) == 1

    def test_blank_keyword_ignored(self) -> None:
        assert len(ExclusionTable({"  ": ["x"]})) == 0

    def test_with_rule_returns_new_table(self) -> None:
        table = ExclusionTable({"banca": ["banco"]})
        extended = table.with_rule("Banca", ["bancone"])
        assert extended.lookup("banca") == frozenset({"banco", "bancone"})
        assert table.lookup("banca") == frozenset({"banco"})

    def test_with_rule_new_keyword(self) -> None:
        extended = ExclusionTable().with_rule("java", ["javascript"])
        assert "java" in extended
        assert "JAVA" in extended
        assert "python" not in extended

    def test_from_config_defaults(self) -> None:
        table = ExclusionTable.from_config(FilterConfig())
        assert "banco" in table.lookup("banca")
        assert "banca" in table.lookup("banco")
        assert table.lookup("developer") == frozenset({"development", "developing"})
