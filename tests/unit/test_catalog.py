# tests/unit/test_catalog.py
"""
Tests for markledger.scan.catalog module.
"""

from markledger.config.schema import MarkLedgerConfig
from markledger.scan.catalog import PatternCatalog


class TestFileEligibility:
    """Tests for PatternCatalog.is_file_eligible."""

    def test_no_ignored_extensions(self):
        """Test every file is eligible with an empty ignore list."""
        catalog = PatternCatalog({"todo": ["TODO"]})

        assert catalog.is_file_eligible("/repo/app.min.js")

    def test_suffix_match(self):
        """Test a path ending with an ignored suffix is ineligible."""
        catalog = PatternCatalog({"todo": ["TODO"]}, ignored_extensions=[".min.js", ".lock"])

        assert not catalog.is_file_eligible("/repo/app.min.js")
        assert not catalog.is_file_eligible("/repo/poetry.lock")
        assert catalog.is_file_eligible("/repo/app.js")

    def test_case_sensitive(self):
        """Test suffix comparison is case-sensitive."""
        catalog = PatternCatalog({"todo": ["TODO"]}, ignored_extensions=[".lock"])

        assert catalog.is_file_eligible("/repo/POETRY.LOCK")


class TestCategoryEligibility:
    """Tests for PatternCatalog.is_category_eligible."""

    def test_empty_patterns_ineligible(self):
        """Test a category with no patterns is skipped."""
        catalog = PatternCatalog({})

        assert not catalog.is_category_eligible("todo", [])

    def test_first_pattern_prefix_ignored(self):
        """Test an ignored prefix on the first pattern skips the category."""
        catalog = PatternCatalog({}, ignored_words=["TO"])

        assert not catalog.is_category_eligible("todo", ["TODO", "LATER"])

    def test_only_first_pattern_checked(self):
        """Test an ignored word in a later pattern does not skip the category."""
        catalog = PatternCatalog({}, ignored_words=["FIXME"])

        assert catalog.is_category_eligible("red", ["BUG", "FIXME"])

    def test_eligible_categories_keeps_order(self):
        """Test eligible categories are yielded in mapping order."""
        catalog = PatternCatalog(
            {"blue": ["NOTE"], "purple": ["HACK"], "green": [], "red": ["FIXME"]},
            ignored_words=["HACK"],
        )

        assert [category for category, _ in catalog.eligible_categories()] == ["blue", "red"]


class TestFromConfig:
    """Tests for PatternCatalog.from_config."""

    def test_default_colours_then_custom(self):
        """Test default colour order with custom words appended."""
        config = MarkLedgerConfig.model_validate(
            {
                "words": {"red": "FIXME, BUG", "green": "TODO", "blue": "NOTE", "purple": "HACK"},
                "custom_words": {"audit": ["@audit"]},
                "ignore": {"words": "NOTE", "extensions": ".lock, .map"},
            }
        )

        catalog = PatternCatalog.from_config(config)

        assert list(catalog.patterns) == ["blue", "purple", "green", "red", "audit"]
        assert catalog.patterns["red"] == ["FIXME", "BUG"]
        assert catalog.ignored_words == ["NOTE"]
        assert catalog.ignored_extensions == [".lock", ".map"]

    def test_custom_overrides_default_colour(self):
        """Test a custom mapping entry replaces a default colour's patterns."""
        config = MarkLedgerConfig.model_validate(
            {"words": {"red": "FIXME"}, "custom_words": {"red": ["BUG"]}}
        )

        catalog = PatternCatalog.from_config(config)

        assert catalog.patterns["red"] == ["BUG"]
