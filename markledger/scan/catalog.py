# markledger/scan/catalog.py
"""
Pattern catalog: which categories and files get scanned.

Resolves category -> pattern lists and the two ignore lists from config.

The category rule checks only the FIRST pattern of a category against the
word-ignore list, so one ignored entry skips the whole category.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from markledger.config.schema import MarkLedgerConfig, split_comma_list

logger = logging.getLogger(__name__)


class PatternCatalog:
    """
    Category patterns plus ignore rules.

    Usage:
        catalog = PatternCatalog.from_config(config)

        if catalog.is_file_eligible(path):
            for category, patterns in catalog.eligible_categories():
                ...
    """

    def __init__(
        self,
        patterns: Dict[str, List[str]],
        ignored_words: Optional[Sequence[str]] = None,
        ignored_extensions: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Initialize the catalog.

        Args:
            patterns: Ordered mapping of category -> regex pattern strings
            ignored_words: Prefixes that disable a category (first pattern only)
            ignored_extensions: Path suffixes that are never scanned
        """
        self._patterns = {category: list(items) for category, items in patterns.items()}
        self._ignored_words = [w.strip() for w in (ignored_words or []) if w.strip()]
        self._ignored_extensions = [e.strip() for e in (ignored_extensions or []) if e.strip()]

    @classmethod
    def from_config(cls, config: MarkLedgerConfig) -> "PatternCatalog":
        """Build a catalog from resolved configuration."""
        return cls(
            patterns=config.word_mapping(),
            ignored_words=split_comma_list(config.ignore.words),
            ignored_extensions=split_comma_list(config.ignore.extensions),
        )

    @property
    def patterns(self) -> Dict[str, List[str]]:
        """Copy of the category -> patterns mapping."""
        return {category: list(items) for category, items in self._patterns.items()}

    @property
    def ignored_words(self) -> List[str]:
        return list(self._ignored_words)

    @property
    def ignored_extensions(self) -> List[str]:
        return list(self._ignored_extensions)

    def is_file_eligible(self, path: str) -> bool:
        """False iff path ends with an ignored extension (case-sensitive)."""
        return not any(path.endswith(ext) for ext in self._ignored_extensions)

    def is_word_ignored(self, word: str) -> bool:
        """True if word starts with any ignore-list prefix."""
        return any(word.startswith(prefix) for prefix in self._ignored_words)

    def is_category_eligible(self, category: str, patterns: Sequence[str]) -> bool:
        """
        False if patterns is empty or its first pattern is on the ignore list.

        Only patterns[0] is checked.
        """
        if not patterns:
            return False
        if self.is_word_ignored(patterns[0]):
            logger.debug(f"Skipping category {category!r}: first pattern {patterns[0]!r} is ignored")
            return False
        return True

    def eligible_categories(self) -> Iterator[Tuple[str, List[str]]]:
        """Yield (category, patterns) for every eligible category, in mapping order."""
        for category, patterns in self._patterns.items():
            if self.is_category_eligible(category, patterns):
                yield category, list(patterns)


__all__ = ["PatternCatalog"]
