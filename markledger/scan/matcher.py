# markledger/scan/matcher.py
"""
Per-document pattern matching.

Turns the full text of one document into position-addressed annotations:
1. Build an offset -> (line, character) index once per document
2. Run every pattern of a category globally over the text
3. Extend each match to the end of its start line and take that fragment
4. Derive the annotation id from (file key, category, line, trimmed text)

Result order is pattern order, then match order within a pattern. It is
NOT sorted by position.
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_right
from typing import Dict, List, Optional, Sequence, Tuple

from .catalog import PatternCatalog
from .identity import compute_annotation_id
from .models import Annotation, TextRange

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineIndex:
    """
    Offset -> (line, character) lookup for one document.

    Built in a single linear pass over the text. Line breaks are
    "\\r\\n", "\\r" or "\\n" and are not part of any line's content.
    """

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._starts: List[int] = [0]
        self._ends: List[int] = []

        for match in _LINE_BREAK.finditer(text):
            self._ends.append(match.start())
            self._starts.append(match.end())
        self._ends.append(self._length)

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def position_at(self, offset: int) -> Optional[Tuple[int, int]]:
        """
        Get (line, character) for an offset.

        Returns None for offsets outside the document. An offset inside a
        "\\r\\n" pair is clamped to the end of its line.
        """
        if offset < 0 or offset > self._length:
            return None
        line = bisect_right(self._starts, offset) - 1
        column = min(offset, self._ends[line]) - self._starts[line]
        return line, column

    def line_start(self, line: int) -> int:
        return self._starts[line]

    def line_end(self, line: int) -> int:
        """Offset of the first line-break character (or end of text)."""
        return self._ends[line]


def _compile(pattern: str, category: str) -> Optional[re.Pattern]:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning(f"Skipping invalid pattern {pattern!r} in category {category!r}: {e}")
        return None


def scan_document(
    text: str,
    patterns: Sequence[str],
    category: str,
    file_key: str,
    line_index: Optional[LineIndex] = None,
) -> List[Annotation]:
    """
    Find every match of every pattern in a document.

    Args:
        text: Full document text
        patterns: Ordered regex pattern strings for one category
        category: Category label stored on each annotation
        file_key: File identifier used for identity
        line_index: Prebuilt index for this text (built if None)

    Returns:
        Annotations in pattern order, then match order
    """
    index = line_index or LineIndex(text)
    annotations: List[Annotation] = []

    for pattern in patterns:
        regex = _compile(pattern, category)
        if regex is None:
            continue

        for match in regex.finditer(text):
            start = match.start()
            if match.end() == start:
                # Zero-width match: nothing to anchor
                continue

            position = index.position_at(start)
            if position is None:
                logger.debug(f"No line for offset {start} in {file_key}, skipping match")
                continue

            line, column = position
            line_start = index.line_start(line)
            line_end = index.line_end(line)
            if start >= line_end:
                logger.debug(f"Match at {file_key}:{line + 1} has no line content, skipping")
                continue

            fragment = text[start:line_end].strip()
            if not fragment:
                logger.debug(f"Match at {file_key}:{line + 1} is only whitespace, skipping")
                continue

            annotations.append(
                Annotation(
                    id=compute_annotation_id(file_key, category, line, fragment),
                    text=fragment,
                    range=TextRange(
                        start_line=line,
                        start_char=column,
                        end_line=line,
                        end_char=line_end - line_start,
                    ),
                    category=category,
                )
            )

    return annotations


def scan_with_catalog(
    text: str,
    catalog: PatternCatalog,
    file_key: str,
) -> Dict[str, List[Annotation]]:
    """
    Scan one document for every eligible category.

    The line index is built once and shared across categories.

    Returns:
        Ordered mapping category -> annotations (every eligible category
        is present, possibly with an empty list)
    """
    index = LineIndex(text)
    return {
        category: scan_document(text, patterns, category, file_key, line_index=index)
        for category, patterns in catalog.eligible_categories()
    }


__all__ = ["LineIndex", "scan_document", "scan_with_catalog"]
