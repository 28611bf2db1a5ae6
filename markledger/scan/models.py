# markledger/scan/models.py
"""
Annotation model produced by the scanner.

An Annotation is one matched marker occurrence. It lives only inside the
corpus index until the next rescan of its file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TextRange:
    """Zero-based line/character span inside a document."""

    start_line: int
    start_char: int
    end_line: int
    end_char: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "start_line": self.start_line,
            "start_char": self.start_char,
            "end_line": self.end_line,
            "end_char": self.end_char,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextRange":
        """Build from a dict; raises KeyError/TypeError/ValueError on bad input."""
        return cls(
            start_line=int(data["start_line"]),
            start_char=int(data["start_char"]),
            end_line=int(data["end_line"]),
            end_char=int(data["end_char"]),
        )


EMPTY_RANGE = TextRange(0, 0, 0, 0)


@dataclass(frozen=True)
class Annotation:
    """
    A single marker match.

    Attributes:
        id: Content-derived identity (see markledger.scan.identity)
        text: Trimmed line remainder from the match start
        range: Match start through end of the containing line
        category: Category the matching pattern belongs to
    """

    id: str
    text: str
    range: TextRange
    category: str

    @property
    def line(self) -> int:
        """Zero-based start line."""
        return self.range.start_line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "range": self.range.to_dict(),
            "category": self.category,
        }


__all__ = ["TextRange", "EMPTY_RANGE", "Annotation"]
