# tests/unit/test_corpus_index.py
"""
Tests for markledger.index.corpus module.
"""

from markledger.index.corpus import CorpusIndex
from markledger.scan.models import Annotation, TextRange


def make_annotation(text: str, category: str = "todo", line: int = 0) -> Annotation:
    return Annotation(
        id=f"{category}-{line}-{text}",
        text=text,
        range=TextRange(line, 0, line, len(text)),
        category=category,
    )


class TestReplace:
    """Tests for CorpusIndex.replace."""

    def test_replace_overwrites_not_merges(self):
        """Test a second replace discards the previous list."""
        index = CorpusIndex()
        index.replace("a.ts", "todo", [make_annotation("one"), make_annotation("two", line=1)])

        index.replace("a.ts", "todo", [make_annotation("three", line=2)])

        assert [a.text for a in index.get("a.ts", "todo")] == ["three"]

    def test_replace_isolated_per_category(self):
        """Test replacing one category leaves siblings untouched."""
        index = CorpusIndex()
        index.replace("a.ts", "todo", [make_annotation("t")])
        index.replace("a.ts", "red", [make_annotation("r", category="red")])

        index.replace("a.ts", "todo", [])

        assert index.get("a.ts", "red")[0].text == "r"
        assert index.get("a.ts", "todo") == []

    def test_replace_isolated_per_file(self):
        """Test other files are untouched."""
        index = CorpusIndex()
        index.replace("a.ts", "todo", [make_annotation("a")])
        index.replace("b.ts", "todo", [make_annotation("b")])

        index.clear_file("a.ts")

        assert "a.ts" not in index
        assert [a.text for a in index.get("b.ts")] == ["b"]

    def test_input_list_copied(self):
        """Test later mutation of the caller's list does not leak in."""
        index = CorpusIndex()
        items = [make_annotation("a")]
        index.replace("a.ts", "todo", items)

        items.append(make_annotation("b", line=1))

        assert index.count("a.ts") == 1


class TestIteration:
    """Tests for CorpusIndex iteration and counts."""

    def test_insertion_order(self):
        """Test iteration is file, then category, then annotation order."""
        index = CorpusIndex()
        index.replace("b.ts", "red", [make_annotation("b-red", category="red")])
        index.replace("a.ts", "todo", [make_annotation("a1"), make_annotation("a2", line=1)])

        entries = [(f, c, a.text) for f, c, a in index]

        assert entries == [
            ("b.ts", "red", "b-red"),
            ("a.ts", "todo", "a1"),
            ("a.ts", "todo", "a2"),
        ]

    def test_counts(self):
        """Test per-file and total counts."""
        index = CorpusIndex()
        index.replace("a.ts", "todo", [make_annotation("a1"), make_annotation("a2", line=1)])
        index.replace("b.ts", "red", [make_annotation("b", category="red")])

        assert index.count() == 3
        assert len(index) == 3
        assert index.count("a.ts") == 2
        assert index.count("missing.ts") == 0
        assert index.files() == ["a.ts", "b.ts"]
        assert index.categories("a.ts") == ["todo"]

    def test_clear(self):
        """Test clear removes every file."""
        index = CorpusIndex()
        index.replace("a.ts", "todo", [make_annotation("a")])

        index.clear()

        assert index.files() == []
        assert list(index) == []

    def test_to_dict(self):
        """Test the plain-JSON view."""
        index = CorpusIndex()
        index.replace("a.ts", "todo", [make_annotation("a")])

        data = index.to_dict()

        assert data["a.ts"]["todo"][0]["text"] == "a"
        assert data["a.ts"]["todo"][0]["range"] == {
            "start_line": 0,
            "start_char": 0,
            "end_line": 0,
            "end_char": 1,
        }
