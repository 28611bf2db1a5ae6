# tests/unit/test_identity.py
"""
Tests for markledger.scan.identity module.
"""

from markledger.scan.identity import canonical_identity_json, compute_annotation_id


class TestCanonicalIdentityJson:
    """Tests for canonical_identity_json function."""

    def test_key_order_and_compact_separators(self):
        """Test keys are uri, category, line, text with no whitespace."""
        result = canonical_identity_json("a.ts", "todo", 0, "// TODO: fix X")

        assert result == '{"uri":"a.ts","category":"todo","line":0,"text":"// TODO: fix X"}'

    def test_text_is_trimmed(self):
        """Test surrounding whitespace is removed from text."""
        result = canonical_identity_json("a.ts", "todo", 3, "  TODO: x \t")

        assert result.endswith('"text":"TODO: x"}')

    def test_non_ascii_kept(self):
        """Test non-ASCII text is serialized without escapes."""
        result = canonical_identity_json("a.ts", "todo", 0, "TODO: café")

        assert "café" in result
        assert "\\u" not in result


class TestComputeAnnotationId:
    """Tests for compute_annotation_id function."""

    def test_known_digest(self):
        """Test digest of a known canonical form."""
        annotation_id = compute_annotation_id("a.ts", "todo", 0, "// TODO: fix X")

        assert annotation_id == "e90b711f3b35cebd1a7294a453583de903802b16"

    def test_is_sha1_hex(self):
        """Test id is 40 lowercase hex characters."""
        annotation_id = compute_annotation_id("/repo/a.ts", "red", 12, "FIXME now")

        assert len(annotation_id) == 40
        assert all(c in "0123456789abcdef" for c in annotation_id)

    def test_deterministic(self):
        """Test same inputs give same id."""
        first = compute_annotation_id("a.ts", "todo", 0, "TODO: fix X")
        second = compute_annotation_id("a.ts", "todo", 0, "TODO: fix X")

        assert first == second

    def test_whitespace_insensitive(self):
        """Test surrounding whitespace does not change the id."""
        assert compute_annotation_id("a.ts", "todo", 0, "TODO: fix X") == compute_annotation_id(
            "a.ts", "todo", 0, "   TODO: fix X   "
        )

    def test_each_input_changes_id(self):
        """Test file, category, line and text all participate in identity."""
        base = compute_annotation_id("a.ts", "todo", 0, "TODO: fix X")

        assert compute_annotation_id("b.ts", "todo", 0, "TODO: fix X") != base
        assert compute_annotation_id("a.ts", "red", 0, "TODO: fix X") != base
        assert compute_annotation_id("a.ts", "todo", 1, "TODO: fix X") != base
        assert compute_annotation_id("a.ts", "todo", 0, "TODO: fix Y") != base
