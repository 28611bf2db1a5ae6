# tests/unit/test_files.py
"""
Tests for markledger.workspace.files module.
"""

from pathlib import Path

import pytest

from markledger.workspace.files import (
    FileSource,
    LocalFileSource,
    glob_match,
    read_text_with_encoding_detection,
)


class TestGlobMatch:
    """Tests for glob_match function."""

    def test_star_star_matches_top_level(self):
        """Test **/ patterns also match files at the root."""
        assert glob_match("a.ts", "**/*.ts")
        assert glob_match("src/deep/a.ts", "**/*.ts")

    def test_directory_prefix(self):
        """Test directory-anchored patterns."""
        assert glob_match("node_modules/x/index.js", "node_modules/**")
        assert not glob_match("src/index.js", "node_modules/**")

    def test_extension_mismatch(self):
        """Test non-matching extensions."""
        assert not glob_match("a.py", "**/*.ts")

    def test_inner_star_star_matches_zero_directories(self):
        """Test **/ in the middle of a pattern also matches no directories."""
        assert glob_match("src/a.ts", "src/**/*.ts")
        assert glob_match("src/x/a.ts", "src/**/*.ts")
        assert glob_match("src/x/y/a.ts", "src/**/*.ts")
        assert not glob_match("lib/a.ts", "src/**/*.ts")

    def test_inner_star_star_in_excludes(self):
        """Test directory globs with ** on both sides."""
        assert glob_match("pkg/gen/a.py", "pkg/**/gen/**")
        assert glob_match("pkg/sub/gen/a.py", "pkg/**/gen/**")
        assert not glob_match("pkg/general/a.py", "pkg/**/gen/**")

    def test_single_star_stays_in_segment(self):
        """Test * does not cross directory separators."""
        assert glob_match("a.ts", "*.ts")
        assert not glob_match("src/a.ts", "*.ts")

    def test_braces_and_classes(self):
        """Test {a,b} alternatives and [...] classes."""
        assert glob_match("src/a.ts", "**/*.{ts,js}")
        assert glob_match("src/a.js", "**/*.{ts,js}")
        assert not glob_match("src/a.py", "**/*.{ts,js}")
        assert glob_match("v1.txt", "v[0-9].txt")
        assert not glob_match("vx.txt", "v[0-9].txt")


class TestReadTextWithEncodingDetection:
    """Tests for read_text_with_encoding_detection function."""

    def test_utf8(self, tmp_path: Path):
        """Test plain UTF-8."""
        path = tmp_path / "a.txt"
        path.write_bytes("TODO: café".encode("utf-8"))

        assert read_text_with_encoding_detection(path) == "TODO: café"

    def test_utf8_bom_stripped(self, tmp_path: Path):
        """Test a UTF-8 BOM is removed."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"\xef\xbb\xbfTODO")

        assert read_text_with_encoding_detection(path) == "TODO"

    def test_latin1_fallback(self, tmp_path: Path):
        """Test invalid UTF-8 falls back to latin-1."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"TODO \xe9")

        assert read_text_with_encoding_detection(path) == "TODO é"


class TestLocalFileSource:
    """Tests for LocalFileSource."""

    def test_implements_protocol(self, tmp_path: Path):
        """Test LocalFileSource satisfies FileSource."""
        assert isinstance(LocalFileSource(tmp_path), FileSource)

    def test_lists_sorted_absolute_keys(self, tmp_path: Path):
        """Test keys are absolute POSIX paths in sorted order."""
        (tmp_path / "b.ts").write_text("x")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "a.ts").write_text("x")
        (tmp_path / "a.ts").write_text("x")

        keys = LocalFileSource(tmp_path).list_files(["**/*"], [], 100)

        root = tmp_path.resolve().as_posix()
        assert keys == [f"{root}/a.ts", f"{root}/b.ts", f"{root}/sub/a.ts"]

    def test_skips_hidden_and_binary(self, tmp_path: Path):
        """Test hidden paths and binary extensions are never listed."""
        (tmp_path / ".markledger").mkdir()
        (tmp_path / ".markledger" / "corpus.json").write_text("{}")
        (tmp_path / ".env").write_text("x")
        (tmp_path / "logo.png").write_bytes(b"\x89PNG")
        (tmp_path / "a.ts").write_text("x")

        keys = LocalFileSource(tmp_path).list_files(["**/*"], [], 100)

        assert [Path(k).name for k in keys] == ["a.ts"]

    def test_include_exclude(self, tmp_path: Path):
        """Test include and exclude globs are applied to relative paths."""
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "lib.ts").write_text("x")
        (tmp_path / "a.ts").write_text("x")
        (tmp_path / "b.py").write_text("x")

        keys = LocalFileSource(tmp_path).list_files(["**/*.ts"], ["node_modules/**"], 100)

        assert [Path(k).name for k in keys] == ["a.ts"]

    def test_max_files_cap(self, tmp_path: Path):
        """Test the listing is capped at max_files."""
        for name in ("a.ts", "b.ts", "c.ts"):
            (tmp_path / name).write_text("x")

        keys = LocalFileSource(tmp_path).list_files(["**/*"], [], 2)

        assert [Path(k).name for k in keys] == ["a.ts", "b.ts"]

    def test_missing_root_raises(self, tmp_path: Path):
        """Test a missing root fails enumeration."""
        with pytest.raises(FileNotFoundError):
            LocalFileSource(tmp_path / "missing").list_files(["**/*"], [], 10)

    def test_read_text(self, tmp_path: Path):
        """Test reading by file key."""
        (tmp_path / "a.ts").write_text("// TODO: x\n")
        source = LocalFileSource(tmp_path)
        key = source.list_files(["**/*"], [], 10)[0]

        assert source.read_text(key) == "// TODO: x\n"
