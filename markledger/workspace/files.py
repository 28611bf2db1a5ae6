# markledger/workspace/files.py
"""
File enumeration and document access.

The orchestrator only depends on the FileSource protocol. LocalFileSource
is the filesystem implementation used by the CLI:
- Walks the project root recursively, skipping hidden paths
- Applies glob include/exclude filters on root-relative POSIX paths
- Skips known binary/media extensions
- Reads text with BOM-aware encoding detection
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import List, Protocol, Sequence, runtime_checkable

from markledger.core.paths import path_from_file_key

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSource(Protocol):
    """Protocol for enumerating and reading workspace files."""

    def list_files(
        self,
        includes: Sequence[str],
        excludes: Sequence[str],
        max_files: int,
    ) -> List[str]:
        """Return up to max_files file keys matching the filters, in a stable order."""
        ...

    def read_text(self, file_key: str) -> str:
        """Return the full text of a file. Raises on failure."""
        ...


# File extensions to skip (binary files, images, etc.)
SKIP_EXTENSIONS = {
    ".exe", ".dll", ".so", ".dylib",
    ".zip", ".tar", ".gz", ".bz2", ".7z", ".rar",
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp",
    ".mp3", ".mp4", ".avi", ".mov", ".mkv", ".wav", ".flac",
    ".pdf", ".doc", ".xls", ".ppt", ".docx", ".xlsx", ".pptx",
    ".pyc", ".pyo", ".class",
    ".db", ".sqlite", ".sqlite3",
}


def _translate(pattern: str) -> str:
    parts: List[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if pattern.startswith("**", i):
            i += 2
            if pattern.startswith("/", i):
                # Zero or more whole directories
                parts.append("(?:.*/)?")
                i += 1
            else:
                parts.append(".*")
            continue
        if c == "*":
            parts.append("[^/]*")
        elif c == "?":
            parts.append("[^/]")
        elif c == "[" and pattern.find("]", i + 2) != -1:
            j = pattern.find("]", i + 2)
            body = pattern[i + 1 : j].replace("\\", "\\\\")
            if body.startswith("!"):
                body = "^" + body[1:]
            parts.append(f"[{body}]")
            i = j + 1
            continue
        elif c == "{" and pattern.find("}", i) != -1:
            j = pattern.find("}", i)
            options = pattern[i + 1 : j].split(",")
            parts.append("(?:" + "|".join(_translate(o) for o in options) + ")")
            i = j + 1
            continue
        else:
            parts.append(re.escape(c))
        i += 1
    return "".join(parts)


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> "re.Pattern[str]":
    return re.compile(_translate(pattern) + r"\Z", re.DOTALL)


def glob_match(rel_path: str, pattern: str) -> bool:
    """
    Match a root-relative POSIX path against a glob.

    "*" and "?" stay within one path segment, "**" crosses segments and
    "**/" also matches zero directories, so "src/**/*.ts" matches
    "src/a.ts". "[...]" classes and "{a,b}" alternatives are supported.
    """
    return _compile_glob(pattern).match(rel_path) is not None


def read_text_with_encoding_detection(path: Path) -> str:
    """
    Read text file with automatic encoding detection.

    Handles:
    - UTF-8 (default)
    - UTF-8 with BOM
    - UTF-16 LE / BE with BOM
    - Latin-1 fallback
    """
    raw_bytes = path.read_bytes()

    if raw_bytes.startswith(b"\xff\xfe"):
        return raw_bytes[2:].decode("utf-16-le")
    elif raw_bytes.startswith(b"\xfe\xff"):
        return raw_bytes[2:].decode("utf-16-be")
    elif raw_bytes.startswith(b"\xef\xbb\xbf"):
        return raw_bytes[3:].decode("utf-8", errors="ignore")

    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass

    # Fallback to latin-1 (never fails)
    return raw_bytes.decode("latin-1")


class LocalFileSource:
    """
    Filesystem-backed FileSource rooted at a project directory.

    File keys are absolute POSIX-style path strings.

    Usage:
        source = LocalFileSource("/path/to/project")
        keys = source.list_files(["**/*"], ["node_modules/**"], 5120)
        text = source.read_text(keys[0])
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def list_files(
        self,
        includes: Sequence[str],
        excludes: Sequence[str],
        max_files: int,
    ) -> List[str]:
        """
        Enumerate matching files, sorted by relative path, capped at max_files.

        Raises:
            FileNotFoundError: If the root does not exist
            NotADirectoryError: If the root is not a directory
        """
        if not self._root.exists():
            raise FileNotFoundError(f"Workspace root not found: {self._root}")
        if not self._root.is_dir():
            raise NotADirectoryError(f"Workspace root is not a directory: {self._root}")

        include_patterns = list(includes) or ["**/*"]
        matched: List[str] = []

        for path in self._root.rglob("*"):
            rel = path.relative_to(self._root)

            # Skip hidden files and directories (including .markledger)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if not path.is_file():
                continue
            if path.suffix.lower() in SKIP_EXTENSIONS:
                continue

            rel_posix = rel.as_posix()
            if not any(glob_match(rel_posix, pattern) for pattern in include_patterns):
                continue
            if any(glob_match(rel_posix, pattern) for pattern in excludes):
                continue

            matched.append(rel_posix)

        matched.sort()
        if len(matched) > max_files:
            logger.warning(f"Found {len(matched)} files, limiting scan to {max_files}")
            matched = matched[:max_files]

        return [(self._root / rel).as_posix() for rel in matched]

    def read_text(self, file_key: str) -> str:
        return read_text_with_encoding_detection(Path(path_from_file_key(file_key)))


__all__ = [
    "FileSource",
    "LocalFileSource",
    "SKIP_EXTENSIONS",
    "glob_match",
    "read_text_with_encoding_detection",
]
