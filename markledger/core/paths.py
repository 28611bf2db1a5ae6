# markledger/core/paths.py
"""
Central path management for markledger.

ALL components that need file paths should use this module.

The workspace is the .markledger directory inside the project root:

    <root>/.markledger/
    ├── config.yaml              # user overrides
    ├── bookmark-states.json     # processed-state ledger
    └── corpus.json              # snapshot of the last scan

Usage:
    from markledger.core.paths import LedgerPaths

    paths = LedgerPaths("/path/to/project")
    state_path = paths.state_file()
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

WORKSPACE_DIRNAME = ".markledger"
CONFIG_FILENAME = "config.yaml"
STATE_FILENAME = "bookmark-states.json"
SNAPSHOT_FILENAME = "corpus.json"


class LedgerPaths:
    """Resolves every markledger path relative to one project root."""

    def __init__(self, root: Optional[str | Path] = None) -> None:
        self._root = Path(root).resolve() if root is not None else Path.cwd().resolve()

    @property
    def root(self) -> Path:
        """The project root."""
        return self._root

    def workspace(self) -> Path:
        """The .markledger workspace directory."""
        return self._root / WORKSPACE_DIRNAME

    def ensure_workspace(self) -> Path:
        """Get workspace path and create it if it doesn't exist."""
        path = self.workspace()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def config(self) -> Path:
        """User config file: {workspace}/config.yaml"""
        return self.workspace() / CONFIG_FILENAME

    def state_file(self) -> Path:
        """Processed-state ledger: {workspace}/bookmark-states.json"""
        return self.workspace() / STATE_FILENAME

    def snapshot_file(self) -> Path:
        """Corpus snapshot mirror: {workspace}/corpus.json"""
        return self.workspace() / SNAPSHOT_FILENAME


def path_from_file_key(file_key: str) -> str:
    """
    Filesystem path for a file key.

    File keys are plain absolute paths or "file://" URIs.

    Examples:
        >>> path_from_file_key("file:///repo/a%20b.ts")
        '/repo/a b.ts'
        >>> path_from_file_key("/repo/a.ts")
        '/repo/a.ts'
    """
    if file_key.startswith("file://"):
        return url2pathname(urlparse(file_key).path)
    return file_key


__all__ = [
    "path_from_file_key",
    "LedgerPaths",
    "WORKSPACE_DIRNAME",
    "CONFIG_FILENAME",
    "STATE_FILENAME",
    "SNAPSHOT_FILENAME",
]
