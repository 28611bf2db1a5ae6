# markledger/workspace/__init__.py
"""
Workspace scanning for markledger.

Key components:
- FileSource / LocalFileSource: File enumeration and reading
- WorkspaceScanner: Drives the scanner over the corpus
- CancellationToken / ScanProgress / ScanSummary: Run control and reporting

Usage:
    from markledger.workspace import LocalFileSource, WorkspaceScanner

    scanner = WorkspaceScanner(catalog=catalog, index=index, file_source=LocalFileSource(root))
    summary = scanner.run(["**/*"], [], 5120)
"""

from .files import FileSource, LocalFileSource, glob_match
from .orchestrator import (
    CancellationToken,
    ProgressCallback,
    ScanProgress,
    ScanStatus,
    ScanSummary,
    WorkspaceScanner,
    run_workspace_scan,
)

__all__ = [
    # Files
    "FileSource",
    "LocalFileSource",
    "glob_match",
    # Orchestrator
    "ScanStatus",
    "CancellationToken",
    "ScanProgress",
    "ProgressCallback",
    "ScanSummary",
    "WorkspaceScanner",
    "run_workspace_scan",
]
