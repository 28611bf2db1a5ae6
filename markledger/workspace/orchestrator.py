# markledger/workspace/orchestrator.py
"""
Workspace scan orchestrator.

Drives the scanner across the whole corpus:
1. Enumerate candidate files
2. For each file: check cancellation, read text, rescan, replace index entries
3. Report progress after every file
4. Return a summary

Key responsibilities:
- Continue past per-file read errors (the file's old entry is left alone)
- Stop at file boundaries when cancelled (partial index is kept)
- Report FAILED only when enumeration itself fails

This is the ONLY component that scans across the corpus; single-document
refreshes go through refresh_document().
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional, Sequence

from markledger.core.exceptions import PerFileReadError, ScanCancelled
from markledger.index.corpus import CorpusIndex
from markledger.scan.catalog import PatternCatalog
from markledger.scan.matcher import scan_with_catalog

from .files import FileSource

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScanStatus(str, Enum):
    """Terminal state of a workspace scan."""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class CancellationToken:
    """
    Cooperative cancellation flag.

    Safe to cancel from a signal handler or another thread; the scan
    observes it only between files.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise ScanCancelled("Operation cancelled")


@dataclass(frozen=True)
class ScanProgress:
    """Progress report emitted after each file."""

    files_processed: int
    files_total: int
    annotations: int
    file_key: str

    @property
    def fraction(self) -> float:
        if self.files_total == 0:
            return 1.0
        return self.files_processed / self.files_total

    @property
    def message(self) -> str:
        return f"Scanning file {self.files_processed}/{self.files_total} ({self.annotations} bookmarks)"


ProgressCallback = Callable[[ScanProgress], None]


@dataclass
class ScanSummary:
    """Summary of a workspace scan."""

    status: ScanStatus = ScanStatus.COMPLETED
    files_total: int = 0
    files_scanned: int = 0
    files_skipped: int = 0
    annotations: int = 0
    errors: int = 0
    error_details: List[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=_utcnow)
    finished_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    @property
    def completed(self) -> bool:
        return self.status == ScanStatus.COMPLETED

    def __str__(self) -> str:
        return (
            f"{self.status.value}: scanned {self.files_scanned}/{self.files_total}, "
            f"annotations {self.annotations}, skipped {self.files_skipped}, errors {self.errors}"
        )


class WorkspaceScanner:
    """
    Populates a CorpusIndex from a FileSource.

    Usage:
        scanner = WorkspaceScanner(
            catalog=PatternCatalog.from_config(config),
            index=index,
            file_source=LocalFileSource(root),
        )

        summary = scanner.run(["**/*"], [], 5120, cancel_token=token, progress=print)
        print(summary)  # "completed: scanned 10/10, annotations 4, ..."
    """

    def __init__(
        self,
        *,
        catalog: PatternCatalog,
        index: CorpusIndex,
        file_source: FileSource,
    ) -> None:
        self._catalog = catalog
        self._index = index
        self._files = file_source

    @property
    def index(self) -> CorpusIndex:
        return self._index

    def refresh_document(self, file_key: str, text: str) -> int:
        """
        Rescan one document and replace its index entry.

        The entry is cleared first, so an ineligible file or a file with
        no matches ends up with no entry at all.

        Returns:
            Number of annotations now indexed for the file
        """
        self._index.clear_file(file_key)

        if not self._catalog.is_file_eligible(file_key):
            logger.debug(f"Skipping ignored file {file_key}")
            return 0

        for category, annotations in scan_with_catalog(text, self._catalog, file_key).items():
            if annotations:
                self._index.replace(file_key, category, annotations)

        return self._index.count(file_key)

    def run(
        self,
        includes: Sequence[str],
        excludes: Sequence[str],
        max_files: int,
        cancel_token: Optional[CancellationToken] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> ScanSummary:
        """
        Scan the workspace.

        Args:
            includes: Glob include filters
            excludes: Glob exclude filters
            max_files: Maximum number of files to scan
            cancel_token: Checked before each file
            progress: Called after each file

        Returns:
            ScanSummary with the terminal status
        """
        summary = ScanSummary()

        logger.info("Enumerating workspace files...")
        try:
            files = self._files.list_files(includes, excludes, max_files)
        except Exception as e:
            summary.status = ScanStatus.FAILED
            summary.errors += 1
            summary.error_details.append(f"Enumeration error: {e}")
            summary.finished_at = _utcnow()
            logger.error(f"Failed to enumerate workspace files: {e}")
            return summary

        summary.files_total = len(files)
        annotation_count = 0

        try:
            for position, file_key in enumerate(files, start=1):
                if cancel_token is not None:
                    cancel_token.raise_if_cancelled()

                annotation_count += self._scan_file(file_key, summary)

                if progress is not None:
                    progress(
                        ScanProgress(
                            files_processed=position,
                            files_total=summary.files_total,
                            annotations=annotation_count,
                            file_key=file_key,
                        )
                    )
        except ScanCancelled:
            summary.status = ScanStatus.CANCELLED
            logger.info(f"Scan cancelled after {summary.files_scanned} of {summary.files_total} files")

        summary.annotations = annotation_count
        summary.finished_at = _utcnow()
        logger.info(f"Scan finished: {summary}")

        return summary

    def _scan_file(self, file_key: str, summary: ScanSummary) -> int:
        try:
            text = self._read(file_key)
        except PerFileReadError as e:
            summary.errors += 1
            summary.error_details.append(str(e))
            logger.warning(f"Error while scanning document {file_key}: {e.reason}")
            return 0

        if not self._catalog.is_file_eligible(file_key):
            summary.files_skipped += 1

        count = self.refresh_document(file_key, text)
        summary.files_scanned += 1
        return count

    def _read(self, file_key: str) -> str:
        try:
            return self._files.read_text(file_key)
        except Exception as e:
            raise PerFileReadError(file_key, f"{type(e).__name__}: {e}") from e


def run_workspace_scan(
    *,
    catalog: PatternCatalog,
    index: CorpusIndex,
    file_source: FileSource,
    includes: Sequence[str],
    excludes: Sequence[str],
    max_files: int,
    cancel_token: Optional[CancellationToken] = None,
    progress: Optional[ProgressCallback] = None,
) -> ScanSummary:
    """Convenience function to run a workspace scan."""
    scanner = WorkspaceScanner(catalog=catalog, index=index, file_source=file_source)
    return scanner.run(
        includes,
        excludes,
        max_files,
        cancel_token=cancel_token,
        progress=progress,
    )


__all__ = [
    "ScanStatus",
    "CancellationToken",
    "ScanProgress",
    "ProgressCallback",
    "ScanSummary",
    "WorkspaceScanner",
    "run_workspace_scan",
]
