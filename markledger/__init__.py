"""
markledger - Bookmark ledger for source trees

markledger finds annotation markers (TODO, FIXME, NOTE, ...) across a
project, keeps an in-memory index of them, and records which ones have been
handled so only new ones are exported or synced.

Quick Start:
    >>> from markledger import CorpusIndex, PatternCatalog, ProcessingStateStore
    >>> from markledger import LocalFileSource, WorkspaceScanner, SyncReconciler
    >>> index = CorpusIndex()
    >>> scanner = WorkspaceScanner(
    ...     catalog=PatternCatalog({"todo": ["TODO"]}),
    ...     index=index,
    ...     file_source=LocalFileSource("."),
    ... )
    >>> summary = scanner.run(["**/*"], [], 5120)

Architecture:
    markledger/
    ├── scan/        # Pattern catalog, matcher, identity
    ├── index/       # Corpus index and snapshot mirror
    ├── state/       # Processed-state ledger
    ├── workspace/   # File source and scan orchestrator
    ├── sync/        # Export, process, remote sync
    ├── config/      # YAML defaults + user overrides
    ├── core/        # Errors, paths, HTTP client
    └── cli/         # typer application
"""

from markledger.core.exceptions import (
    ConfigurationError,
    MarkLedgerError,
    PerFileReadError,
    RemoteSinkError,
    ScanCancelled,
    StateStoreIOError,
)
from markledger.index import CorpusIndex, CorpusSnapshot
from markledger.scan import Annotation, PatternCatalog, TextRange, compute_annotation_id
from markledger.state import ProcessingStateStore
from markledger.sync import HttpRemoteSink, SyncReconciler
from markledger.workspace import (
    CancellationToken,
    LocalFileSource,
    ScanStatus,
    ScanSummary,
    WorkspaceScanner,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "MarkLedgerError",
    "ConfigurationError",
    "ScanCancelled",
    "PerFileReadError",
    "RemoteSinkError",
    "StateStoreIOError",
    # Scan
    "Annotation",
    "TextRange",
    "PatternCatalog",
    "compute_annotation_id",
    # Index
    "CorpusIndex",
    "CorpusSnapshot",
    # State
    "ProcessingStateStore",
    # Workspace
    "LocalFileSource",
    "WorkspaceScanner",
    "CancellationToken",
    "ScanStatus",
    "ScanSummary",
    # Sync
    "SyncReconciler",
    "HttpRemoteSink",
]
