# markledger/cli/context.py
"""
Central CLI context - single source of truth for all CLI commands.

All configuration reading and collaborator wiring happens here. Commands
import LedgerContext and use it instead of building stores and sources
themselves.

Usage:
    from markledger.cli.context import LedgerContext

    ctx = LedgerContext.load(root)
    summary = ctx.scan()
    reconciler = ctx.reconciler()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from markledger.config.loader import get_config_source, load_config, resolve_project_name
from markledger.config.schema import MarkLedgerConfig
from markledger.core.paths import LedgerPaths
from markledger.index.corpus import CorpusIndex
from markledger.index.snapshot import CorpusSnapshot
from markledger.logging.logger import get_logger
from markledger.scan.catalog import PatternCatalog
from markledger.state.manager import ProcessingStateStore
from markledger.sync.reconciler import SyncReconciler
from markledger.sync.sink import HttpRemoteSink
from markledger.workspace.files import LocalFileSource
from markledger.workspace.orchestrator import (
    CancellationToken,
    ProgressCallback,
    ScanSummary,
    WorkspaceScanner,
)

logger = get_logger(__name__)


@dataclass
class LedgerContext:
    """
    Everything a command needs, resolved once per invocation.

    The index starts empty; call scan() or load_snapshot() to fill it.
    """

    config: MarkLedgerConfig
    paths: LedgerPaths
    catalog: PatternCatalog
    store: ProcessingStateStore
    snapshot: CorpusSnapshot
    file_source: LocalFileSource
    index: CorpusIndex = field(default_factory=CorpusIndex)
    config_source: str = ""

    @property
    def root(self) -> Path:
        return self.paths.root

    @property
    def enabled(self) -> bool:
        return self.config.enable

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, root: Optional[str | Path] = None) -> "LedgerContext":
        """
        Load config and wire collaborators for a project root.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        paths = LedgerPaths(root)
        config = load_config(paths.root)
        logger.debug(f"Loaded config for {paths.root}")

        return cls(
            config=config,
            paths=paths,
            catalog=PatternCatalog.from_config(config),
            store=ProcessingStateStore(paths.state_file()),
            snapshot=CorpusSnapshot(paths.snapshot_file()),
            file_source=LocalFileSource(paths.root),
            config_source=get_config_source(paths.root),
        )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def scan(
        self,
        cancel_token: Optional[CancellationToken] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> ScanSummary:
        """
        Rescan the workspace into a fresh index.

        The snapshot is only rewritten when the scan completed; a cancelled
        or failed scan leaves the previous snapshot on disk.
        """
        self.index = CorpusIndex()
        scanner = WorkspaceScanner(
            catalog=self.catalog,
            index=self.index,
            file_source=self.file_source,
        )
        summary = scanner.run(
            self.config.search.includes,
            self.config.search.excludes,
            self.config.search.max_files,
            cancel_token=cancel_token,
            progress=progress,
        )

        if not summary.completed:
            logger.info(f"Scan {summary.status.value}, keeping snapshot {self.snapshot.path}")
            return summary

        self.paths.ensure_workspace()
        self.snapshot.save(self.index)
        return summary

    def load_snapshot(self) -> CorpusIndex:
        """Replace the index with the last saved snapshot."""
        self.index = self.snapshot.load()
        return self.index

    def project_name(self) -> str:
        return resolve_project_name(self.config, self.paths.root)

    def reconciler(self) -> SyncReconciler:
        """
        Reconciler over the current index.

        Raises:
            ConfigurationError: If the project name cannot be resolved
        """
        return SyncReconciler(
            self.index,
            self.store,
            project=self.project_name(),
            deeplink_scheme=self.config.deeplink_scheme,
        )

    def remote_sink(self) -> HttpRemoteSink:
        return HttpRemoteSink(
            self.config.api.url,
            self.config.api.key,
            timeout=self.config.api.timeout,
        )


__all__ = ["LedgerContext"]
