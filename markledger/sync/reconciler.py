# markledger/sync/reconciler.py
"""
Sync reconciler.

Selects unprocessed annotations from the corpus index and either:
- exports them to a local sink (no state change)
- marks every indexed annotation processed (bulk acknowledge)
- sends them to the remote sink, committing state only on a 2xx response

Key responsibilities:
- Fail closed on unresolved endpoint/credential before any network call
- Never partially commit: a failed sync leaves the ledger untouched
- Resend exactly the still-unprocessed set on retry

This is the ONLY place that mutates the ledger in bulk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from markledger.config.schema import DEFAULT_API_URL, DEFAULT_DEEPLINK_SCHEME
from markledger.core.exceptions import ConfigurationError
from markledger.index.corpus import CorpusIndex
from markledger.state.manager import ProcessingStateStore

from .payload import ExportBookmark, ExportPayload, PendingAnnotation, build_deeplink
from .sink import ExportSink, RemoteSink

logger = logging.getLogger(__name__)


def validate_remote_config(endpoint: Optional[str], api_key: Optional[str]) -> None:
    """
    Check the remote endpoint and credential.

    Raises:
        ConfigurationError: If either is unset or still at its placeholder
    """
    if not endpoint or endpoint == DEFAULT_API_URL:
        raise ConfigurationError(
            "API URL not configured. Please set api.url in .markledger/config.yaml."
        )
    if not api_key:
        raise ConfigurationError(
            "API key not configured. Please set api.key in .markledger/config.yaml."
        )


@dataclass
class ProcessResult:
    """Result of a bulk acknowledge."""

    processed: int = 0
    files: int = 0

    def __str__(self) -> str:
        return f"Processed {self.processed} bookmarks across {self.files} files."


@dataclass
class SyncResult:
    """Result of a successful (or empty) sync."""

    sent: int = 0
    status_code: Optional[int] = None
    ids: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.sent == 0:
            return "No unprocessed bookmarks found."
        return f"Synced {self.sent} bookmarks to API and marked them as processed."


class SyncReconciler:
    """
    Reconciles the corpus index with the processed-state ledger.

    Usage:
        reconciler = SyncReconciler(index, store, project="demo")

        payload = reconciler.export(StreamExportSink())
        result = reconciler.sync(HttpRemoteSink(url, key))
    """

    def __init__(
        self,
        index: CorpusIndex,
        store: ProcessingStateStore,
        project: str,
        deeplink_scheme: str = DEFAULT_DEEPLINK_SCHEME,
    ) -> None:
        """
        Initialize the reconciler.

        Args:
            index: Corpus index holding the latest scan
            store: Processed-state ledger
            project: Resolved project name for payloads
            deeplink_scheme: URI scheme for deeplinks
        """
        self._index = index
        self._store = store
        self._project = project
        self._scheme = deeplink_scheme

    def select_unprocessed(self) -> List[PendingAnnotation]:
        """Unprocessed annotations in index order (file, category, annotation)."""
        pending: List[PendingAnnotation] = []
        for file_key, category, annotation in self._index.iter_annotations():
            if self._store.is_processed(annotation.id):
                continue
            pending.append(
                PendingAnnotation(
                    file_key=file_key,
                    category=category,
                    annotation=annotation,
                    export=ExportBookmark(
                        text=annotation.text,
                        deeplink=build_deeplink(self._scheme, file_key, annotation.line),
                        type=category,
                    ),
                )
            )
        return pending

    def build_payload(self, pending: Optional[List[PendingAnnotation]] = None) -> ExportPayload:
        """
        Build the export payload.

        Raises:
            ConfigurationError: If the project name is empty
        """
        if not self._project:
            raise ConfigurationError(
                "Project name not set. Please configure project.name in .markledger/config.yaml."
            )
        if pending is None:
            pending = self.select_unprocessed()
        return ExportPayload(project=self._project, bookmarks=[item.export for item in pending])

    def export(self, sink: ExportSink) -> ExportPayload:
        """Serialize unprocessed annotations and hand them to the sink. No state change."""
        payload = self.build_payload()
        sink.write(payload.to_json())
        logger.info(f"Exported {len(payload.bookmarks)} unprocessed bookmarks")
        return payload

    def process(self) -> ProcessResult:
        """Mark every annotation currently in the index as processed."""
        result = ProcessResult(files=len(self._index.files()))
        for _, _, annotation in self._index.iter_annotations():
            self._store.set_processed(annotation.id, True)
            result.processed += 1
        logger.info(str(result))
        return result

    def sync(self, remote: RemoteSink) -> SyncResult:
        """
        Send unprocessed annotations to the remote sink.

        Ids are marked processed only after a 2xx response. On failure the
        ledger is untouched and the error propagates unchanged, so a retry
        resends exactly the same set.

        Raises:
            ConfigurationError: Endpoint/credential/project unresolved (before any I/O)
            RemoteSinkError: Non-2xx status or transport failure
        """
        validate_remote_config(remote.endpoint, remote.api_key)

        pending = self.select_unprocessed()
        payload = self.build_payload(pending)

        if not pending:
            logger.info("No unprocessed bookmarks found, nothing to sync")
            return SyncResult()

        logger.info(f"Sending {len(pending)} bookmarks to {remote.endpoint}...")
        status_code = remote.send(payload.to_dict())

        ids = [item.id for item in pending]
        self._store.set_many_processed(ids, True)

        result = SyncResult(sent=len(pending), status_code=status_code, ids=ids)
        logger.info(str(result))
        return result


__all__ = [
    "validate_remote_config",
    "ProcessResult",
    "SyncResult",
    "SyncReconciler",
]
