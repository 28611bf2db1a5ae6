# markledger/sync/__init__.py
"""
Export, bulk acknowledge and remote sync.

Key components:
- SyncReconciler: Selects unprocessed annotations, commits state on success
- ExportPayload / ExportBookmark: Wire format
- StreamExportSink / FileExportSink: Local export destinations
- HttpRemoteSink: httpx-based remote sink

Usage:
    from markledger.sync import HttpRemoteSink, SyncReconciler

    reconciler = SyncReconciler(index, store, project="demo")
    result = reconciler.sync(HttpRemoteSink(url, key))
    print(result)
"""

from .payload import ExportBookmark, ExportPayload, PendingAnnotation, build_deeplink
from .reconciler import ProcessResult, SyncReconciler, SyncResult, validate_remote_config
from .sink import (
    ExportSink,
    FileExportSink,
    HttpRemoteSink,
    RemoteSink,
    StreamExportSink,
)

__all__ = [
    # Payload
    "build_deeplink",
    "ExportBookmark",
    "ExportPayload",
    "PendingAnnotation",
    # Reconciler
    "validate_remote_config",
    "ProcessResult",
    "SyncResult",
    "SyncReconciler",
    # Sinks
    "ExportSink",
    "RemoteSink",
    "StreamExportSink",
    "FileExportSink",
    "HttpRemoteSink",
]
