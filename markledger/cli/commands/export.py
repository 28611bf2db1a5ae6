# markledger/cli/commands/export.py
"""
Export unprocessed bookmarks as JSON.

Usage:
    markledger export                     # JSON to stdout
    markledger export -o bookmarks.json   # JSON to a file
    markledger export --no-scan           # Use the last snapshot
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from markledger.cli.commands.scan import prepare_index
from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui
from markledger.sync.sink import ExportSink, FileExportSink, StreamExportSink


def command(
    root: Optional[Path] = None,
    output: Optional[Path] = None,
    no_scan: bool = False,
) -> None:
    """
    Serialize unprocessed bookmarks. Processed state is not changed.

    With no --output only the JSON document goes to stdout.
    """
    ctx = LedgerContext.load(root)

    if not ctx.enabled:
        ui.info("markledger is disabled (enable: false)")
        return

    to_stdout = output is None
    prepare_index(ctx, no_scan, quiet=to_stdout)

    reconciler = ctx.reconciler()
    sink: ExportSink = StreamExportSink() if to_stdout else FileExportSink(output)
    payload = reconciler.export(sink)

    if not to_stdout:
        ui.success(f"Exported {len(payload.bookmarks)} unprocessed bookmarks to {output}")
