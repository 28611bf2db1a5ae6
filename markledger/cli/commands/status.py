# markledger/cli/commands/status.py
"""
Bookmark status command.

Usage:
    markledger status            # Rescan, then list bookmarks with their state
    markledger status --no-scan  # List from the last snapshot
    markledger status --pending  # Only unprocessed bookmarks
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.markup import escape

from markledger.cli.commands.scan import prepare_index
from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui


def command(root: Optional[Path] = None, no_scan: bool = False, pending: bool = False) -> None:
    """List indexed bookmarks with their processed state."""
    ctx = LedgerContext.load(root)

    if not ctx.enabled and not no_scan:
        ui.info("markledger is disabled (enable: false)")
        return

    prepare_index(ctx, no_scan)

    rows = []
    processed_count = 0
    for file_key, category, annotation in ctx.index.iter_annotations():
        processed = ctx.store.is_processed(annotation.id)
        if processed:
            processed_count += 1
            if pending:
                continue
        try:
            location = Path(file_key).relative_to(ctx.root).as_posix()
        except ValueError:
            location = file_key
        rows.append(
            [
                annotation.id[:12],
                category,
                f"{escape(location)}:{annotation.line + 1}",
                escape(annotation.text),
                "✓" if processed else "",
            ]
        )

    total = ctx.index.count()
    if rows:
        ui.table("Bookmarks", ["Id", "Type", "Location", "Text", "Done"], rows)

    ui.info(f"{total} bookmarks, {processed_count} processed, {total - processed_count} pending")
