# markledger/cli/commands/toggle.py
"""
Toggle the processed state of one bookmark.

Usage:
    markledger toggle 3f2a9c1b7d0e       # Id prefix as shown by `markledger status`
    markledger toggle <full-sha1-id>
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui

FULL_ID_LENGTH = 40


def _resolve_id(ctx: LedgerContext, id_or_prefix: str) -> str:
    """Expand an id prefix against the snapshot; full ids are accepted as-is."""
    candidates = {
        annotation.id
        for _, _, annotation in ctx.load_snapshot().iter_annotations()
        if annotation.id.startswith(id_or_prefix)
    }

    if len(candidates) == 1:
        return candidates.pop()
    if len(candidates) > 1:
        raise typer.BadParameter(f"'{id_or_prefix}' matches {len(candidates)} bookmarks")
    if len(id_or_prefix) == FULL_ID_LENGTH:
        return id_or_prefix
    raise typer.BadParameter(f"No bookmark matches '{id_or_prefix}'")


def command(bookmark_id: str, root: Optional[Path] = None) -> None:
    """Flip one bookmark between processed and unprocessed."""
    ctx = LedgerContext.load(root)

    resolved = _resolve_id(ctx, bookmark_id.strip())
    processed = ctx.store.toggle_processed(resolved)

    state = "processed" if processed else "unprocessed"
    ui.success(f"Marked {resolved[:12]} as {state}")
