# markledger/cli/commands/reset.py
"""
Reset command.

Usage:
    markledger reset            # Empty the corpus snapshot
    markledger reset --force    # Skip confirmation prompt

Processed states in bookmark-states.json are kept.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui


def command(root: Optional[Path] = None, force: bool = False) -> None:
    """
    Empty the corpus snapshot.

    The processing ledger is untouched, so bookmarks found again by the
    next scan keep their processed flag.
    """
    ctx = LedgerContext.load(root)

    if not force:
        confirm = typer.confirm("This will empty the saved bookmark snapshot. Continue?")
        if not confirm:
            ui.warning("Aborted.")
            raise typer.Exit(0)

    ctx.snapshot.reset()
    ui.success(f"Reset corpus snapshot {ctx.snapshot.path}")
