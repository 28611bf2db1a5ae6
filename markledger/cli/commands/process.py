# markledger/cli/commands/process.py
"""
Mark every indexed bookmark as processed without sending anything.

Usage:
    markledger process
    markledger process --no-scan
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from markledger.cli.commands.scan import prepare_index
from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui


def command(root: Optional[Path] = None, no_scan: bool = False) -> None:
    """Bulk acknowledge the current index."""
    ctx = LedgerContext.load(root)

    if not ctx.enabled:
        ui.info("markledger is disabled (enable: false)")
        return

    prepare_index(ctx, no_scan)

    result = ctx.reconciler().process()
    ui.success(str(result))
