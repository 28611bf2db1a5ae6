# markledger/cli/commands/scan.py
"""
Workspace scan command.

Usage:
    markledger scan              # Rescan and save the snapshot
    markledger --root ./repo scan
"""

from __future__ import annotations

import signal
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui
from markledger.logging.logger import get_logger
from markledger.workspace.orchestrator import (
    CancellationToken,
    ScanProgress,
    ScanStatus,
    ScanSummary,
)

logger = get_logger(__name__)


@contextmanager
def _sigint_cancels(token: CancellationToken) -> Iterator[None]:
    """Route Ctrl+C to the token for the duration of the block."""

    def _handler(signum, frame) -> None:
        logger.info("Interrupt received, stopping after the current file")
        token.cancel()

    installed = False
    try:
        previous = signal.signal(signal.SIGINT, _handler)
        installed = True
    except ValueError:
        # Not in the main thread; leave SIGINT alone.
        previous = None

    try:
        yield
    finally:
        if installed:
            signal.signal(signal.SIGINT, previous)


def run_scan(ctx: LedgerContext, show_progress: bool = True) -> ScanSummary:
    """Rescan the workspace with a progress bar and Ctrl+C cancellation."""
    token = CancellationToken()

    with _sigint_cancels(token):
        if not show_progress:
            summary = ctx.scan(cancel_token=token)
        else:
            with ui.progress() as progress:
                task_id = progress.add_task("Scanning workspace...", total=None)

                def _on_progress(update: ScanProgress) -> None:
                    progress.update(
                        task_id,
                        completed=update.files_processed,
                        total=update.files_total,
                        description=update.message,
                    )

                summary = ctx.scan(cancel_token=token, progress=_on_progress)

    # Quiet callers keep stdout clean; the orchestrator has already logged problems.
    if not show_progress:
        return summary

    if summary.status == ScanStatus.FAILED:
        for detail in summary.error_details:
            ui.error(detail)
    elif summary.status == ScanStatus.CANCELLED:
        ui.warning("Scan cancelled", f"{summary.files_scanned}/{summary.files_total} files")
    elif summary.errors:
        ui.warning(f"{summary.errors} file(s) could not be read", "see log for details")

    return summary


def prepare_index(ctx: LedgerContext, no_scan: bool, quiet: bool = False) -> None:
    """
    Fill the context's index from a fresh scan or from the snapshot.

    A scan that did not complete stops the command with exit code 0, so
    nothing is exported, processed or synced from a partial index.
    """
    if no_scan:
        ctx.load_snapshot()
        if not quiet:
            ui.info(f"Using snapshot {ctx.snapshot.path} ({ctx.index.count()} bookmarks)")
        return

    summary = run_scan(ctx, show_progress=not quiet)
    if summary.completed:
        return

    if quiet:
        logger.warning(f"Operation cancelled: scan {summary.status.value}")
    else:
        ui.warning("Operation cancelled", f"scan {summary.status.value}")
    raise typer.Exit(0)


def command(root: Optional[Path] = None) -> None:
    """
    Rescan the workspace and print per-category counts.

    Args:
        root: Project root (defaults to CWD)
    """
    ctx = LedgerContext.load(root)

    if not ctx.enabled:
        ui.info("markledger is disabled (enable: false)")
        return

    ui.header("markledger scan", str(ctx.root))
    ui.info(f"Config: {ctx.config_source}")
    summary = run_scan(ctx)

    counts: dict[str, int] = {}
    for _, category, _ in ctx.index.iter_annotations():
        counts[category] = counts.get(category, 0) + 1

    if counts:
        ui.table(
            "Bookmarks by category",
            ["Category", "Count"],
            [[category, str(count)] for category, count in counts.items()],
        )

    content = (
        f"Files scanned: {summary.files_scanned}/{summary.files_total}\n"
        f"Bookmarks: {summary.annotations}\n"
        f"Duration: {summary.duration_seconds:.2f}s"
    )
    style = "green" if summary.completed else "yellow"
    ui.summary_panel(content, title=f"Scan {summary.status.value}", style=style)