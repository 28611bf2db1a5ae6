# markledger/cli/cli.py
"""
markledger CLI - Main application.

Commands:
    markledger scan       Rescan the workspace and save the snapshot
    markledger status     List bookmarks with their processed state
    markledger export     Export unprocessed bookmarks as JSON
    markledger process    Mark every bookmark as processed
    markledger sync       Send unprocessed bookmarks to the API
    markledger toggle     Flip one bookmark's processed state
    markledger reset      Forget processed states and the snapshot

Global options (before the command):
    --root PATH     Project root (defaults to CWD)
    --verbose, -v   Debug logging

NOTE: Commands use lazy loading - implementations are imported only when invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import typer

from markledger.core.exceptions import ConfigurationError, RemoteSinkError
from markledger.logging.logger import configure_logging

app = typer.Typer(
    name="markledger",
    help="markledger - find TODO/FIXME style bookmarks and track which ones are handled.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Project root (defaults to CWD)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """markledger - bookmark ledger for your source tree."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"root": root}


def _run(ctx: typer.Context, command: Callable[..., None], **kwargs: Any) -> None:
    """Invoke a command, turning configuration and API errors into exit code 1."""
    from rich.markup import escape

    from markledger.cli.ui import ui

    root = (ctx.obj or {}).get("root")
    try:
        command(root=root, **kwargs)
    except (ConfigurationError, RemoteSinkError) as e:
        ui.error(escape(str(e)))
        raise typer.Exit(1)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("scan")
def scan(ctx: typer.Context) -> None:
    """Rescan the workspace and save the snapshot."""
    from markledger.cli.commands import scan as mod

    _run(ctx, mod.command)


@app.command("status")
def status(
    ctx: typer.Context,
    no_scan: bool = typer.Option(False, "--no-scan", help="Use the last snapshot instead of rescanning."),
    pending: bool = typer.Option(False, "--pending", "-p", help="Only show unprocessed bookmarks."),
) -> None:
    """List bookmarks with their processed state."""
    from markledger.cli.commands import status as mod

    _run(ctx, mod.command, no_scan=no_scan, pending=pending)


@app.command("export")
def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to a file instead of stdout."),
    no_scan: bool = typer.Option(False, "--no-scan", help="Use the last snapshot instead of rescanning."),
) -> None:
    """Export unprocessed bookmarks as JSON."""
    from markledger.cli.commands import export as mod

    _run(ctx, mod.command, output=output, no_scan=no_scan)


@app.command("process")
def process(
    ctx: typer.Context,
    no_scan: bool = typer.Option(False, "--no-scan", help="Use the last snapshot instead of rescanning."),
) -> None:
    """Mark every bookmark as processed."""
    from markledger.cli.commands import process as mod

    _run(ctx, mod.command, no_scan=no_scan)


@app.command("sync")
def sync(
    ctx: typer.Context,
    no_scan: bool = typer.Option(False, "--no-scan", help="Use the last snapshot instead of rescanning."),
) -> None:
    """Send unprocessed bookmarks to the configured API."""
    from markledger.cli.commands import sync as mod

    _run(ctx, mod.command, no_scan=no_scan)


@app.command("toggle")
def toggle(
    ctx: typer.Context,
    bookmark_id: str = typer.Argument(..., help="Bookmark id or unique id prefix."),
) -> None:
    """Flip one bookmark's processed state."""
    from markledger.cli.commands import toggle as mod

    _run(ctx, mod.command, bookmark_id=bookmark_id)


@app.command("reset")
def reset(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Forget processed states and the snapshot."""
    from markledger.cli.commands import reset as mod

    _run(ctx, mod.command, force=force)


if __name__ == "__main__":
    app()
