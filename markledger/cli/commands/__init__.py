# markledger/cli/commands/__init__.py
"""CLI commands."""

from markledger.cli.commands import (
    export,
    process,
    reset,
    scan,
    status,
    sync,
    toggle,
)

__all__ = ["export", "process", "reset", "scan", "status", "sync", "toggle"]
