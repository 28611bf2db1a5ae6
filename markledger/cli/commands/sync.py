# markledger/cli/commands/sync.py
"""
Send unprocessed bookmarks to the configured API.

Usage:
    markledger sync
    markledger sync --no-scan

Configure the endpoint in .markledger/config.yaml:

    api:
      url: https://bookmarks.internal/api/bookmarks
      key: <token>
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from markledger.cli.commands.scan import prepare_index
from markledger.cli.context import LedgerContext
from markledger.cli.ui import ui
from markledger.sync.reconciler import validate_remote_config


def command(root: Optional[Path] = None, no_scan: bool = False) -> None:
    """
    Sync unprocessed bookmarks.

    State changes only after the API confirms receipt.

    Raises:
        ConfigurationError: Endpoint, key or project name unresolved
        RemoteSinkError: API rejected the payload or was unreachable
    """
    ctx = LedgerContext.load(root)

    if not ctx.enabled:
        ui.info("markledger is disabled (enable: false)")
        return

    remote = ctx.remote_sink()
    # Fail before scanning when the endpoint is still unset.
    validate_remote_config(remote.endpoint, remote.api_key)

    prepare_index(ctx, no_scan)

    result = ctx.reconciler().sync(remote)
    if result.sent == 0:
        ui.info(str(result))
    else:
        ui.success(str(result))
