# markledger/cli/__init__.py
"""markledger command line interface."""

from markledger.cli.cli import app

__all__ = ["app"]
