# markledger/core/__init__.py
"""
markledger core - errors, paths and the HTTP client factory.

Public API:
    - Exceptions: MarkLedgerError and its subclasses
    - LedgerPaths: Central path management
"""

from .exceptions import (
    ConfigurationError,
    MarkLedgerError,
    PerFileReadError,
    RemoteSinkError,
    ScanCancelled,
    StateStoreIOError,
)
from .paths import LedgerPaths

__all__ = [
    # Exceptions
    "MarkLedgerError",
    "ConfigurationError",
    "ScanCancelled",
    "PerFileReadError",
    "RemoteSinkError",
    "StateStoreIOError",
    # Paths
    "LedgerPaths",
]
