# markledger/core/exceptions.py
"""
Core exceptions for markledger.

Only ConfigurationError and RemoteSinkError are meant to stop a user-facing
command. Everything else is recovered where it is raised and only logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class MarkLedgerError(Exception):
    """
    Base exception for all markledger errors.

    Examples:
        >>> try:
        ...     reconciler.sync(remote)
        ... except MarkLedgerError as e:
        ...     print(f"Sync failed: {e}")
    """

    pass


class ConfigurationError(MarkLedgerError):
    """
    A required configuration value is missing or still at its placeholder.

    Raised before any I/O happens, for example:
    - Project name is empty
    - API URL is unset or left at the shipped default
    - API key is empty
    """

    pass


class ScanCancelled(MarkLedgerError):
    """
    A workspace scan was cancelled by the user.

    Whatever was already written into the corpus index is kept.
    """

    pass


class PerFileReadError(MarkLedgerError):
    """A single file could not be read during a scan."""

    def __init__(self, file_key: str, reason: str):
        self.file_key = file_key
        self.reason = reason
        super().__init__(f"Failed to read {file_key}: {reason}")


class StateStoreIOError(MarkLedgerError):
    """The processing state file could not be read or written."""

    pass


@dataclass
class RemoteSinkError(MarkLedgerError):
    """
    The remote sink rejected the payload or could not be reached.

    The message is surfaced to the caller verbatim.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if a response was received)
        endpoint: URL that was called
        details: Response body excerpt or transport error text
        original_error: The exception that caused this error
    """

    message: str
    status_code: Optional[int] = None
    endpoint: Optional[str] = None
    details: Optional[str] = None
    original_error: Optional[Exception] = None

    def __str__(self) -> str:
        return self.message


__all__ = [
    "MarkLedgerError",
    "ConfigurationError",
    "ScanCancelled",
    "PerFileReadError",
    "StateStoreIOError",
    "RemoteSinkError",
]
