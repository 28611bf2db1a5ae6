# markledger/state/__init__.py
"""
Processed-state ledger for markledger.

This package handles the .markledger/bookmark-states.json file that records
which annotation ids have been handled.

Key exports:
- ProcessingStateStore: Load/save state, upsert flags
- ProcessingStateDatabase: Root Pydantic model
- StateRecord: Per-id record
"""

from .manager import ProcessingStateStore
from .schema import ProcessingStateDatabase, StateRecord

__all__ = [
    # Manager
    "ProcessingStateStore",
    # Schema
    "ProcessingStateDatabase",
    "StateRecord",
]
