# markledger/state/manager.py
"""
State manager for the processed-state ledger.

Manages reading and writing of .markledger/bookmark-states.json.

Key responsibilities:
- Load state from disk (create it if absent, fall back to empty if corrupt)
- Upsert processed flags
- Persist the whole database synchronously after every mutation

Key non-responsibilities:
- NO scanning
- NO corpus index access
- NO garbage collection of orphaned ids
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from markledger.core.exceptions import StateStoreIOError

from .schema import ProcessingStateDatabase, StateRecord, utcnow

logger = logging.getLogger(__name__)


class ProcessingStateStore:
    """
    Durable id -> processed ledger.

    Every mutation rewrites the whole file before returning, so a decision
    is durable as soon as the call returns. Not thread-safe.

    Usage:
        store = ProcessingStateStore(paths.state_file())

        if not store.is_processed(annotation.id):
            store.set_processed(annotation.id, True)
    """

    def __init__(self, state_path: Path) -> None:
        """
        Initialize the store.

        Args:
            state_path: Path to bookmark-states.json
        """
        self._path = Path(state_path)
        self._state: Optional[ProcessingStateDatabase] = None

    @property
    def state(self) -> ProcessingStateDatabase:
        """Get current state, loading if necessary."""
        if self._state is None:
            self.load()
        assert self._state is not None
        return self._state

    @property
    def path(self) -> Path:
        """Get state file path."""
        return self._path

    @property
    def last_updated(self):
        return self.state.last_updated

    def load(self) -> ProcessingStateDatabase:
        """
        Load state from disk.

        Creates and writes a new empty database if the file doesn't exist.
        An unreadable file is logged and replaced in memory by an empty
        database; this method never raises.

        Returns:
            Loaded or created ProcessingStateDatabase
        """
        if self._path.exists():
            try:
                self._state = self._read()
                logger.debug(f"Loaded {len(self._state.bookmarks)} bookmark states from {self._path}")
            except StateStoreIOError as e:
                logger.error(f"Failed to load bookmark state database, using empty state: {e}")
                self._state = ProcessingStateDatabase()
        else:
            logger.info(f"No bookmark state database at {self._path}, creating new")
            self._state = ProcessingStateDatabase()
            self.save()

        return self._state

    def _read(self) -> ProcessingStateDatabase:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return ProcessingStateDatabase.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise StateStoreIOError(f"{self._path}: {e}") from e

    def save(self) -> None:
        """
        Save the whole database to disk, atomically.

        A write failure is logged; in-memory state is kept.
        """
        state = self.state
        state.last_updated = utcnow()

        temp_path = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as f:
                json.dump(state.to_json_dict(), f, indent=2)
            temp_path.replace(self._path)
            logger.debug(f"Saved bookmark state database to {self._path}")
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            logger.error(f"Error saving bookmark state database: {StateStoreIOError(str(e))}")

    def is_processed(self, record_id: str) -> bool:
        """Unknown ids default to False."""
        return self.state.is_processed(record_id)

    def get_record(self, record_id: str) -> Optional[StateRecord]:
        """Get record if it exists."""
        return self.state.get_record(record_id)

    def set_processed(self, record_id: str, processed: bool) -> None:
        """Upsert the processed flag, then persist."""
        self._upsert(record_id, processed)
        self.save()

    def set_many_processed(self, record_ids: Iterable[str], processed: bool = True) -> int:
        """
        Upsert several flags, persisting after each one.

        Returns:
            Number of ids written
        """
        count = 0
        for record_id in record_ids:
            self.set_processed(record_id, processed)
            count += 1
        return count

    def toggle_processed(self, record_id: str) -> bool:
        """Flip the flag and return the new value."""
        new_state = not self.is_processed(record_id)
        self.set_processed(record_id, new_state)
        return new_state

    def get_processed_ids(self) -> List[str]:
        """All processed ids, including orphaned ones."""
        return self.state.processed_ids()

    def _upsert(self, record_id: str, processed: bool) -> None:
        record = self.state.bookmarks.get(record_id)
        if record is None:
            record = StateRecord(id=record_id)
            self.state.bookmarks[record_id] = record
        record.processed = bool(processed)

    def __len__(self) -> int:
        return len(self.state.bookmarks)


__all__ = ["ProcessingStateStore"]
