# markledger/state/schema.py
"""
State schema for the processed-state ledger.

Defines the Pydantic models for .markledger/bookmark-states.json:

    {
      "bookmarks": {"<id>": {"id": "<id>", "processed": true}},
      "lastUpdated": "2026-01-01T00:00:00Z"
    }

Key concepts:
- Records are addressed only by annotation id
- Records are never cleared by rescans and never garbage-collected
- The ledger is independent of the corpus index
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StateRecord(BaseModel):
    """
    Per-annotation decision.

    Stored under bookmarks.<id>
    """
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Annotation id")
    processed: bool = Field(default=False, description="Whether the annotation has been handled")


class ProcessingStateDatabase(BaseModel):
    """
    Root state model for bookmark-states.json.

    `last_updated` is serialized as "lastUpdated".
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    bookmarks: Dict[str, StateRecord] = Field(default_factory=dict, description="Records keyed by id")
    last_updated: datetime = Field(
        default_factory=utcnow,
        alias="lastUpdated",
        description="Time of the last write",
    )

    def get_record(self, record_id: str) -> Optional[StateRecord]:
        """Get record if it exists."""
        return self.bookmarks.get(record_id)

    def is_processed(self, record_id: str) -> bool:
        """Unknown ids are unprocessed."""
        record = self.bookmarks.get(record_id)
        return bool(record and record.processed)

    def processed_ids(self) -> List[str]:
        """Ids whose record is processed, in insertion order."""
        return [record_id for record_id, record in self.bookmarks.items() if record.processed]

    def to_json_dict(self) -> dict:
        """Serializable form with the on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["utcnow", "StateRecord", "ProcessingStateDatabase"]
