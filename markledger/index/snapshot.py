# markledger/index/snapshot.py
"""
Durable mirror of the corpus index.

Saves the latest scan to {workspace}/corpus.json so commands can run
without rescanning after a restart. The snapshot is a convenience copy:
it is never authoritative for processed state.

On load:
- Files that no longer exist on disk are dropped
- Malformed ranges are repaired to (0, 0, 0, 0) with a warning
- Entries missing id/text are dropped
- An unreadable snapshot yields an empty index
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from markledger.core.paths import path_from_file_key
from markledger.scan.models import EMPTY_RANGE, Annotation, TextRange

from .corpus import CorpusIndex

logger = logging.getLogger(__name__)


def _file_exists(file_key: str) -> bool:
    return Path(path_from_file_key(file_key)).exists()


class CorpusSnapshot:
    """
    Reads and writes corpus.json.

    Usage:
        snapshot = CorpusSnapshot(paths.snapshot_file())
        snapshot.save(index)

        index = snapshot.load()
    """

    def __init__(
        self,
        path: Path,
        exists: Optional[Callable[[str], bool]] = None,
    ) -> None:
        """
        Initialize the snapshot.

        Args:
            path: Location of corpus.json
            exists: Predicate deciding whether a file key still exists
                (defaults to a filesystem check)
        """
        self._path = Path(path)
        self._exists = exists or _file_exists

    @property
    def path(self) -> Path:
        return self._path

    def save(self, index: CorpusIndex) -> None:
        """Write the index atomically. Failures are logged, not raised."""
        self._write(index.to_dict())
        logger.debug(f"Saved corpus snapshot ({index.count()} annotations) to {self._path}")

    def reset(self) -> None:
        """Replace the snapshot with an empty one."""
        self._write({})
        logger.info(f"Reset corpus snapshot at {self._path}")

    def load(self) -> CorpusIndex:
        """Load the snapshot into a fresh CorpusIndex."""
        index = CorpusIndex()

        if not self._path.exists():
            logger.debug(f"No corpus snapshot at {self._path}")
            return index

        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load corpus snapshot, starting empty: {e}")
            return index

        if not isinstance(raw, dict):
            logger.warning(f"Corpus snapshot at {self._path} is not an object, starting empty")
            return index

        for file_key, categories in raw.items():
            if not isinstance(categories, dict):
                continue
            if not self._exists(file_key):
                logger.debug(f"Dropping snapshot entry for missing file {file_key}")
                continue
            for category, items in categories.items():
                if not isinstance(items, list):
                    continue
                annotations = [
                    annotation
                    for annotation in (self._parse_annotation(item, category) for item in items)
                    if annotation is not None
                ]
                index.replace(file_key, category, annotations)

        logger.debug(f"Loaded corpus snapshot: {index.count()} annotations in {len(index.files())} files")
        return index

    def _parse_annotation(self, item: Any, category: str) -> Optional[Annotation]:
        if not isinstance(item, dict) or "id" not in item or "text" not in item:
            logger.warning(f"Dropping malformed snapshot entry in category {category!r}")
            return None

        try:
            text_range = TextRange.from_dict(item["range"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Invalid range object found in corpus snapshot")
            text_range = EMPTY_RANGE

        return Annotation(
            id=str(item["id"]),
            text=str(item["text"]),
            range=text_range,
            category=str(item.get("category", category)),
        )

    def _write(self, data: Dict[str, Any]) -> None:
        temp_path = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except OSError as e:
            logger.error(f"Failed to write corpus snapshot {self._path}: {e}")
            if temp_path.exists():
                temp_path.unlink()


__all__ = ["CorpusSnapshot"]
