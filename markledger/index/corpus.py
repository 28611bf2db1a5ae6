# markledger/index/corpus.py
"""
In-memory corpus index: file -> category -> annotations.

The index is a cache of the latest scan. Each file's entry is discarded
and rebuilt on every scan of that file; entries are never diffed or merged.

Key responsibilities:
- Replace a file's category list wholesale
- Remove a file entirely
- Iterate (file, category, annotation) in insertion order

Key non-responsibilities:
- NO processed state (that's the ProcessingStateStore)
- NO persistence (see CorpusSnapshot for the optional mirror)
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from markledger.scan.models import Annotation

IndexEntry = Tuple[str, str, Annotation]


class CorpusIndex:
    """
    Owned file -> category -> annotation-list mapping.

    Not thread-safe; callers serialize mutations.

    Usage:
        index = CorpusIndex()
        index.clear_file("/repo/a.ts")
        index.replace("/repo/a.ts", "red", annotations)

        for file_key, category, annotation in index:
            ...
    """

    def __init__(self) -> None:
        self._files: Dict[str, Dict[str, List[Annotation]]] = {}

    def replace(self, file_key: str, category: str, annotations: Sequence[Annotation]) -> None:
        """Overwrite the category's list for a file (not a merge)."""
        self._files.setdefault(file_key, {})[category] = list(annotations)

    def clear_file(self, file_key: str) -> None:
        """Remove a file and all of its categories."""
        self._files.pop(file_key, None)

    def clear(self) -> None:
        """Remove every file."""
        self._files.clear()

    def get(self, file_key: str, category: Optional[str] = None) -> List[Annotation]:
        """
        Annotations for a file, optionally limited to one category.

        Returns an empty list for unknown files or categories.
        """
        categories = self._files.get(file_key)
        if categories is None:
            return []
        if category is not None:
            return list(categories.get(category, []))
        return [annotation for items in categories.values() for annotation in items]

    def categories(self, file_key: str) -> List[str]:
        return list(self._files.get(file_key, {}))

    def files(self) -> List[str]:
        return list(self._files)

    def iter_annotations(self) -> Iterator[IndexEntry]:
        """Yield (file_key, category, annotation): file, then category, then annotation order."""
        for file_key, categories in self._files.items():
            for category, annotations in categories.items():
                for annotation in annotations:
                    yield file_key, category, annotation

    def count(self, file_key: Optional[str] = None) -> int:
        """Number of annotations, for one file or the whole index."""
        if file_key is not None:
            return sum(len(items) for items in self._files.get(file_key, {}).values())
        return sum(len(items) for categories in self._files.values() for items in categories.values())

    def __iter__(self) -> Iterator[IndexEntry]:
        return self.iter_annotations()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, file_key: object) -> bool:
        return file_key in self._files

    def to_dict(self) -> Dict[str, Dict[str, List[dict]]]:
        """Plain-JSON view, used by the snapshot mirror."""
        return {
            file_key: {
                category: [annotation.to_dict() for annotation in annotations]
                for category, annotations in categories.items()
            }
            for file_key, categories in self._files.items()
        }


__all__ = ["CorpusIndex", "IndexEntry"]
