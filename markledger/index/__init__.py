# markledger/index/__init__.py
"""
Corpus index for markledger.

Key exports:
- CorpusIndex: In-memory file -> category -> annotations cache
- CorpusSnapshot: Optional durable mirror of the index
"""

from .corpus import CorpusIndex, IndexEntry
from .snapshot import CorpusSnapshot

__all__ = ["CorpusIndex", "IndexEntry", "CorpusSnapshot"]
