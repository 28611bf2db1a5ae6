# markledger/scan/__init__.py
"""
Scanning for markledger.

Key components:
- PatternCatalog: Category patterns plus ignore rules
- compute_annotation_id: Content-derived identity
- scan_document: Pattern matching over one document
- Annotation / TextRange: Scan results

Usage:
    from markledger.scan import PatternCatalog, scan_with_catalog

    catalog = PatternCatalog({"todo": ["TODO"]})
    results = scan_with_catalog(text, catalog, file_key="/repo/a.ts")
"""

from .catalog import PatternCatalog
from .identity import canonical_identity_json, compute_annotation_id
from .matcher import LineIndex, scan_document, scan_with_catalog
from .models import EMPTY_RANGE, Annotation, TextRange

__all__ = [
    # Catalog
    "PatternCatalog",
    # Identity
    "canonical_identity_json",
    "compute_annotation_id",
    # Matcher
    "LineIndex",
    "scan_document",
    "scan_with_catalog",
    # Models
    "Annotation",
    "TextRange",
    "EMPTY_RANGE",
]
