# markledger/scan/identity.py
"""
Content-derived identity for annotations.

This is the single source of truth for annotation identity.

Design:
- The id is a SHA-1 digest of a canonical JSON object
- Keys are serialized in the fixed order uri, category, line, text
- Same file key + category + line + trimmed text = same id, across runs
- Editing the line changes the id; the old ledger record is orphaned
"""

from __future__ import annotations

import hashlib
import json


def canonical_identity_json(file_key: str, category: str, line: int, text: str) -> str:
    """
    Serialize identity inputs in their canonical form.

    Compact separators, non-ASCII kept as-is, text trimmed.

    Examples:
        >>> canonical_identity_json("a.ts", "todo", 0, "// TODO: fix X ")
        '{"uri":"a.ts","category":"todo","line":0,"text":"// TODO: fix X"}'
    """
    return json.dumps(
        {
            "uri": file_key,
            "category": category,
            "line": line,
            "text": text.strip(),
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_annotation_id(file_key: str, category: str, line: int, text: str) -> str:
    """
    Compute the deterministic annotation id.

    Args:
        file_key: Identifier of the file the annotation was found in
        category: Category of the matching pattern
        line: Zero-based start line of the match
        text: Line remainder from the match start (trimmed here)

    Returns:
        SHA-1 hex digest (40 lowercase hex chars, no prefix)
    """
    payload = canonical_identity_json(file_key, category, line, text)
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()


__all__ = ["canonical_identity_json", "compute_annotation_id"]
