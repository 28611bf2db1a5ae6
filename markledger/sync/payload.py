# markledger/sync/payload.py
"""
Export payload models.

Wire format shared by export and sync:

    {
      "project": "demo",
      "bookmarks": [
        {"text": "// TODO: fix X", "deeplink": "windsurf://file//repo/a.ts:1", "type": "todo"}
      ]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from markledger.core.paths import path_from_file_key
from markledger.scan.models import Annotation


def build_deeplink(scheme: str, file_key: str, line: int) -> str:
    """
    Deeplink for a zero-based line in a file.

    Format: "<scheme>://file/<absoluteFilePath>:<line + 1>"

    Examples:
        >>> build_deeplink("scheme", "/repo/a.ts", 0)
        'scheme://file//repo/a.ts:1'
    """
    return f"{scheme}://file/{path_from_file_key(file_key)}:{line + 1}"


class ExportBookmark(BaseModel):
    """One unprocessed annotation in export form."""
    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., description="Annotation text")
    deeplink: str = Field(..., description="Navigation URI (1-based line)")
    type: str = Field(..., description="Annotation category")


class ExportPayload(BaseModel):
    """Payload handed to export sinks and POSTed to the remote sink."""
    model_config = ConfigDict(extra="forbid")

    project: str = Field(..., description="Project name")
    bookmarks: List[ExportBookmark] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class PendingAnnotation:
    """An unprocessed annotation together with where it was found."""

    file_key: str
    category: str
    annotation: Annotation
    export: ExportBookmark

    @property
    def id(self) -> str:
        return self.annotation.id


__all__ = ["build_deeplink", "ExportBookmark", "ExportPayload", "PendingAnnotation"]
