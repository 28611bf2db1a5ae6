# markledger/config/schema.py
"""
Configuration schema for markledger.

This module defines Pydantic models for:
- WordsConfig: Default colour categories (comma-separated patterns)
- IgnoreConfig: Word-prefix and file-suffix ignore lists
- SearchConfig: Workspace scan filters
- ApiConfig: Remote sink endpoint and credential
- ProjectConfig: Project name used in export payloads
- MarkLedgerConfig: Top-level configuration

Example YAML:
    words:
      red: "FIXME,BUG"
      green: "TODO"
    custom_words:
      audit: ["@audit\\b", "@audit-issue"]
    ignore:
      words: ""
      extensions: ".min.js,.lock"
    search:
      includes: ["**/*"]
      excludes: ["node_modules/**"]
      max_files: 5120
    api:
      url: https://tracker.example.org/bookmarks
      key: secret
    project:
      name: my-project
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_URL = "https://api.example.com/bookmarks"
DEFAULT_PROJECT_NAME = "${workspaceFolderBasename}"
DEFAULT_DEEPLINK_SCHEME = "windsurf"
DEFAULT_MAX_FILES = 5120


def split_comma_list(value: str | None) -> List[str]:
    """
    Convert a comma-separated string to a unique list of trimmed strings.

    Order of first appearance is kept; empty entries are dropped.

    Examples:
        >>> split_comma_list(" TODO, FIXME ,,TODO")
        ['TODO', 'FIXME']
    """
    if not value:
        return []
    seen: Dict[str, None] = {}
    for part in value.strip().split(","):
        part = part.strip()
        if part:
            seen.setdefault(part, None)
    return list(seen)


class WordsConfig(BaseModel):
    """Comma-separated pattern lists for the four default categories."""

    model_config = ConfigDict(extra="forbid")

    red: str = Field(default="", description="Patterns for the red category")
    green: str = Field(default="", description="Patterns for the green category")
    blue: str = Field(default="", description="Patterns for the blue category")
    purple: str = Field(default="", description="Patterns for the purple category")


class IgnoreConfig(BaseModel):
    """Ignore rules applied before scanning."""

    model_config = ConfigDict(extra="forbid")

    words: str = Field(
        default="",
        description="Comma-separated prefixes; a category whose first pattern starts with one is skipped",
    )
    extensions: str = Field(
        default="",
        description="Comma-separated suffixes; matching files are never scanned",
    )


class SearchConfig(BaseModel):
    """Workspace scan filters."""

    model_config = ConfigDict(extra="forbid")

    includes: List[str] = Field(default_factory=lambda: ["**/*"], description="Glob include patterns")
    excludes: List[str] = Field(default_factory=list, description="Glob exclude patterns")
    max_files: int = Field(default=DEFAULT_MAX_FILES, ge=1, description="Maximum files per scan")


class ApiConfig(BaseModel):
    """Remote sink endpoint and credential."""

    model_config = ConfigDict(extra="forbid")

    url: str = Field(default=DEFAULT_API_URL, description="Remote sink URL")
    key: str = Field(default="", description="Bearer token for the remote sink")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class ProjectConfig(BaseModel):
    """Project identity used in export payloads."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default=DEFAULT_PROJECT_NAME, description="Project name")


class MarkLedgerConfig(BaseModel):
    """
    Top-level markledger configuration.

    Every value has a default, so an empty mapping validates.
    """

    model_config = ConfigDict(extra="forbid")

    enable: bool = Field(default=True, description="Master switch for scanning")
    words: WordsConfig = Field(default_factory=WordsConfig)
    custom_words: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Extra category -> pattern list mapping; overrides defaults of the same name",
    )
    ignore: IgnoreConfig = Field(default_factory=IgnoreConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    deeplink_scheme: str = Field(default=DEFAULT_DEEPLINK_SCHEME, description="Deeplink URI scheme")

    @field_validator("deeplink_scheme")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Scheme must be non-empty and carry no '://' suffix."""
        v = v.strip()
        if not v:
            raise ValueError("deeplink_scheme must not be empty")
        if "://" in v:
            raise ValueError("deeplink_scheme must be a bare scheme like 'vscode'")
        return v

    def word_mapping(self) -> Dict[str, List[str]]:
        """
        Resolve category -> patterns.

        Default colours first, then custom mapping merged over them.
        """
        mapping: Dict[str, List[str]] = {
            "blue": split_comma_list(self.words.blue),
            "purple": split_comma_list(self.words.purple),
            "green": split_comma_list(self.words.green),
            "red": split_comma_list(self.words.red),
        }
        for category, patterns in self.custom_words.items():
            mapping[category] = list(patterns)
        return mapping


__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_DEEPLINK_SCHEME",
    "DEFAULT_MAX_FILES",
    "split_comma_list",
    "WordsConfig",
    "IgnoreConfig",
    "SearchConfig",
    "ApiConfig",
    "ProjectConfig",
    "MarkLedgerConfig",
]
