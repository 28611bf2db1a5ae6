# markledger/config/__init__.py
"""
Configuration for markledger.

Key exports:
- MarkLedgerConfig: Validated top-level config
- load_config: Defaults + user overrides, validated
- resolve_project_name: Placeholder-aware project name
"""

from .loader import deep_merge, get_config_source, load_config, resolve_project_name
from .schema import (
    DEFAULT_API_URL,
    DEFAULT_PROJECT_NAME,
    MarkLedgerConfig,
    split_comma_list,
)

__all__ = [
    "MarkLedgerConfig",
    "DEFAULT_API_URL",
    "DEFAULT_PROJECT_NAME",
    "split_comma_list",
    "deep_merge",
    "load_config",
    "get_config_source",
    "resolve_project_name",
]
