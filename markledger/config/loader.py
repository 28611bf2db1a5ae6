# markledger/config/loader.py
"""
Layered configuration loading for markledger.

Merge strategy:
    1. Package defaults (markledger/config/default.yaml) - always loaded
    2. User config (<root>/.markledger/config.yaml) - overrides defaults

The merged dict is validated into a MarkLedgerConfig, so every value is
guaranteed to exist. Callers never need fallback logic.

Usage:
    from markledger.config.loader import load_config

    config = load_config("/path/to/project")
    patterns = config.word_mapping()
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from markledger.core.exceptions import ConfigurationError
from markledger.core.paths import LedgerPaths
from markledger.logging.logger import get_logger

from .schema import DEFAULT_PROJECT_NAME, MarkLedgerConfig

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively.
    Lists are replaced entirely (not merged).

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_defaults() -> dict[str, Any]:
    """
    Load package defaults.

    Raises:
        FileNotFoundError: If the packaged default.yaml is missing
    """
    if not DEFAULTS_PATH.exists():
        raise FileNotFoundError(f"Package defaults missing. Expected: {DEFAULTS_PATH}")

    with DEFAULTS_PATH.open("r", encoding="utf-8") as f:
        defaults = yaml.safe_load(f) or {}

    logger.debug(f"Loaded defaults from {DEFAULTS_PATH}")
    return defaults


def load_user_config(paths: LedgerPaths) -> Optional[dict[str, Any]]:
    """
    Load user configuration from <root>/.markledger/config.yaml.

    Returns:
        User configuration dictionary, or None if absent or unreadable
    """
    user_path = paths.config()

    if not user_path.exists():
        logger.debug(f"No user config at {user_path}")
        return None

    try:
        with user_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load user config from {user_path}: {e}")
        return None

    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring user config at {user_path}: top level must be a mapping")
        return None

    logger.debug(f"Loaded user config from {user_path}")
    return user_config


def load_config(root: Optional[str | Path] = None) -> MarkLedgerConfig:
    """
    Load the complete configuration for a project.

    Args:
        root: Project root (defaults to CWD)

    Returns:
        Validated MarkLedgerConfig

    Raises:
        ConfigurationError: If the merged configuration fails validation
    """
    paths = LedgerPaths(root)
    merged = load_defaults()

    user_config = load_user_config(paths)
    if user_config is not None:
        merged = deep_merge(merged, user_config)
        logger.debug("Merged config: defaults + user overrides")

    try:
        return MarkLedgerConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {paths.config()}: {e}") from e


def get_config_source(root: Optional[str | Path] = None) -> str:
    """Human-readable description of where config is loaded from."""
    user_path = LedgerPaths(root).config()
    if user_path.exists():
        return f"{user_path} (overriding defaults)"
    return f"{DEFAULTS_PATH} (package defaults)"


# =============================================================================
# Resolution
# =============================================================================


def resolve_project_name(config: MarkLedgerConfig, root: str | Path) -> str:
    """
    Resolve the project name used in export payloads.

    The placeholder "${workspaceFolderBasename}" resolves to the project
    root's directory name.

    Raises:
        ConfigurationError: If the name is empty or cannot be resolved
    """
    name = (config.project.name or "").strip()

    if name == DEFAULT_PROJECT_NAME:
        name = Path(root).resolve().name

    if not name:
        raise ConfigurationError(
            "Project name not set. Please configure project.name in .markledger/config.yaml."
        )

    return name


__all__ = [
    "DEFAULTS_PATH",
    "deep_merge",
    "load_defaults",
    "load_user_config",
    "load_config",
    "get_config_source",
    "resolve_project_name",
]
