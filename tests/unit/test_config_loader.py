# tests/unit/test_config_loader.py
"""Test config loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from markledger.config.loader import (
    deep_merge,
    get_config_source,
    load_config,
    load_defaults,
    resolve_project_name,
)
from markledger.config.schema import (
    DEFAULT_API_URL,
    DEFAULT_MAX_FILES,
    MarkLedgerConfig,
    split_comma_list,
)
from markledger.core.exceptions import ConfigurationError


def write_user_config(root: Path, text: str) -> Path:
    path = root / ".markledger" / "config.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestSplitCommaList:
    """Tests for split_comma_list function."""

    def test_trims_and_dedupes(self):
        """Test whitespace is trimmed and duplicates dropped in order."""
        assert split_comma_list(" TODO, FIXME ,,TODO") == ["TODO", "FIXME"]

    def test_empty(self):
        """Test empty and None give an empty list."""
        assert split_comma_list("") == []
        assert split_comma_list(None) == []


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_nested_override(self):
        """Test nested dicts merge and lists are replaced."""
        base = {"a": 1, "b": {"c": 2, "d": 3}, "l": [1, 2]}

        result = deep_merge(base, {"b": {"c": 10}, "l": [9]})

        assert result == {"a": 1, "b": {"c": 10, "d": 3}, "l": [9]}
        assert base["b"]["c"] == 2


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self, tmp_path: Path):
        """Test package defaults validate with no user file."""
        config = load_config(tmp_path)

        assert config.enable is True
        assert config.api.url == DEFAULT_API_URL
        assert config.api.key == ""
        assert config.search.max_files == DEFAULT_MAX_FILES
        assert config.deeplink_scheme == "windsurf"
        assert config.word_mapping()["green"] == ["TODO"]

    def test_defaults_file_is_valid(self):
        """Test the packaged default.yaml validates on its own."""
        MarkLedgerConfig.model_validate(load_defaults())

    def test_user_overrides(self, tmp_path: Path):
        """Test user values are deep-merged over defaults."""
        write_user_config(
            tmp_path,
            "api:\n  url: https://hooks.test/bookmarks\n  key: secret\n"
            "words:\n  green: 'TODO,LATER'\n",
        )

        config = load_config(tmp_path)

        assert config.api.url == "https://hooks.test/bookmarks"
        assert config.api.key == "secret"
        assert config.api.timeout == 30.0
        assert config.word_mapping()["green"] == ["TODO", "LATER"]
        assert config.word_mapping()["red"] == ["FIXME", "BUG"]
        assert "overriding defaults" in get_config_source(tmp_path)

    def test_invalid_user_config_raises(self, tmp_path: Path):
        """Test validation failures become ConfigurationError."""
        write_user_config(tmp_path, "search:\n  max_files: 0\n")

        with pytest.raises(ConfigurationError):
            load_config(tmp_path)

    def test_unknown_key_rejected(self, tmp_path: Path):
        """Test typos in the user file are reported."""
        write_user_config(tmp_path, "enabel: false\n")

        with pytest.raises(ConfigurationError):
            load_config(tmp_path)

    def test_unparseable_user_config_ignored(self, tmp_path: Path):
        """Test broken YAML falls back to defaults."""
        write_user_config(tmp_path, "api: [unclosed\n")

        config = load_config(tmp_path)

        assert config.api.url == DEFAULT_API_URL

    def test_scheme_validation(self):
        """Test deeplink_scheme must be a bare scheme."""
        with pytest.raises(ValidationError):
            MarkLedgerConfig(deeplink_scheme="vscode://")


class TestResolveProjectName:
    """Tests for resolve_project_name function."""

    def test_placeholder_resolves_to_root_name(self, tmp_path: Path):
        """Test the workspace placeholder becomes the root directory name."""
        root = tmp_path / "my-project"
        root.mkdir()

        assert resolve_project_name(MarkLedgerConfig(), root) == "my-project"

    def test_explicit_name(self, tmp_path: Path):
        """Test an explicit name is used as-is."""
        config = MarkLedgerConfig.model_validate({"project": {"name": "demo"}})

        assert resolve_project_name(config, tmp_path) == "demo"

    def test_empty_name_raises(self, tmp_path: Path):
        """Test an empty name is a configuration error."""
        config = MarkLedgerConfig.model_validate({"project": {"name": "  "}})

        with pytest.raises(ConfigurationError, match="Project name not set"):
            resolve_project_name(config, tmp_path)
