# tests/conftest.py
"""
Root conftest - shared fixtures.

All tests work on temporary project trees; nothing touches the network or
the real working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# Modules that drive the CLI or HTTP layers through mocks
TIER2_MODULES = {"test_cli.py", "test_http_sink.py"}


def pytest_collection_modifyitems(items):
    """Tag tests by tier: tier1 is pure logic or temp files, tier2 uses mocks."""
    for item in items:
        if item.path.name in TIER2_MODULES:
            item.add_marker(pytest.mark.tier2)
        else:
            item.add_marker(pytest.mark.tier1)


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    A small project tree named "proj":

        proj/
        ├── src/app.ts      # one TODO, one FIXME
        ├── README.md       # no markers
        └── vendor.lock     # ignored extension by default
    """
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "src" / "app.ts").write_text("// TODO: fix X\nconst a = 1;\n// FIXME: crash on empty\n")
    (root / "README.md").write_text("# Demo\n")
    (root / "vendor.lock").write_text("TODO inside a lock file\n")
    return root


@pytest.fixture
def configure_api():
    """Write an API section into a project's user config."""

    def _configure(root: Path, url: str = "https://hooks.test/bookmarks", key: str = "secret") -> Path:
        path = root / ".markledger" / "config.yaml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"api:\n  url: {url}\n  key: {key}\n")
        return path

    return _configure
