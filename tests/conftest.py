"""Shared test fixtures."""

from __future__ import annotations

import pytest

from globdu.settings import Settings


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Point the settings store at an empty temp config directory."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr(Settings, "_instance", None)
    return config_home / "globdu" / "settings.json"


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small tree to scan.

    Layout::

        scan/a/x   500 bytes
        scan/a/y   1500 bytes
        scan/b/    empty
        scan/c     100 bytes
    """
    root = tmp_path / "scan"
    root.mkdir()
    (root / "a").mkdir()
    (root / "a" / "x").write_bytes(b"x" * 500)
    (root / "a" / "y").write_bytes(b"y" * 1500)
    (root / "b").mkdir()
    (root / "c").write_bytes(b"c" * 100)
    return root
