"""Shared fixtures for licenseit tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config location at an empty temp directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def template_store_dir(tmp_path: Path) -> Path:
    """A templates directory with a few small templates."""
    root = tmp_path / "templates"
    root.mkdir()
    (root / "MIT.txt").write_text("Copyright {date} {author}", encoding="utf-8")
    (root / "Both.txt").write_text("txt body", encoding="utf-8")
    (root / "Both.md").write_text("md body", encoding="utf-8")
    (root / "Notes.md").write_text("# Notes\n\n(c) {author}\n", encoding="utf-8")
    (root / "Plain").write_text("plain {author}", encoding="utf-8")
    return root
