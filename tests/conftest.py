"""Shared fixtures: keep every test away from the real home directory."""

from pathlib import Path

import pytest

from ux_toolkit.core.paths import ENV_VARS


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir and clear the config-dir overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture
def opencode_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Global OpenCode config dir under tmp_path, via UX_TOOLKIT_CONFIG_DIR."""
    path = tmp_path / "opencode"
    monkeypatch.setenv("UX_TOOLKIT_CONFIG_DIR", str(path))
    return path


@pytest.fixture
def claude_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "claude"
    monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(path))
    return path
