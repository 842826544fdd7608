"""Shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep settings and log files out of the real home directory."""
    home = tmp_path / "textprompt-home"
    monkeypatch.setenv("TEXTPROMPT_TUI_HOME", str(home))
    return home
