"""Tests for settings loading and saving."""

from pathlib import Path

import pytest

from textprompt_tui.config import Settings, config_dir, load_settings, save_settings, settings_path
from textprompt_tui.errors import ConfigError
from textprompt_tui.prompt import ControlKeys


def test_config_dir_honours_env(isolated_home):
    assert config_dir() == isolated_home
    assert settings_path() == isolated_home / "settings.yaml"


def test_defaults_when_missing():
    settings = load_settings()
    assert settings.control_keys is ControlKeys.APPEND
    assert settings.log_level == "WARNING"
    assert settings.resolved_log_file == config_dir() / "textprompt.log"


def test_save_and_load(tmp_path: Path):
    path = tmp_path / "nested" / "settings.yaml"
    saved = Settings(
        control_keys=ControlKeys.IGNORE,
        log_level="DEBUG",
        log_file=tmp_path / "debug.log",
    )
    save_settings(saved, path)
    assert path.exists()

    loaded = load_settings(path)
    assert loaded == saved


def test_level_is_case_insensitive(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("logging:\n  level: debug\n")
    assert load_settings(path).log_level == "DEBUG"


@pytest.mark.parametrize(
    "content",
    [
        "prompt:\n  control_keys: sometimes\n",
        "logging:\n  level: LOUD\n",
        "- just\n- a list\n",
        "prompt: [1, 2]\n",
        "prompt: {control_keys: [unclosed\n",
    ],
)
def test_invalid_settings(tmp_path: Path, content: str):
    path = tmp_path / "settings.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_settings(path)


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert load_settings(path) == Settings()
