"""Settings file handling.

Settings live in ``~/.textprompt-tui/settings.yaml`` (or under
``$TEXTPROMPT_TUI_HOME``):

    prompt:
      control_keys: append
    logging:
      level: WARNING
      file: ~/.textprompt-tui/textprompt.log
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .errors import ConfigError
from .prompt import ControlKeys

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "TEXTPROMPT_TUI_HOME"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_dir() -> Path:
    """Directory holding settings and the log file."""
    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".textprompt-tui"


def settings_path() -> Path:
    return config_dir() / "settings.yaml"


@dataclass
class Settings:
    """User settings for prompts and logging."""

    control_keys: ControlKeys = ControlKeys.APPEND
    log_level: str = "WARNING"
    log_file: Path | None = None

    @property
    def resolved_log_file(self) -> Path:
        return self.log_file or config_dir() / "textprompt.log"

    def to_dict(self) -> dict:
        return {
            "prompt": {"control_keys": self.control_keys.value},
            "logging": {
                "level": self.log_level,
                "file": str(self.resolved_log_file),
            },
        }


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists."""
    path = path or settings_path()
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read settings from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    prompt = data.get("prompt") or {}
    log = data.get("logging") or {}
    if not isinstance(prompt, dict) or not isinstance(log, dict):
        raise ConfigError(f"Settings sections in {path} must be mappings")

    try:
        control_keys = ControlKeys(prompt.get("control_keys", ControlKeys.APPEND.value))
    except ValueError as e:
        choices = ", ".join(c.value for c in ControlKeys)
        raise ConfigError(f"Invalid prompt.control_keys in {path} (expected {choices})") from e

    level = str(log.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid logging.level in {path}: {level}")

    log_file = log.get("file")
    return Settings(
        control_keys=control_keys,
        log_level=level,
        log_file=Path(log_file).expanduser() if log_file else None,
    )


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Write settings as YAML, creating the config directory if needed."""
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)
    logger.info("Settings saved to %s", path)
    return path
