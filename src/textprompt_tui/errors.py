"""Error types for the text prompt TUI.

The prompt state machine itself never raises; these cover the layers
around it (settings, variable files, the host loop).
"""


class TextPromptError(Exception):
    """Base class for all textprompt-tui errors."""


class ConfigError(TextPromptError):
    """Raised when the settings file cannot be read or holds invalid values."""


class VariableFileError(TextPromptError):
    """Raised when a variable file is missing, unsupported or malformed."""


class PromptCancelled(TextPromptError):
    """Raised when the user cancels a prompt whose value was required."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Prompt cancelled: {label}")
        self.label = label
