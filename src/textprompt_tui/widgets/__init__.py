"""Custom widgets for the text prompt TUI."""

from .prompt_line import PromptLine

__all__ = ["PromptLine"]
