"""textprompt-tui - single-line text prompts for the terminal.

A small prompt state machine hosted in a Textual app.
"""

from .app import PromptApp, PromptResult, ask
from .prompt import Command, ControlKeys, KeyEvent, KeyKind, TextInputPrompt, create

__version__ = "0.1.0"
__all__ = [
    "Command",
    "ControlKeys",
    "KeyEvent",
    "KeyKind",
    "PromptApp",
    "PromptResult",
    "TextInputPrompt",
    "ask",
    "create",
]
