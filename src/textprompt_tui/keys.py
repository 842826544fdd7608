"""Map terminal key presses onto prompt key events."""

from __future__ import annotations

from .prompt import KeyEvent

CONFIRM_KEYS = frozenset({"enter"})
CANCEL_KEYS = frozenset({"escape", "ctrl+c"})
DELETE_BACKWARD_KEYS = frozenset({"backspace", "ctrl+h"})


def classify(key: str, character: str | None = None) -> KeyEvent:
    """Classify a Textual key name (and its character, if any).

    Args:
        key: Textual key name, e.g. "enter", "a", "space", "up"
        character: The printable character for the key, or None

    Returns:
        A KeyEvent. Unrecognised keys become text events carrying the
        character when printable, otherwise the key name.
    """
    if key in CONFIRM_KEYS:
        return KeyEvent.confirm()
    if key in CANCEL_KEYS:
        return KeyEvent.cancel()
    if key in DELETE_BACKWARD_KEYS:
        return KeyEvent.delete_backward()
    if character and character.isprintable():
        return KeyEvent.typed(character)
    return KeyEvent.typed(key, printable=False)


def paste(text: str) -> KeyEvent:
    """Pasted text is appended as-is, whatever it contains."""
    return KeyEvent.typed(text)
