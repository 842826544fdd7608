"""Single-line text input prompt state machine.

The prompt shows a label, collects keystrokes into a buffer and finishes
when the user confirms or cancels. It performs no I/O: a host event loop
feeds it ``KeyEvent`` values one at a time, redraws ``render()`` after
each one, and stops when ``handle()`` returns ``Command.TERMINATE``.

Usage:
    prompt = create("Name", "World")
    prompt, command = prompt.handle(KeyEvent.confirm())
    assert prompt.buffer == "World"
    assert command is Command.TERMINATE
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class KeyKind(Enum):
    """Event classes the prompt understands."""

    CONFIRM = "confirm"  # Enter
    CANCEL = "cancel"  # Esc / interrupt
    DELETE_BACKWARD = "delete_backward"  # Backspace
    TEXT = "text"  # Anything else, appended literally


class Command(Enum):
    """Commands the prompt hands back to its host loop."""

    TERMINATE = "terminate"


class ControlKeys(str, Enum):
    """What to do with keys that carry no printable character."""

    APPEND = "append"  # Append the key's name (e.g. "tab", "up")
    IGNORE = "ignore"  # Drop the key


@dataclass(frozen=True)
class KeyEvent:
    """A single key event delivered to the prompt.

    ``text`` is the literal text for TEXT events. ``printable`` is False for
    named keys (arrows, tab, function keys) whose text is only their name.
    """

    kind: KeyKind
    text: str = ""
    printable: bool = True

    @classmethod
    def confirm(cls) -> KeyEvent:
        return cls(KeyKind.CONFIRM)

    @classmethod
    def cancel(cls) -> KeyEvent:
        return cls(KeyKind.CANCEL)

    @classmethod
    def delete_backward(cls) -> KeyEvent:
        return cls(KeyKind.DELETE_BACKWARD)

    @classmethod
    def typed(cls, text: str, printable: bool = True) -> KeyEvent:
        return cls(KeyKind.TEXT, text, printable)


def stringify(value: Any) -> str:
    """Render a default value as display text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class TextInputPrompt:
    """Immutable prompt state.

    ``prefilled`` marks a buffer that still holds the untouched default;
    the first typed text replaces it rather than extending it.
    """

    label: str
    buffer: str = ""
    default: Any = None
    finished: bool = False
    prefilled: bool = False
    control_keys: ControlKeys = ControlKeys.APPEND

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def default_text(self) -> str:
        return stringify(self.default)

    def handle(self, event: KeyEvent) -> tuple[TextInputPrompt, Command | None]:
        """Apply one key event, returning the next state and an optional command."""
        if self.finished:
            return self, None

        if event.kind is KeyKind.CONFIRM:
            buffer = self.buffer
            if not buffer and self.has_default:
                buffer = self.default_text
            logger.debug("Prompt %r confirmed with %r", self.label, buffer)
            return replace(self, buffer=buffer, finished=True, prefilled=False), Command.TERMINATE

        if event.kind is KeyKind.CANCEL:
            logger.debug("Prompt %r cancelled", self.label)
            return replace(self, finished=True), Command.TERMINATE

        if event.kind is KeyKind.DELETE_BACKWARD:
            if not self.buffer:
                return self, None
            return replace(self, buffer=self.buffer[:-1], prefilled=False), None

        if not event.text:
            return self, None
        if not event.printable and self.control_keys is ControlKeys.IGNORE:
            return self, None
        base = "" if self.prefilled else self.buffer
        return replace(self, buffer=base + event.text, prefilled=False), None

    def render(self) -> str:
        """Render the prompt line; empty once finished."""
        if self.finished:
            return ""
        hint = ""
        if self.has_default and self.default_text:
            hint = f" (default: {self.default_text})"
        return f"{self.label}{hint}: {self.buffer}"


def create(
    label: str,
    default: Any = None,
    *,
    control_keys: ControlKeys = ControlKeys.APPEND,
) -> TextInputPrompt:
    """Create a prompt whose buffer starts as the stringified default."""
    buffer = stringify(default)
    return TextInputPrompt(
        label=label,
        buffer=buffer,
        default=default,
        prefilled=bool(buffer),
        control_keys=ControlKeys(control_keys),
    )
