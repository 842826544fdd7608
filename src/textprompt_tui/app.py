"""Prompt application - hosts one prompt line in a Textual event loop.

The app is the host the prompt state machine expects: it delivers key
events in order, redraws after each one, and quits its loop when the
prompt reports it has finished. Whether the prompt was confirmed or
cancelled is decided here, not by the prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding

from .keys import classify
from .prompt import ControlKeys, KeyEvent, TextInputPrompt, create
from .widgets.prompt_line import PromptLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptResult:
    """Final value of a prompt and how it ended."""

    value: str
    confirmed: bool

    @property
    def cancelled(self) -> bool:
        return not self.confirmed


class PromptApp(App[PromptResult]):
    """Minimal app running a single prompt line.

    Runs inline by default so the prompt sits on the current terminal
    line and disappears once answered.
    """

    CSS = """
    Screen {
        height: auto;
    }
    """

    # ctrl+p would open the palette and swallow the next Enter
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        # Interrupt must reach the prompt even if the app would quit on it
        Binding("ctrl+c", "interrupt", "Cancel", show=False, priority=True),
        # Shadows the built-in quit so the key reaches the prompt as text
        Binding("ctrl+q", "forward_key('ctrl+q')", show=False, priority=True),
    ]

    def __init__(
        self,
        label: str,
        default: Any = None,
        *,
        control_keys: ControlKeys = ControlKeys.APPEND,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._initial = create(label, default, control_keys=control_keys)
        self._prompt_line: PromptLine | None = None

    @property
    def prompt(self) -> TextInputPrompt:
        """Latest prompt state."""
        if self._prompt_line is None:
            return self._initial
        return self._prompt_line.prompt

    def compose(self) -> ComposeResult:
        self._prompt_line = PromptLine(self._initial, id="prompt-line")
        yield self._prompt_line

    def on_mount(self) -> None:
        self.query_one("#prompt-line", PromptLine).focus()
        logger.info("Prompt started: %r", self.prompt.label)

    def action_interrupt(self) -> None:
        """Treat an interrupt as a cancel key."""
        self.query_one("#prompt-line", PromptLine).feed(KeyEvent.cancel())

    def action_forward_key(self, key: str) -> None:
        """Deliver a key claimed by an app binding to the prompt."""
        self.query_one("#prompt-line", PromptLine).feed(classify(key))

    def on_prompt_line_finished(self, message: PromptLine.Finished) -> None:
        self.exit(PromptResult(message.value, message.confirmed))


def ask(
    label: str,
    default: Any = None,
    *,
    control_keys: ControlKeys = ControlKeys.APPEND,
    inline: bool = True,
) -> PromptResult:
    """Run a prompt to completion and return its result.

    Args:
        label: Prompt label shown before the input
        default: Value used when the user confirms an empty input
        control_keys: Whether keys without a printable character are appended
        inline: Run inline under the cursor instead of full screen

    Returns:
        PromptResult; a prompt closed without an answer counts as cancelled.
    """
    app = PromptApp(label, default, control_keys=control_keys)
    result = app.run(inline=inline)
    if result is None:
        # App closed some other way (e.g. terminal closed)
        return PromptResult(app.prompt.buffer, confirmed=False)
    return result
