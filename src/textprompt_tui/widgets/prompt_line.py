"""Prompt line widget hosting a TextInputPrompt."""

from __future__ import annotations

import logging

from textual import events
from textual.content import Content
from textual.message import Message
from textual.widgets import Static

from ..keys import classify, paste
from ..prompt import Command, KeyEvent, KeyKind, TextInputPrompt

logger = logging.getLogger(__name__)


class PromptLine(Static, can_focus=True):
    """Single-line prompt: label, default hint and typed text.

    Name (default: World): Bob

    Every key goes through the prompt state machine; the widget only
    redraws and reports completion.
    """

    DEFAULT_CSS = """
    PromptLine {
        height: auto;
        min-height: 1;
        width: 100%;
    }
    """

    class Finished(Message):
        """Posted once when the prompt is confirmed or cancelled."""

        def __init__(self, value: str, confirmed: bool) -> None:
            super().__init__()
            self.value = value
            self.confirmed = confirmed

    def __init__(self, prompt: TextInputPrompt, **kwargs) -> None:
        super().__init__(**kwargs)
        self._prompt = prompt

    @property
    def prompt(self) -> TextInputPrompt:
        """Current prompt state."""
        return self._prompt

    def render(self) -> Content:
        # Plain content: labels and typed text may contain markup brackets
        return Content(self._prompt.render())

    def feed(self, event: KeyEvent) -> None:
        """Apply a key event and report completion to the host."""
        self._prompt, command = self._prompt.handle(event)
        self.refresh()
        if command is Command.TERMINATE:
            confirmed = event.kind is KeyKind.CONFIRM
            logger.info("Prompt finished (confirmed=%s)", confirmed)
            self.post_message(self.Finished(self._prompt.buffer, confirmed))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.feed(classify(event.key, event.character))

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self.feed(paste(event.text))
