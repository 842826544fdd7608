"""Tests for the prompt application host loop."""

import pytest
from textual import events

from textprompt_tui.app import PromptApp, PromptResult, ask
from textprompt_tui.prompt import ControlKeys, KeyEvent
from textprompt_tui.widgets import PromptLine


@pytest.mark.asyncio
async def test_app_launches():
    """Test that the app composes and focuses the prompt line."""
    app = PromptApp("Name", "World")
    async with app.run_test():
        line = app.query_one("#prompt-line", PromptLine)
        assert line.has_focus
        assert line.prompt.render() == "Name (default: World): World"


@pytest.mark.asyncio
async def test_enter_uses_default():
    app = PromptApp("Name", "World")
    async with app.run_test() as pilot:
        await pilot.press("enter")
    assert app.return_value == PromptResult("World", confirmed=True)


@pytest.mark.asyncio
async def test_typed_text_replaces_default():
    app = PromptApp("Name", "World")
    async with app.run_test() as pilot:
        await pilot.press("b", "o", "b", "enter")
    assert app.return_value == PromptResult("bob", confirmed=True)


@pytest.mark.asyncio
async def test_backspace_edits_buffer():
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        await pilot.press("a", "b", "c", "backspace")
        line = app.query_one("#prompt-line", PromptLine)
        assert line.prompt.buffer == "ab"
        assert line.prompt.render() == "Name: ab"
        await pilot.press("enter")
    assert app.return_value == PromptResult("ab", confirmed=True)


@pytest.mark.asyncio
async def test_escape_cancels():
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        await pilot.press("h", "i", "escape")
    result = app.return_value
    assert result is not None
    assert result.cancelled
    assert result.value == "hi"
    assert app.prompt.finished is True


@pytest.mark.asyncio
async def test_ctrl_c_cancels():
    app = PromptApp("Name", "World")
    async with app.run_test() as pilot:
        await pilot.press("ctrl+c")
    assert app.return_value == PromptResult("World", confirmed=False)


@pytest.mark.asyncio
async def test_paste_appends_text():
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        line = app.query_one("#prompt-line", PromptLine)
        line.post_message(events.Paste("[pasted] text"))
        await pilot.pause()
        assert line.prompt.buffer == "[pasted] text"
        await pilot.press("enter")
    assert app.return_value == PromptResult("[pasted] text", confirmed=True)


@pytest.mark.asyncio
async def test_named_keys_ignored_when_configured():
    app = PromptApp("Name", control_keys=ControlKeys.IGNORE)
    async with app.run_test() as pilot:
        await pilot.press("up", "x", "enter")
    assert app.return_value == PromptResult("x", confirmed=True)


@pytest.mark.asyncio
async def test_named_keys_appended_by_default():
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        await pilot.press("x", "up", "enter")
    assert app.return_value == PromptResult("xup", confirmed=True)


@pytest.mark.asyncio
async def test_feed_after_finish_posts_nothing():
    """Once finished the widget ignores further keys."""
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        line = app.query_one("#prompt-line", PromptLine)
        await pilot.press("a")
        finished = []
        line.post_message = finished.append
        line.feed(KeyEvent.confirm())
        line.feed(KeyEvent.typed("b"))
        assert len(finished) == 1
        assert line.prompt.buffer == "a"
        assert line.render().plain == ""


@pytest.mark.asyncio
async def test_ctrl_p_reaches_prompt():
    """No command palette: ctrl+p is text and Enter still confirms."""
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        await pilot.press("x", "ctrl+p", "enter")
    assert app.return_value == PromptResult("xctrl+p", confirmed=True)
    assert app.prompt.finished is True


@pytest.mark.asyncio
async def test_ctrl_q_does_not_quit():
    app = PromptApp("Name")
    async with app.run_test() as pilot:
        await pilot.press("x", "ctrl+q")
        line = app.query_one("#prompt-line", PromptLine)
        assert line.prompt.buffer == "xctrl+q"
        assert line.prompt.finished is False
        await pilot.press("enter")
    assert app.return_value == PromptResult("xctrl+q", confirmed=True)


@pytest.mark.asyncio
async def test_ctrl_q_ignored_when_configured():
    app = PromptApp("Name", "World", control_keys=ControlKeys.IGNORE)
    async with app.run_test() as pilot:
        await pilot.press("ctrl+q", "enter")
    assert app.return_value == PromptResult("World", confirmed=True)


# =============================================================================
# ask
# =============================================================================


def test_ask_returns_app_result(monkeypatch):
    calls = []

    def fake_run(self, **kwargs):
        calls.append((self.prompt, kwargs))
        return PromptResult("Bob", confirmed=True)

    monkeypatch.setattr(PromptApp, "run", fake_run)
    result = ask("Name", "World", control_keys=ControlKeys.IGNORE, inline=False)
    assert result == PromptResult("Bob", confirmed=True)
    prompt, kwargs = calls[0]
    assert prompt.label == "Name"
    assert prompt.control_keys is ControlKeys.IGNORE
    assert kwargs == {"inline": False}


def test_ask_without_result_counts_as_cancelled(monkeypatch):
    """An app closed without a finished prompt reports the current buffer."""
    monkeypatch.setattr(PromptApp, "run", lambda self, **kwargs: None)
    result = ask("Name", "World")
    assert result == PromptResult("World", confirmed=False)
    assert result.cancelled
