"""Tests for the interactive terminal session."""

from __future__ import annotations

import pytest

from termfolio.audio.base import NullAudioBackend
from termfolio.config.settings import TerminalConfig
from termfolio.endpoint.terminal import TIP_TEXT, WELCOME_TEXT, InteractiveTerminal
from termfolio.render.models import RenderStyle


def _texts(terminal: InteractiveTerminal) -> list[str]:
    return [entry.display_text for entry in terminal.session.output.lines]


class TestIntro:
    @pytest.mark.asyncio
    async def test_intro_animates_then_blank_line(self, terminal: InteractiveTerminal) -> None:
        await terminal.start()
        await terminal.renderer.wait_idle()
        assert _texts(terminal) == [WELCOME_TEXT, TIP_TEXT, ""]
        assert terminal.session.output.lines[0].style == RenderStyle.SYSTEM

    @pytest.mark.asyncio
    async def test_output_during_intro_waits(self, terminal: InteractiveTerminal) -> None:
        await terminal.start()
        terminal.type_text("ls\n")
        await terminal.renderer.wait_idle()
        assert _texts(terminal)[:4] == [WELCOME_TEXT, TIP_TEXT, "", "guest@test:~$ ls"]
        await terminal.feedback.wait_ready()

    @pytest.mark.asyncio
    async def test_intro_disabled(self, terminal_config: TerminalConfig) -> None:
        terminal = InteractiveTerminal(config=terminal_config.model_copy(update={"intro_enabled": False}))
        await terminal.start()
        assert len(terminal.session.output) == 0


class TestKeyHandling:
    def test_keys_work_without_running_loop(self, terminal: InteractiveTerminal) -> None:
        assert terminal.handle_key("a") is True
        assert terminal.session.buffer == "a"
        assert terminal.feedback.is_started is False

    @pytest.mark.asyncio
    async def test_printable_keys_edit_buffer(
        self, terminal: InteractiveTerminal, audio_backend: NullAudioBackend
    ) -> None:
        terminal.handle_key("l")
        await terminal.feedback.wait_ready()
        terminal.handle_key("s")
        terminal.handle_key("x")
        terminal.handle_key("Backspace")
        assert terminal.session.buffer == "ls"
        assert terminal.prompt_line == "guest@test:~$ ls"
        assert audio_backend.played == 2

    @pytest.mark.asyncio
    async def test_muted_keys_still_edit_buffer(
        self, terminal: InteractiveTerminal, audio_backend: NullAudioBackend
    ) -> None:
        terminal.session.sound_enabled = False
        terminal.handle_key("a")
        await terminal.feedback.wait_ready()
        terminal.handle_key("b")
        assert terminal.session.buffer == "ab"
        assert audio_backend.played == 0

    @pytest.mark.asyncio
    async def test_unknown_key_ignored(self, terminal: InteractiveTerminal) -> None:
        assert terminal.handle_key("F5") is False
        assert terminal.handle_key("Escape") is True
        assert terminal.session.buffer == ""
        await terminal.feedback.wait_ready()

    @pytest.mark.asyncio
    async def test_enter_dispatches_and_records(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("  open project1  ")
        assert terminal.handle_key("Return") is True
        await terminal.renderer.wait_idle()

        assert terminal.session.buffer == ""
        assert terminal.session.history.entries == ("open project1",)
        assert _texts(terminal)[0] == "guest@test:~$ open project1"
        assert _texts(terminal)[1] == "Terminal Portfolio"
        await terminal.feedback.wait_ready()

    @pytest.mark.asyncio
    async def test_blank_enter_does_nothing(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("   \n")
        assert len(terminal.session.history) == 0
        assert len(terminal.session.output) == 0
        await terminal.feedback.wait_ready()


class TestCompletion:
    @pytest.mark.asyncio
    async def test_single_match_replaces_buffer(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("op")
        terminal.handle_key("Tab")
        assert terminal.session.buffer == "open "

        terminal.type_text("pro")
        terminal.handle_key("\t")
        assert terminal.session.buffer == "open project1 "
        await terminal.feedback.wait_ready()

    @pytest.mark.asyncio
    async def test_multiple_matches_listed(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("e")
        terminal.handle_key("Tab")
        assert terminal.session.buffer == "e"
        assert _texts(terminal) == ["experience   education"]
        assert terminal.session.output.lines[0].style == RenderStyle.SYSTEM
        await terminal.feedback.wait_ready()

    @pytest.mark.asyncio
    async def test_no_match_leaves_buffer(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("zz")
        terminal.handle_key("Tab")
        assert terminal.session.buffer == "zz"
        assert len(terminal.session.output) == 0
        await terminal.feedback.wait_ready()


class TestHistoryRecall:
    @pytest.mark.asyncio
    async def test_up_and_down(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("help\nls\n")
        terminal.handle_key("Up")
        assert terminal.session.buffer == "ls"
        terminal.handle_key("ArrowUp")
        assert terminal.session.buffer == "help"
        terminal.handle_key("Down")
        assert terminal.session.buffer == "ls"
        terminal.handle_key("Down")
        assert terminal.session.buffer == ""
        await terminal.feedback.wait_ready()

    @pytest.mark.asyncio
    async def test_up_without_history_keeps_buffer(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("ab")
        terminal.handle_key("Up")
        assert terminal.session.buffer == "ab"
        await terminal.feedback.wait_ready()


class TestScreenContent:
    @pytest.mark.asyncio
    async def test_bottom_anchored_view(self, terminal: InteractiveTerminal) -> None:
        terminal.type_text("ls\n")
        terminal.type_text("op")
        assert terminal.get_screen_content(rows=3) == (
            "project1  - Terminal Portfolio\n"
            "Project2  - CLI-Notes\n"
            "guest@test:~$ op"
        )
        await terminal.feedback.wait_ready()
