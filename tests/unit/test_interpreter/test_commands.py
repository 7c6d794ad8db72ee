"""Tests for the built-in command handlers."""

from __future__ import annotations

from datetime import datetime

import pytest

from termfolio.content.models import Contact, ContactLink, Portfolio
from termfolio.content.store import ContentStore
from termfolio.interpreter.base import CommandContext, NotFoundError, UsageError
from termfolio.interpreter.commands import (
    build_command_table,
    cmd_about,
    cmd_contact,
    cmd_education,
    cmd_experience,
    cmd_help,
    cmd_involvement,
    cmd_ls,
    cmd_open,
    cmd_resume,
    format_mtime,
    synthetic_size,
)
from termfolio.render.models import AnimatedLine, ClearScreen, ImmediateLine, RenderStyle


def _texts(actions: list) -> list[str]:
    return [a.label + a.text for a in actions]


class TestHelpers:
    def test_format_mtime_pads_day(self) -> None:
        assert format_mtime(datetime(2025, 3, 7, 9, 5)) == "Mar  7 09:05"
        assert format_mtime(datetime(2024, 12, 25, 23, 59)) == "Dec 25 23:59"

    def test_synthetic_size_has_floor(self) -> None:
        assert synthetic_size("") == 128
        assert synthetic_size("x" * 21) == 128
        assert synthetic_size("x" * 22) == 132


class TestLs:
    def test_simple_listing(self, command_context: CommandContext) -> None:
        assert _texts(cmd_ls(command_context, "")) == [
            "project1  - Terminal Portfolio",
            "Project2  - CLI-Notes",
        ]

    @pytest.mark.parametrize("flag", ["-al", "-la", "-a", "-l"])
    def test_detailed_listing(self, command_context: CommandContext, flag: str) -> None:
        actions = cmd_ls(command_context, flag)
        assert _texts(actions) == [
            "total 8",
            "-rw-r--r-- 1 guest staff    128 Mar  7 09:05 project1  - Terminal Portfolio",
            "-rw-r--r-- 1 guest staff    300 Mar  7 09:05 Project2  - CLI-Notes",
        ]
        assert actions[0].style == RenderStyle.SYSTEM

    def test_unrecognised_argument_uses_simple_listing(self, command_context: CommandContext) -> None:
        assert len(cmd_ls(command_context, "foo")) == 2


class TestOpen:
    def test_open_renders_four_lines(self, command_context: CommandContext) -> None:
        actions = cmd_open(command_context, "project2")
        assert [a.style for a in actions] == [
            RenderStyle.SYSTEM, RenderStyle.PLAIN, RenderStyle.LINK, RenderStyle.LINK,
        ]
        assert actions[2].label == "Repo: "
        assert actions[2].href == "https://github.com/example/cli-notes"
        assert actions[3].text == "[DEMO PENDING]"

    def test_missing_argument(self, command_context: CommandContext) -> None:
        with pytest.raises(UsageError):
            cmd_open(command_context, "")

    def test_unknown_id(self, command_context: CommandContext) -> None:
        with pytest.raises(NotFoundError, match="Project not found: nope"):
            cmd_open(command_context, "NOPE")


class TestInfoCommands:
    def test_help_lists_every_command(self, command_context: CommandContext) -> None:
        actions = cmd_help(command_context, "")
        assert actions[0].text == "Available commands:"
        assert len(actions) == 1 + len(build_command_table())
        assert actions[1].text == "  help           Show this help message"

    def test_about(self, command_context: CommandContext) -> None:
        actions = cmd_about(command_context, "")
        assert isinstance(actions[0], AnimatedLine)
        assert actions[0].text == "Hi there."
        assert _texts(actions[1:3]) == ["Skills: Python, Go", "Location: Austin, TX"]
        assert "help" in actions[-1].text

    def test_experience(self, command_context: CommandContext) -> None:
        assert _texts(cmd_experience(command_context, "")) == [
            "Work Experience:",
            "Acme Corp — Engineer (2022 - Present)",
            "  - Built things",
            "  - Fixed things",
        ]

    def test_involvement_shows_optional_link(self, command_context: CommandContext) -> None:
        actions = cmd_involvement(command_context, "")
        assert _texts(actions) == [
            "Involvement:",
            "Meetup — Speaker",
            "  Gave talks.",
            "Stream — Host",
            "  Streams.",
            "  Link: https://example.com/live",
        ]
        assert actions[-1].href == "https://example.com/live"

    def test_education_shows_optional_notes(self, command_context: CommandContext) -> None:
        assert _texts(cmd_education(command_context, "")) == [
            "Education:",
            "State University — B.S. (2015 - 2019)",
            "High School — Diploma (2011 - 2015)",
            "  Robotics club",
        ]

    def test_resume_is_experience_then_education(self, command_context: CommandContext) -> None:
        expected = cmd_experience(command_context, "") + cmd_education(command_context, "")
        assert cmd_resume(command_context, "") == expected

    def test_contact_empty(self, command_context: CommandContext) -> None:
        assert _texts(cmd_contact(command_context, "")) == ["Contact:"]

    def test_contact_links(self, command_context: CommandContext) -> None:
        command_context.content = ContentStore(Portfolio(contact=Contact(
            email="me@example.com",
            repo="https://github.com/example/site",
            links=[ContactLink(label="GitHub", url="https://github.com/example")],
        )))
        assert _texts(cmd_contact(command_context, "")) == [
            "Contact:",
            "Email: me@example.com",
            "GitHub: https://github.com/example",
            "Source: https://github.com/example/site",
        ]


class TestCommandTable:
    def test_table_order(self) -> None:
        assert build_command_table().names() == [
            "help", "ls", "open", "about", "clear", "sound",
            "experience", "involvement", "education", "resume", "contact",
        ]

    def test_clear_returns_clear_action(self, command_context: CommandContext) -> None:
        spec = build_command_table().get("clear")
        assert spec is not None
        assert spec.handler(command_context, "") == [ClearScreen()]

    def test_handlers_return_render_actions(self, command_context: CommandContext) -> None:
        for spec in build_command_table():
            arg = "project1" if spec.name == "open" else ("on" if spec.name == "sound" else "")
            for action in spec.handler(command_context, arg):
                assert isinstance(action, (ImmediateLine, AnimatedLine, ClearScreen))
