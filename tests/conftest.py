"""Shared test fixtures for the termfolio test suite.

Provides common fixtures used across the unit tests: a small portfolio,
a session with a zero-delay renderer, a fixed clock, and an interactive
terminal wired to a silent audio backend.
"""

from __future__ import annotations

import logging
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from termfolio.audio.base import NullAudioBackend
from termfolio.config.settings import SoundConfig, TerminalConfig
from termfolio.content.models import (
    About,
    Education,
    Experience,
    Involvement,
    Portfolio,
    Project,
)
from termfolio.content.store import ContentStore
from termfolio.endpoint.terminal import InteractiveTerminal
from termfolio.interpreter.base import CommandContext
from termfolio.interpreter.commands import build_command_table
from termfolio.interpreter.dispatcher import CommandDispatcher
from termfolio.interpreter.session import Session
from termfolio.render.scheduler import LineRenderer

FIXED_NOW = datetime(2025, 3, 7, 9, 5)


@pytest.fixture(autouse=True)
def _restore_termfolio_logger():
    """Undo handler and propagation changes made by setup_logging()."""
    logger = logging.getLogger("termfolio")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


# ---------------------------------------------------------------------------
# Content Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_portfolio() -> Portfolio:
    """A portfolio with two projects and one record of everything else."""
    return Portfolio(
        projects=[
            Project(
                id="project1",
                title="Terminal Portfolio",
                description="x" * 20,
                repo="https://github.com/example/terminal-portfolio",
                demo="https://youtu.be/demo1",
            ),
            Project(
                id="Project2",
                title="CLI-Notes",
                description="y" * 50,
                repo="https://github.com/example/cli-notes",
                demo="[DEMO PENDING]",
            ),
        ],
        experiences=[
            Experience(
                company="Acme Corp",
                title="Engineer",
                period="2022 - Present",
                bullets=["Built things", "Fixed things"],
            ),
        ],
        involvement=[
            Involvement(org="Meetup", role="Speaker", details="Gave talks."),
            Involvement(org="Stream", role="Host", details="Streams.", url="https://example.com/live"),
        ],
        education=[
            Education(school="State University", degree="B.S.", period="2015 - 2019"),
            Education(school="High School", degree="Diploma", period="2011 - 2015", notes="Robotics club"),
        ],
        about=About(summary="Hi there.", skills=["Python", "Go"], location="Austin, TX"),
    )


@pytest.fixture
def content(sample_portfolio: Portfolio) -> ContentStore:
    return ContentStore(sample_portfolio)


# ---------------------------------------------------------------------------
# Interpreter Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def terminal_config() -> TerminalConfig:
    return TerminalConfig(prompt_text="guest@test:~$", typing_delay=0.0, owner="guest", group="staff")


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def renderer(session: Session) -> LineRenderer:
    """A renderer that reveals animations without real delays."""
    return LineRenderer(session.output, typing_delay=0.0)


@pytest.fixture
def command_context(
    session: Session, content: ContentStore, terminal_config: TerminalConfig
) -> CommandContext:
    return CommandContext(
        session=session,
        content=content,
        table=build_command_table(),
        config=terminal_config,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def dispatcher(command_context: CommandContext, renderer: LineRenderer) -> CommandDispatcher:
    return CommandDispatcher(command_context, renderer)


# ---------------------------------------------------------------------------
# Terminal Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def audio_backend() -> NullAudioBackend:
    return NullAudioBackend()


@pytest.fixture
def terminal(
    terminal_config: TerminalConfig, content: ContentStore, audio_backend: NullAudioBackend
) -> InteractiveTerminal:
    """An interactive terminal with zero typing delay and silent audio."""
    return InteractiveTerminal(
        config=terminal_config,
        sound=SoundConfig(backend="null"),
        content=content,
        audio_backend=audio_backend,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def mock_audio_backend() -> MagicMock:
    """A mock AudioBackend whose load() returns a sentinel handle."""
    mock = MagicMock()
    mock.load.return_value = "click-handle"
    return mock
