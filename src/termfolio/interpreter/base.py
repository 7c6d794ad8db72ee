"""Command table building blocks and the interpreter's error taxonomy.

A command is a ``CommandSpec``: a name, a handler that turns the
argument string into render actions, help text, and a rule telling the
completion resolver what the command's argument can be.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from termfolio.config.settings import TerminalConfig
from termfolio.content.store import ContentStore
from termfolio.interpreter.session import Session
from termfolio.render.models import RenderAction

RenderActions = list[RenderAction]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Base class for errors a handler reports as a single output line."""

    def __init__(self, message: str, command: str = "") -> None:
        super().__init__(message)
        self.command = command


class UsageError(CommandError):
    """Missing or malformed argument."""


class NotFoundError(CommandError):
    """Unknown command or unknown record id."""


# ---------------------------------------------------------------------------
# Command specs
# ---------------------------------------------------------------------------


class CompletionSource(str, enum.Enum):
    """Where argument completions for a command come from."""

    NONE = "none"
    LITERALS = "literals"  # A fixed set, e.g. on/off
    PROJECT_IDS = "project_ids"  # Project ids from the content store


class CommandContext:
    """What a handler is allowed to read and mutate."""

    def __init__(
        self,
        session: Session,
        content: ContentStore,
        table: CommandTable,
        config: TerminalConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.session = session
        self.content = content
        self.table = table
        self.config = config if config is not None else TerminalConfig()
        self.clock = clock


Handler = Callable[[CommandContext, str], RenderActions]


class CommandSpec(BaseModel):
    """One entry of the command table."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1, description="Lower-case command name")
    handler: Handler
    usage: str = Field(description="Left column of the help listing")
    summary: str = Field(description="Right column of the help listing")
    completion: CompletionSource = CompletionSource.NONE
    literals: tuple[str, ...] = Field(default=(), description="Candidates for LITERALS completion")


class CommandTable:
    """Immutable name -> CommandSpec mapping, iterated in definition order."""

    def __init__(self, specs: list[CommandSpec]) -> None:
        commands: dict[str, CommandSpec] = {}
        for spec in specs:
            if spec.name in commands:
                raise ValueError(f"Duplicate command name: {spec.name}")
            commands[spec.name] = spec
        self._commands = commands

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return list(self._commands)
