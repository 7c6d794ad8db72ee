"""Per-terminal mutable state.

Everything a running terminal mutates lives on one ``Session`` owned by
the hosting front-end and handed by reference to the components that
need it: the output log, the history log and its cursor, the live edit
buffer, and the sound flag.
"""

from __future__ import annotations

from termfolio.interpreter.history import HistoryNavigator
from termfolio.render.output import OutputLog


class Session:
    """State of one interactive terminal."""

    def __init__(
        self,
        output: OutputLog | None = None,
        history: HistoryNavigator | None = None,
        sound_enabled: bool = True,
    ) -> None:
        self.output = output if output is not None else OutputLog()
        self.history = history if history is not None else HistoryNavigator()
        self.sound_enabled = sound_enabled
        self.buffer = ""
