"""The append-only output log shared by every front-end.

Lines are only ever appended, rewritten in place while an animation
reveals them, or cleared all at once by the ``clear`` command. Every
change is announced to subscribers so front-ends can redraw; the view is
always anchored to the bottom, so each append or update doubles as a
scroll-to-end request.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from termfolio.render.models import OutputLine

logger = logging.getLogger(__name__)


class LogEventKind(str, enum.Enum):
    APPEND = "append"
    UPDATE = "update"
    CLEAR = "clear"


class LogEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: LogEventKind
    index: int = -1
    line: OutputLine | None = None


LogListener = Callable[[LogEvent], None]


class OutputLog:
    """Ordered output lines with change notifications."""

    def __init__(self) -> None:
        self._lines: list[OutputLine] = []
        self._listeners: list[LogListener] = []

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[OutputLine, ...]:
        return tuple(self._lines)

    def subscribe(self, listener: LogListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def append(self, line: OutputLine) -> int:
        """Append a line and return its index."""
        self._lines.append(line)
        index = len(self._lines) - 1
        self._emit(LogEvent(kind=LogEventKind.APPEND, index=index, line=line))
        return index

    def update_last(self, line: OutputLine) -> None:
        """Replace the most recent line (used while revealing an animation)."""
        if not self._lines:
            raise IndexError("update_last() on an empty output log")
        index = len(self._lines) - 1
        self._lines[index] = line
        self._emit(LogEvent(kind=LogEventKind.UPDATE, index=index, line=line))

    def clear(self) -> None:
        self._lines.clear()
        self._emit(LogEvent(kind=LogEventKind.CLEAR))

    def tail(self, rows: int) -> list[OutputLine]:
        """The last ``rows`` lines: what a bottom-anchored view shows."""
        if rows <= 0:
            return []
        return self._lines[-rows:]

    def plain_text(self) -> str:
        return "\n".join(line.display_text for line in self._lines)

    def _emit(self, event: LogEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Output log listener failed on %s", event.kind.value)
