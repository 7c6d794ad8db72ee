"""Submitted-line history with Up/Down recall.

The log is append-only for the lifetime of a session. A cursor in
``[0, len]`` walks it; ``len`` stands for "past the newest entry", the
live (empty) edit buffer.
"""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)


class HistoryDirection(str, enum.Enum):
    UP = "up"  # Toward older entries
    DOWN = "down"  # Toward the live buffer


class HistoryNavigator:
    """Append-only history log plus a recall cursor."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def record(self, line: str) -> None:
        """Append a submitted line and park the cursor past the newest entry.

        Blank lines are not recorded. Duplicates are.
        """
        if not line.strip():
            return
        self._entries.append(line)
        self._cursor = len(self._entries)

    def navigate(self, direction: HistoryDirection) -> str | None:
        """Move the cursor one step and return the text for the edit buffer.

        Returns:
            The entry at the new cursor, ``""`` when the cursor is back at
            the live buffer, or None when there is no history at all (the
            caller should leave the buffer alone).
        """
        if not self._entries:
            return None

        if direction == HistoryDirection.UP:
            self._cursor = max(0, self._cursor - 1)
        else:
            self._cursor = min(len(self._entries), self._cursor + 1)

        logger.debug("History cursor at %d/%d", self._cursor, len(self._entries))
        if self._cursor == len(self._entries):
            return ""
        return self._entries[self._cursor]
