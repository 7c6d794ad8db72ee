"""Tests for the output log."""

from __future__ import annotations

import pytest

from termfolio.render.models import OutputLine
from termfolio.render.output import LogEvent, LogEventKind, OutputLog


class TestOutputLog:
    def test_append_returns_index(self) -> None:
        log = OutputLog()
        assert log.append(OutputLine(text="a")) == 0
        assert log.append(OutputLine(text="b")) == 1
        assert len(log) == 2

    def test_update_last(self) -> None:
        log = OutputLog()
        log.append(OutputLine(text="a"))
        log.append(OutputLine(text="b"))
        log.update_last(OutputLine(text="bb"))
        assert log.plain_text() == "a\nbb"

    def test_update_last_on_empty_log(self) -> None:
        with pytest.raises(IndexError):
            OutputLog().update_last(OutputLine(text="x"))

    def test_clear(self) -> None:
        log = OutputLog()
        log.append(OutputLine(text="a"))
        log.clear()
        assert log.lines == ()

    def test_tail(self) -> None:
        log = OutputLog()
        for ch in "abcd":
            log.append(OutputLine(text=ch))
        assert [entry.text for entry in log.tail(2)] == ["c", "d"]
        assert len(log.tail(10)) == 4
        assert log.tail(0) == []

    def test_listeners_receive_events(self) -> None:
        log = OutputLog()
        events: list[LogEvent] = []
        unsubscribe = log.subscribe(events.append)

        log.append(OutputLine(text="a"))
        log.update_last(OutputLine(text="ab"))
        log.clear()
        unsubscribe()
        log.append(OutputLine(text="ignored"))

        assert [e.kind for e in events] == [
            LogEventKind.APPEND, LogEventKind.UPDATE, LogEventKind.CLEAR,
        ]
        assert events[1].index == 0
        assert events[1].line is not None and events[1].line.text == "ab"

    def test_failing_listener_does_not_break_log(self) -> None:
        log = OutputLog()
        seen: list[LogEvent] = []

        def broken(event: LogEvent) -> None:
            raise RuntimeError("listener down")

        log.subscribe(broken)
        log.subscribe(seen.append)
        log.append(OutputLine(text="a"))
        assert len(log) == 1
        assert len(seen) == 1
