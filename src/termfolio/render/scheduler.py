"""Rendering scheduler for the output log.

Immediate lines are applied synchronously when nothing is in flight.
Animated lines take wall-clock time, so while one is revealing, every
later action (immediate, animated or clear) waits in a FIFO behind it.
A single worker task drains that FIFO, which keeps output in issuance
order no matter how long an animation runs.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from collections import deque

from termfolio.render.models import AnimatedLine, ClearScreen, OutputLine, RenderAction
from termfolio.render.output import OutputLog

logger = logging.getLogger(__name__)

DEFAULT_TYPING_DELAY = 0.018


class RendererState(str, enum.Enum):
    IDLE = "idle"
    ANIMATING = "animating"


class LineRenderer:
    """Applies render actions to an ``OutputLog`` in issuance order.

    Only one animation runs at a time and it always runs to completion;
    there is no cancellation and no timeout.

    Example usage::

        renderer = LineRenderer(OutputLog())
        renderer.submit(AnimatedLine(text="Welcome"))
        renderer.submit(ImmediateLine(text="shown after the full reveal"))
        await renderer.wait_idle()
    """

    def __init__(self, output: OutputLog, typing_delay: float = DEFAULT_TYPING_DELAY) -> None:
        self._output = output
        self._typing_delay = typing_delay
        self._state = RendererState.IDLE
        self._pending: deque[tuple[RenderAction, asyncio.Future[None] | None]] = deque()
        self._worker: asyncio.Task[None] | None = None

    @property
    def output(self) -> OutputLog:
        return self._output

    @property
    def state(self) -> RendererState:
        return self._state

    @property
    def is_busy(self) -> bool:
        """True while an animation is revealing or actions are queued behind one."""
        return self._worker is not None

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit(self, action: RenderAction, done: asyncio.Future[None] | None = None) -> None:
        """Schedule one action.

        Args:
            action: The render action to apply.
            done: Optional future resolved once the action has been
                  fully applied (for animations: after the last
                  character is revealed).
        """
        if self._worker is None and not isinstance(action, AnimatedLine):
            self._apply(action)
            if done is not None and not done.done():
                done.set_result(None)
            return

        self._pending.append((action, done))
        if self._worker is None:
            self._worker = asyncio.get_running_loop().create_task(
                self._drain(), name="line-renderer"
            )

    def submit_all(self, actions: list[RenderAction]) -> None:
        for action in actions:
            self.submit(action)

    async def render(self, action: RenderAction) -> None:
        """Submit an action and wait until it has been applied."""
        done: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self.submit(action, done)
        await done

    async def wait_idle(self) -> None:
        """Wait until every submitted action has been applied."""
        while self._worker is not None:
            await asyncio.shield(self._worker)

    async def _drain(self) -> None:
        try:
            while self._pending:
                action, done = self._pending.popleft()
                if isinstance(action, AnimatedLine):
                    await self._animate(action)
                else:
                    self._apply(action)
                if done is not None and not done.done():
                    done.set_result(None)
        finally:
            self._state = RendererState.IDLE
            self._worker = None
            # Only reached with work left over when the task is cancelled at shutdown.
            while self._pending:
                _, done = self._pending.popleft()
                if done is not None and not done.done():
                    done.cancel()

    async def _animate(self, action: AnimatedLine) -> None:
        delay = self._typing_delay if action.per_character_delay is None else action.per_character_delay
        text = action.text
        self._state = RendererState.ANIMATING
        logger.debug("Animating %d characters at %.3fs", len(text), delay)

        self._output.append(OutputLine(text="", style=action.style))
        await asyncio.sleep(delay)
        for i in range(1, len(text) + 1):
            self._output.update_last(OutputLine(text=text[:i], style=action.style))
            await asyncio.sleep(delay)

        self._state = RendererState.IDLE

    def _apply(self, action: RenderAction) -> None:
        if isinstance(action, ClearScreen):
            self._output.clear()
        else:
            self._output.append(action.to_line())
