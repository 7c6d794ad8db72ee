"""Keystroke click feedback.

The audio device is opened lazily, on the first user interaction, and
the click buffer is synthesized exactly once at that point. Playback is
fire-and-forget and gated by ``Session.sound_enabled``. If the device
cannot be opened the synthesizer stays silent for the rest of the
session; the keystroke path never sees an audio error.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import numpy as np

from termfolio.audio.base import AudioBackend, AudioUnavailableError, NullAudioBackend
from termfolio.audio.synth import CLICK_DURATION, synthesize_click, synthesize_tone
from termfolio.interpreter.session import Session

logger = logging.getLogger(__name__)


class KeystrokeFeedback:
    """Plays one identical click per printable keystroke."""

    def __init__(
        self,
        session: Session,
        backend: AudioBackend | None = None,
        volume: float = 0.07,
        sample_rate: int = 44100,
        click_duration: float = CLICK_DURATION,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._session = session
        self._backend = backend if backend is not None else NullAudioBackend()
        self._volume = volume
        self._sample_rate = sample_rate
        self._click_duration = click_duration
        self._rng = rng if rng is not None else np.random.default_rng()
        self._handle: Any = None
        self._uses_fallback = False
        self._start_task: asyncio.Task[None] | None = None
        self._started = False

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_available(self) -> bool:
        """True once a playable click exists."""
        return self._handle is not None

    @property
    def uses_fallback(self) -> bool:
        """True when the click is the tone envelope rather than the sample."""
        return self._uses_fallback

    def start_soon(self) -> None:
        """Schedule ``start()`` on the running loop without waiting for it."""
        if self._start_task is not None or self._started:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, keystroke sounds stay off for now")
            return
        self._start_task = loop.create_task(self.start(), name="keystroke-audio-start")
        self._start_task.add_done_callback(self._on_start_done)

    def _on_start_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.warning("Keystroke audio setup failed, sounds disabled: %s", error)

    async def wait_ready(self) -> None:
        """Wait for a scheduled ``start()`` to finish."""
        if self._start_task is not None:
            await self._start_task

    async def start(self) -> None:
        """Open the audio device and build the click. Runs at most once."""
        if self._started:
            return
        self._started = True

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._backend.open, self._sample_rate)
        except AudioUnavailableError as e:
            logger.info("Keystroke sounds unavailable: %s", e)
            return

        self._handle = self._build_click()

    def play_click(self) -> None:
        """Trigger one click; a no-op when muted or unavailable."""
        if not self._session.sound_enabled or self._handle is None:
            return
        try:
            self._backend.play(self._handle)
        except Exception:
            logger.debug("Click playback failed", exc_info=True)

    def close(self) -> None:
        self._handle = None
        self._backend.close()

    def _build_click(self) -> Any:
        try:
            samples = synthesize_click(self._sample_rate, self._click_duration, self._rng)
            return self._backend.load(samples * self._volume)
        except Exception as e:
            logger.info("Click sample unavailable (%s), using tone fallback", e)

        self._uses_fallback = True
        try:
            return self._backend.load(synthesize_tone(self._sample_rate, self._rng) * self._volume)
        except Exception as e:
            logger.info("Tone fallback unavailable (%s), keystrokes will be silent", e)
            return None
