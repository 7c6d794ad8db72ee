"""pygame.mixer audio backend.

pygame is imported lazily in ``open()`` so that hosts without it (or
without an audio device) can still run the interpreter silently.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from termfolio.audio.base import AudioBackend, AudioUnavailableError

logger = logging.getLogger(__name__)


class PygameAudioBackend(AudioBackend):
    """Plays buffers through ``pygame.mixer`` on free mixer channels."""

    def __init__(self) -> None:
        self._pygame: Any = None
        self._channels = 1

    @property
    def is_open(self) -> bool:
        return self._pygame is not None

    def open(self, sample_rate: int) -> None:
        try:
            import pygame

            pygame.mixer.init(frequency=sample_rate, size=-16, channels=1)
            init = pygame.mixer.get_init()
        except Exception as e:
            raise AudioUnavailableError(f"Cannot open audio output: {e}", backend="pygame") from e

        if init is None:
            raise AudioUnavailableError("pygame.mixer did not initialise", backend="pygame")

        self._pygame = pygame
        self._channels = init[2]
        logger.info("Audio opened (%d Hz, %d channel(s))", init[0], self._channels)

    def load(self, samples: np.ndarray) -> Any:
        if self._pygame is None:
            raise AudioUnavailableError("Audio output is not open", backend="pygame")
        pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
        if self._channels > 1:
            pcm = np.repeat(pcm[:, np.newaxis], self._channels, axis=1)
        return self._pygame.sndarray.make_sound(np.ascontiguousarray(pcm))

    def play(self, handle: Any) -> None:
        handle.play()

    def close(self) -> None:
        if self._pygame is not None:
            self._pygame.mixer.quit()
            self._pygame = None
            logger.info("Audio closed")
