"""Abstract base class for audio output.

Keystroke feedback only needs three things from an audio device: open
it, turn a sample buffer into something playable, and fire that off
without waiting. Backends translate those into their library's calls,
so the feedback logic can run against pygame, or against nothing at all.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class AudioBackend(ABC):
    """Abstract interface for fire-and-forget sample playback."""

    @abstractmethod
    def open(self, sample_rate: int) -> None:
        """Acquire the audio device.

        Raises:
            AudioUnavailableError: If the environment has no usable audio
                output (no device, no driver, headless session).
        """
        ...

    @abstractmethod
    def load(self, samples: np.ndarray) -> Any:
        """Prepare a mono float buffer in ``[-1, 1]`` for repeated playback.

        Returns:
            An opaque handle accepted by ``play()``.
        """
        ...

    @abstractmethod
    def play(self, handle: Any) -> None:
        """Start playback and return immediately."""
        ...

    def close(self) -> None:
        """Release the audio device. Safe to call more than once."""


class NullAudioBackend(AudioBackend):
    """Silent backend for headless hosts and tests."""

    def __init__(self) -> None:
        self.played = 0

    def open(self, sample_rate: int) -> None:
        logger.debug("Null audio backend opened at %d Hz", sample_rate)

    def load(self, samples: np.ndarray) -> np.ndarray:
        return samples

    def play(self, handle: Any) -> None:
        self.played += 1


class AudioUnavailableError(Exception):
    """Raised when no audio output can be constructed."""

    def __init__(self, message: str, backend: str = "") -> None:
        super().__init__(message)
        self.backend = backend
