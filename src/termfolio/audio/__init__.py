"""Keystroke feedback audio for termfolio.

Public API:
    AudioBackend -- Abstract base class
    NullAudioBackend -- Silent backend
    PygameAudioBackend -- pygame.mixer backend
    KeystrokeFeedback -- Lazily initialised, flag-gated click player
"""

from termfolio.audio.base import AudioBackend, AudioUnavailableError, NullAudioBackend
from termfolio.audio.feedback import KeystrokeFeedback
from termfolio.audio.synth import synthesize_click, synthesize_tone

__all__ = [
    "AudioBackend",
    "AudioUnavailableError",
    "KeystrokeFeedback",
    "NullAudioBackend",
    "PygameAudioBackend",
    "synthesize_click",
    "synthesize_tone",
]


def __getattr__(name: str) -> type:
    """Lazy import for the backend that wraps an optional device library."""
    if name == "PygameAudioBackend":
        from termfolio.audio.pygame_backend import PygameAudioBackend
        return PygameAudioBackend
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
