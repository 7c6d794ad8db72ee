"""Procedural click synthesis.

A click is a low, slowly decaying sine ("body") mixed with a short burst
of noise ("transient") that dies away much faster. The body frequency
and the noise are drawn once, when the buffer is built, so every click
in a session sounds the same.
"""

from __future__ import annotations

import numpy as np

CLICK_DURATION = 0.06  # seconds
TONE_DURATION = 0.07  # seconds


def synthesize_click(
    sample_rate: int,
    duration: float = CLICK_DURATION,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Build the click sample as a float32 mono buffer in ``[-1, 1]``."""
    if rng is None:
        rng = np.random.default_rng()

    length = int(sample_rate * duration)
    if length <= 0:
        raise ValueError(f"Click of {duration}s at {sample_rate} Hz has no samples")

    base_freq = 120.0 + rng.random() * 80.0
    i = np.arange(length)
    t = i / length

    body = np.sin(2.0 * np.pi * base_freq * (i / sample_rate)) * 0.7 * np.exp(-8.0 * t)
    noise = (rng.random(length) * 2.0 - 1.0) * np.exp(-40.0 * t) * 0.35

    samples = body * 0.9 + noise * (1.0 - t * 0.6)
    return samples.astype(np.float32)


def synthesize_tone(
    sample_rate: int,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Fallback click: a short sine with an exponential attack/decay envelope.

    The envelope rises from 0.0001 to 1.0 in 1 ms, falls back to 0.0001
    at 60 ms and stays silent until the 70 ms buffer ends.
    """
    if rng is None:
        rng = np.random.default_rng()

    freq = 150.0 + rng.random() * 100.0
    length = int(sample_rate * TONE_DURATION)
    time = np.arange(length) / sample_rate

    floor, peak = 1e-4, 1.0
    attack, release = 0.001, 0.06
    envelope = np.where(
        time < attack,
        floor * (peak / floor) ** (time / attack),
        peak * (floor / peak) ** ((time - attack) / (release - attack)),
    )
    envelope[time >= release] = 0.0

    return (np.sin(2.0 * np.pi * freq * time) * envelope).astype(np.float32)
