"""
Additive synthesis - render a harmony as a sum of sine waves.

Each voice contributes one unit sinusoid at its frequency. The output is
not normalized or clipped: four voices in phase reach +/-4. Scaling to a
sample format is the audio sink's job (see export.wav).

All operations are deterministic: same input -> same samples.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_mcp_harmony.harmony.satb import SATB

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def _check_parameters(duration: int, sample_freq: int) -> None:
    if duration < 0:
        raise ValueError(f"Duration must be >= 0 seconds, got {duration}")
    if sample_freq <= 0:
        raise ValueError(f"Sample rate must be > 0, got {sample_freq}")


def iter_samples(harmony: SATB, duration: int, sample_freq: int) -> Iterator[float]:
    """
    Lazily yield the samples of sound_wave().

    Time restarts at 0 at the top of every second.
    """
    _check_parameters(duration, sample_freq)
    f_soprano = harmony.soprano.frequency
    f_alto = harmony.alto.frequency
    f_tenor = harmony.tenor.frequency
    f_bass = harmony.bass.frequency

    for _ in range(duration):
        for i in range(sample_freq):
            t = i / sample_freq
            yield (
                math.sin(TWO_PI * f_soprano * t)
                + math.sin(TWO_PI * f_alto * t)
                + math.sin(TWO_PI * f_tenor * t)
                + math.sin(TWO_PI * f_bass * t)
            )


def sound_wave(harmony: SATB, duration: int, sample_freq: int) -> list[float]:
    """
    Render a harmony to amplitude samples.

    Args:
        harmony: The four voices to sound (validated or not)
        duration: Length in whole seconds
        sample_freq: Samples per second

    Returns:
        duration * sample_freq samples, each the sum of four sinusoids

    Example:
        samples = sound_wave(major_i, duration=5, sample_freq=44100)
    """
    samples = list(iter_samples(harmony, duration, sample_freq))
    logger.debug(f"Rendered {harmony} to {len(samples)} samples at {sample_freq} Hz")
    return samples
