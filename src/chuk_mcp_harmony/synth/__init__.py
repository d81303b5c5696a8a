"""
Synthesis - turns harmonies into amplitude samples.

Samples are plain floats; writing them to a file is left to export.
"""

from chuk_mcp_harmony.synth.wave import iter_samples, sound_wave

__all__ = [
    "iter_samples",
    "sound_wave",
]
