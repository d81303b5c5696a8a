"""
Core music primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: A sounding note (frequency, pitch class, octave)
- dist / is_third / is_fifth / is_seventh: mod-12 interval arithmetic
- semitone_distance: Octave-aware distance between two pitches
- HarmonicFunction: Role of a pitch class relative to a root
- PitchClassSet: 12-bit pitch-class membership mask
"""

from chuk_mcp_harmony.core.interval import (
    HarmonicFunction,
    PitchClassSet,
    dist,
    harmonic_function,
    is_fifth,
    is_seventh,
    is_third,
    semitone_distance,
)
from chuk_mcp_harmony.core.pitch import (
    Pitch,
    PitchClass,
    compute_frequency,
    compute_half_steps_from_zero,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Pitch",
    "compute_frequency",
    "compute_half_steps_from_zero",
    # Interval
    "dist",
    "is_third",
    "is_fifth",
    "is_seventh",
    "semitone_distance",
    "HarmonicFunction",
    "harmonic_function",
    "PitchClassSet",
]
