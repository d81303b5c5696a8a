"""
Constants and enums for the harmony system.

No magic strings - use enums for constrained values.
"""

from enum import Enum

PITCH_CLASS_COUNT: int = 12

# Tuning reference: A above middle C
A440_FREQUENCY: float = 440.0
A440_PITCH_CLASS: int = 9
A440_OCTAVE: int = 4
A440_HALF_STEPS_FROM_ZERO: int = (A440_OCTAVE - 1) * PITCH_CLASS_COUNT + A440_PITCH_CLASS

# Literal ratio, not 2 ** (1 / 12); frequencies must match the reference tables
SEMITONE_FREQUENCY_RATIO: float = 1.059463094

# Synthesis defaults
DEFAULT_SAMPLE_RATE: int = 44100
DEFAULT_DURATION_SECONDS: int = 1


class Voice(str, Enum):
    """
    The four SATB voices, ordered high to low.

    The string value doubles as the field name on a harmony.
    """

    SOPRANO = "soprano"
    ALTO = "alto"
    TENOR = "tenor"
    BASS = "bass"


# Idiomatic register per voice:
# (lowest octave, highest octave, floor pitch class at lowest, ceiling pitch class at highest)
VOICE_RANGES: dict[Voice, tuple[int, int, int, int]] = {
    Voice.BASS: (2, 4, 4, 0),  # E2-C4
    Voice.TENOR: (3, 4, 3, 6),  # D#3-F#4
    Voice.ALTO: (3, 5, 7, 1),  # G3-C#5
    Voice.SOPRANO: (4, 5, 2, 6),  # D4-F#5
}

# Adjacent voice pairs checked for spacing, (lower, upper), bottom up
ADJACENT_VOICE_PAIRS: tuple[tuple[Voice, Voice], ...] = (
    (Voice.BASS, Voice.TENOR),
    (Voice.TENOR, Voice.ALTO),
    (Voice.ALTO, Voice.SOPRANO),
)

# Widest legal gap between adjacent upper voices, in semitones
MAX_UPPER_VOICE_SPACING: int = 12

# Bass-tenor gap is measured mod 12 across an octave boundary
MAX_BASS_TENOR_DIST: int = 7


class ErrorMessages:
    """Standardized error messages."""

    VOICE_OUT_OF_RANGE = "{voice} {pitch} is outside its range ({low}-{high})."
    VOICE_SPACING_EXCEEDED = "{lower} {lower_pitch} and {upper} {upper_pitch} are too far apart."
    VOICE_CROSSING = "{lower} {lower_pitch} sits above {upper} {upper_pitch}."
    NO_ROOT_PRESENT = "No voice sounds the root {root}."
    INVALID_VOICE_COUNT = "Harmony has {count} distinct pitch classes; expected 2, 3 or 4."
    INVALID_BASS_FUNCTION = "Bass {pitch} is not the root, third or fifth of {root}."
    MISSING_FUNCTION = "No voice sounds the {function} above {root}."
    INVALID_DOUBLING = "{sonority} must double the {function}."
    FORBIDDEN_DOUBLING = "{sonority} must not double the {function}."
    PROGRESSION_NOT_FOUND = "Progression '{name}' not found."
