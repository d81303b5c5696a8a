"""
Pitch primitives - PitchClass and Pitch.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitch classes (octave-independent).
Pitch is a concrete sounding note: a frequency plus its pitch class and octave.

Half steps are counted from C of octave 1, so middle C (C4) is 36 and
A4 is 45. Octave 0 is degenerate: its pitch classes count from zero too.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from chuk_mcp_harmony.constants import (
    A440_FREQUENCY,
    A440_HALF_STEPS_FROM_ZERO,
    PITCH_CLASS_COUNT,
    SEMITONE_FREQUENCY_RATIO,
)

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % PITCH_CLASS_COUNT)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get a single human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    def display(self) -> str:
        """
        Get the display name, with both spellings for black keys.

        C -> "C", C# -> "C#/Db"
        """
        sharp = _SHARP_NAMES[self.value]
        flat = _FLAT_NAMES[self.value]
        if sharp == flat:
            return sharp
        return f"{sharp}/{flat}"

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def compute_half_steps_from_zero(pitch_class: int, octave: int) -> int:
    """
    Number of half steps between C1 and the given pitch.

    Octave 0 has no multiplier, so its pitch classes map to 0-11 directly.
    """
    if octave > 0:
        return (octave - 1) * PITCH_CLASS_COUNT + pitch_class
    return pitch_class


def compute_frequency(pitch_class: int, octave: int) -> float:
    """
    Equal-tempered frequency in Hz, tuned to A4 = 440 Hz.

    Examples:
        compute_frequency(9, 4) -> 440.0
        compute_frequency(0, 4) -> 261.6255...
    """
    half_steps = compute_half_steps_from_zero(pitch_class, octave)
    return A440_FREQUENCY * SEMITONE_FREQUENCY_RATIO ** (half_steps - A440_HALF_STEPS_FROM_ZERO)


@dataclass(frozen=True)
class Pitch:
    """
    A sounding pitch: frequency, pitch class and octave.

    The frequency is taken as given and is not checked against the
    equal-tempered value for the pitch class and octave. Use
    Pitch.from_pitch_class or Pitch.parse to get the tuned frequency.

    Immutable and hashable.
    """

    frequency: float
    pitch_class: PitchClass
    octave: int
    half_steps_from_zero: int = field(init=False)

    def __post_init__(self) -> None:
        """Validate ranges and cache the half step count."""
        if not 0 <= self.pitch_class < PITCH_CLASS_COUNT:
            raise ValueError(f"Pitch class must be 0-11, got {self.pitch_class}")
        if self.octave < 0:
            raise ValueError(f"Octave must be >= 0, got {self.octave}")
        if self.frequency <= 0:
            raise ValueError(f"Frequency must be > 0, got {self.frequency}")
        object.__setattr__(self, "pitch_class", PitchClass(self.pitch_class))
        object.__setattr__(
            self,
            "half_steps_from_zero",
            compute_half_steps_from_zero(self.pitch_class, self.octave),
        )

    @classmethod
    def from_pitch_class(cls, pitch_class: int, octave: int) -> Pitch:
        """Create a pitch tuned to its equal-tempered frequency."""
        return cls(compute_frequency(pitch_class, octave), pitch_class, octave)

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """
        Parse a pitch from a note name with octave, like 'C4', 'F#3', 'Bb2'.

        The frequency is the equal-tempered value.
        """
        name = name.strip()
        split = len(name)
        while split > 0 and name[split - 1].isdigit():
            split -= 1
        if split == 0 or split == len(name):
            raise ValueError(f"Pitch name needs a note and an octave: {name!r}")
        pitch_class = PitchClass.parse(name[:split])
        return cls.from_pitch_class(pitch_class, int(name[split:]))

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.pitch_class.value + (self.octave + 1) * PITCH_CLASS_COUNT

    def display(self) -> str:
        """Display name with octave, e.g. 'C#/Db4'."""
        return f"{self.pitch_class.display()}{self.octave}"

    def __str__(self) -> str:
        return self.display()
