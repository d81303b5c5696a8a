"""
Interval primitives - mod-12 distance and harmonic function.

dist() is directed: dist(a, b) counts ascending semitones from a to b,
wrapping at the octave. Chord-member tests always measure from the root,
dist(root, voice), never the reverse.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from chuk_mcp_harmony.constants import PITCH_CLASS_COUNT

THIRD_DISTANCES: frozenset[int] = frozenset({3, 4})  # minor, major
FIFTH_DISTANCES: frozenset[int] = frozenset({6, 7})  # diminished, perfect
SEVENTH_DISTANCES: frozenset[int] = frozenset({9, 10, 11})  # diminished, minor, major

DIMINISHED_FIFTH: int = 6


def dist(a: int, b: int) -> int:
    """Ascending semitones from pitch class a up to pitch class b, in [0, 12)."""
    if a > b:
        return (b + (PITCH_CLASS_COUNT - a)) % PITCH_CLASS_COUNT
    return b - a


def is_third(a: int, b: int) -> bool:
    """True if b is a minor or major third above a."""
    return dist(a, b) in THIRD_DISTANCES


def is_fifth(a: int, b: int) -> bool:
    """True if b is a diminished or perfect fifth above a."""
    return dist(a, b) in FIFTH_DISTANCES


def is_seventh(a: int, b: int) -> bool:
    """True if b is a diminished, minor or major seventh above a."""
    return dist(a, b) in SEVENTH_DISTANCES


def semitone_distance(lower: tuple[int, int], upper: tuple[int, int]) -> int:
    """
    True distance in semitones between two (pitch_class, octave) pairs.

    Unlike dist(), this is octave-aware and symmetric.

    Examples:
        semitone_distance((4, 3), (7, 4)) -> 15
        semitone_distance((4, 4), (0, 5)) -> 8
    """
    lower_pc, lower_octave = lower
    upper_pc, upper_octave = upper
    return abs(
        (PITCH_CLASS_COUNT * lower_octave + lower_pc)
        - (PITCH_CLASS_COUNT * upper_octave + upper_pc)
    )


class HarmonicFunction(str, Enum):
    """The role a pitch class plays relative to a chord root."""

    ROOT = "root"
    THIRD = "third"
    FIFTH = "fifth"
    SEVENTH = "seventh"
    NONE = "none"


def harmonic_function(root: int, pitch_class: int) -> HarmonicFunction:
    """Classify a pitch class by its distance above the root."""
    if pitch_class == root:
        return HarmonicFunction.ROOT
    if is_third(root, pitch_class):
        return HarmonicFunction.THIRD
    if is_fifth(root, pitch_class):
        return HarmonicFunction.FIFTH
    if is_seventh(root, pitch_class):
        return HarmonicFunction.SEVENTH
    return HarmonicFunction.NONE


class PitchClassSet:
    """
    A set of pitch classes stored as a 12-bit membership mask.

    Immutable and hashable.
    """

    __slots__ = ("_mask",)
    _mask: int

    def __init__(self, pitch_classes: Iterable[int] = ()) -> None:
        mask = 0
        for pc in pitch_classes:
            if not 0 <= pc < PITCH_CLASS_COUNT:
                raise ValueError(f"Pitch class must be 0-11, got {pc}")
            mask |= 1 << pc
        object.__setattr__(self, "_mask", mask)

    @classmethod
    def from_mask(cls, mask: int) -> PitchClassSet:
        """Create a set directly from a bit mask."""
        if not 0 <= mask < (1 << PITCH_CLASS_COUNT):
            raise ValueError(f"Mask must fit in 12 bits, got {mask}")
        result = cls()
        object.__setattr__(result, "_mask", mask)
        return result

    @property
    def mask(self) -> int:
        """The raw 12-bit mask."""
        return self._mask

    def add(self, pitch_class: int) -> PitchClassSet:
        """Return a new set that also contains pitch_class."""
        return PitchClassSet.from_mask(self._mask | (1 << pitch_class))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("PitchClassSet is immutable")

    def __contains__(self, pitch_class: object) -> bool:
        if not isinstance(pitch_class, int) or not 0 <= pitch_class < PITCH_CLASS_COUNT:
            return False
        return bool(self._mask & (1 << pitch_class))

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __iter__(self) -> Iterator[int]:
        return (pc for pc in range(PITCH_CLASS_COUNT) if self._mask & (1 << pc))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PitchClassSet):
            return NotImplemented
        return self._mask == other._mask

    def __hash__(self) -> int:
        return hash(self._mask)

    def __repr__(self) -> str:
        return f"PitchClassSet({list(self)})"
