"""
Harmony Classifier - decides whether a root plus four voices is a legal chord.

The classifier only looks at pitch classes; registers are the range
validator's job. Each voice is first reduced to its HarmonicFunction
relative to the root, and the rules reason over those functions:

- 2 pitch classes: root and third only (open, doubled sonority)
- 3 pitch classes: a triad, with the doubling set by what is in the bass
- 4 pitch classes: a seventh chord, every member present
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_harmony.constants import ErrorMessages, Voice
from chuk_mcp_harmony.core.interval import (
    DIMINISHED_FIFTH,
    HarmonicFunction,
    PitchClassSet,
    dist,
    harmonic_function,
)
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.harmony.errors import (
    HarmonyError,
    IncompleteHarmonicFunction,
    InvalidBassFunction,
    InvalidDoubling,
    InvalidVoiceCount,
    NoRootPresent,
)

logger = logging.getLogger(__name__)


class Sonority(str, Enum):
    """The kind of chord a legal harmony was recognised as."""

    ROOT_AND_THIRD = "root_and_third"
    ROOT_POSITION_TRIAD = "root_position_triad"
    FIRST_INVERSION_TRIAD = "first_inversion_triad"
    FIRST_INVERSION_DIMINISHED_TRIAD = "first_inversion_diminished_triad"
    SECOND_INVERSION_TRIAD = "second_inversion_triad"
    SEVENTH_CHORD = "seventh_chord"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a legal harmony."""

    sonority: Sonority
    root: PitchClass
    functions: dict[Voice, HarmonicFunction]
    pitch_classes: PitchClassSet

    @property
    def bass_function(self) -> HarmonicFunction:
        """Which chord member is in the bass."""
        return self.functions[Voice.BASS]


def classify(root: int, soprano: int, alto: int, tenor: int, bass: int) -> Classification:
    """
    Classify four voice pitch classes against a declared root.

    Args:
        root: Root pitch class (0-11)
        soprano: Soprano pitch class
        alto: Alto pitch class
        tenor: Tenor pitch class
        bass: Bass pitch class

    Returns:
        Classification naming the recognised sonority

    Raises:
        NoRootPresent: If no voice is the root
        InvalidVoiceCount: If there are not 2, 3 or 4 distinct pitch classes
        InvalidBassFunction: If a triad's bass is not root, third or fifth
        IncompleteHarmonicFunction: If a required chord member is missing
        InvalidDoubling: If the wrong chord member is doubled
    """
    root_pc = PitchClass(root)
    voices = {
        Voice.BASS: bass,
        Voice.TENOR: tenor,
        Voice.ALTO: alto,
        Voice.SOPRANO: soprano,
    }

    if root not in voices.values():
        raise NoRootPresent(ErrorMessages.NO_ROOT_PRESENT.format(root=root_pc.display()))

    pitch_classes = PitchClassSet([root, bass, tenor, alto, soprano])
    functions = {voice: harmonic_function(root, pc) for voice, pc in voices.items()}

    count = len(pitch_classes)
    if count == 2:
        sonority = _classify_root_and_third(root_pc, functions)
    elif count == 3:
        sonority = _classify_triad(root_pc, voices, functions)
    elif count == 4:
        sonority = _classify_seventh(root_pc, functions)
    else:
        raise InvalidVoiceCount(ErrorMessages.INVALID_VOICE_COUNT.format(count=count))

    logger.debug(f"Classified root {root_pc.display()} as {sonority.value}")
    return Classification(sonority, root_pc, functions, pitch_classes)


def _missing(root: PitchClass, function: HarmonicFunction) -> IncompleteHarmonicFunction:
    return IncompleteHarmonicFunction(
        ErrorMessages.MISSING_FUNCTION.format(function=function.value, root=root.display())
    )


def _classify_root_and_third(
    root: PitchClass, functions: dict[Voice, HarmonicFunction]
) -> Sonority:
    """Two pitch classes: every voice must be the root or the third."""
    allowed = {HarmonicFunction.ROOT, HarmonicFunction.THIRD}
    if not all(function in allowed for function in functions.values()):
        raise _missing(root, HarmonicFunction.THIRD)
    return Sonority.ROOT_AND_THIRD


def _classify_triad(
    root: PitchClass,
    voices: dict[Voice, int],
    functions: dict[Voice, HarmonicFunction],
) -> Sonority:
    """Three pitch classes: branch on the chord member in the bass."""
    bass_function = functions[Voice.BASS]
    upper = [functions[v] for v in (Voice.TENOR, Voice.ALTO, Voice.SOPRANO)]

    if bass_function == HarmonicFunction.ROOT:
        # Root position: double the root
        for function in (HarmonicFunction.THIRD, HarmonicFunction.FIFTH):
            if function not in upper:
                raise _missing(root, function)
        if upper.count(HarmonicFunction.ROOT) != 1:
            raise InvalidDoubling(
                ErrorMessages.INVALID_DOUBLING.format(
                    sonority="A root position triad", function="root"
                )
            )
        return Sonority.ROOT_POSITION_TRIAD

    if bass_function == HarmonicFunction.THIRD:
        upper_dists = [dist(root, voices[v]) for v in (Voice.TENOR, Voice.ALTO, Voice.SOPRANO)]
        if DIMINISHED_FIFTH in upper_dists:
            # Diminished triad in first inversion: double the third
            if HarmonicFunction.THIRD not in upper:
                raise InvalidDoubling(
                    ErrorMessages.INVALID_DOUBLING.format(
                        sonority="A first inversion diminished triad", function="third"
                    )
                )
            return Sonority.FIRST_INVERSION_DIMINISHED_TRIAD

        # Major or minor triad in first inversion: double the root, never the third
        for function in (HarmonicFunction.ROOT, HarmonicFunction.FIFTH):
            if function not in upper:
                raise _missing(root, function)
        if HarmonicFunction.THIRD in upper:
            raise InvalidDoubling(
                ErrorMessages.FORBIDDEN_DOUBLING.format(
                    sonority="A first inversion triad", function="third"
                )
            )
        return Sonority.FIRST_INVERSION_TRIAD

    if bass_function == HarmonicFunction.FIFTH:
        # Second inversion: double the bass
        for function in (HarmonicFunction.ROOT, HarmonicFunction.THIRD):
            if function not in upper:
                raise _missing(root, function)
        if HarmonicFunction.FIFTH not in upper:
            raise InvalidDoubling(
                ErrorMessages.INVALID_DOUBLING.format(
                    sonority="A second inversion triad", function="fifth"
                )
            )
        return Sonority.SECOND_INVERSION_TRIAD

    raise InvalidBassFunction(
        ErrorMessages.INVALID_BASS_FUNCTION.format(
            pitch=PitchClass(voices[Voice.BASS]).display(), root=root.display()
        ),
        Voice.BASS,
    )


def _classify_seventh(root: PitchClass, functions: dict[Voice, HarmonicFunction]) -> Sonority:
    """Four pitch classes: root, third, fifth and seventh must all sound."""
    present = set(functions.values())
    for function in (
        HarmonicFunction.ROOT,
        HarmonicFunction.THIRD,
        HarmonicFunction.FIFTH,
        HarmonicFunction.SEVENTH,
    ):
        if function not in present:
            raise _missing(root, function)
    return Sonority.SEVENTH_CHORD


def is_legal(root: int, soprano: int, alto: int, tenor: int, bass: int) -> bool:
    """Boolean form of classify()."""
    try:
        classify(root, soprano, alto, tenor, bass)
    except HarmonyError:
        return False
    return True
