"""
Range Validator - voice registers and adjacent-voice spacing.

Validates:
- Each voice lies within its idiomatic register (constants.VOICE_RANGES)
- Adjacent voices (bass-tenor, tenor-alto, alto-soprano) are no more
  than about an octave apart, and do not cross

The bass-tenor pair is measured with the mod-12 dist() across an octave
boundary while the upper pairs use the true semitone distance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from chuk_mcp_harmony.constants import (
    ADJACENT_VOICE_PAIRS,
    MAX_BASS_TENOR_DIST,
    MAX_UPPER_VOICE_SPACING,
    VOICE_RANGES,
    ErrorMessages,
    Voice,
)
from chuk_mcp_harmony.core.interval import dist, semitone_distance
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass
from chuk_mcp_harmony.harmony.errors import HarmonyError, VoiceOutOfRange, VoiceSpacingExceeded

logger = logging.getLogger(__name__)


def voice_in_range(voice: Voice, pitch: Pitch) -> bool:
    """Return True if the pitch lies in the voice's register."""
    low_octave, high_octave, floor_pc, ceiling_pc = VOICE_RANGES[voice]

    if not low_octave <= pitch.octave <= high_octave:
        return False
    if pitch.octave == low_octave and pitch.pitch_class < floor_pc:
        return False
    if pitch.octave == high_octave and pitch.pitch_class > ceiling_pc:
        return False
    return True


def check_voice_range(voice: Voice, pitch: Pitch) -> None:
    """
    Check a single voice's register.

    Raises:
        VoiceOutOfRange: If the pitch is outside the voice's register
    """
    if voice_in_range(voice, pitch):
        return

    low_octave, high_octave, floor_pc, ceiling_pc = VOICE_RANGES[voice]
    raise VoiceOutOfRange(
        ErrorMessages.VOICE_OUT_OF_RANGE.format(
            voice=voice.value,
            pitch=pitch,
            low=f"{PitchClass(floor_pc).display()}{low_octave}",
            high=f"{PitchClass(ceiling_pc).display()}{high_octave}",
        ),
        voice,
    )


def check_voice_spacing(lower_voice: Voice, lower: Pitch, upper_voice: Voice, upper: Pitch) -> None:
    """
    Check the gap between two adjacent voices.

    Args:
        lower_voice: The lower of the two voices (e.g. BASS)
        lower: Pitch sung by the lower voice
        upper_voice: The voice directly above it (e.g. TENOR)
        upper: Pitch sung by the upper voice

    Raises:
        VoiceSpacingExceeded: If the voices are too far apart or cross
    """
    octave_gap = upper.octave - lower.octave
    names = {
        "lower": lower_voice.value,
        "lower_pitch": lower,
        "upper": upper_voice.value,
        "upper_pitch": upper,
    }

    if octave_gap == 0:
        if lower.pitch_class > upper.pitch_class:
            raise VoiceSpacingExceeded(ErrorMessages.VOICE_CROSSING.format(**names), upper_voice)
    elif octave_gap == 1:
        if lower_voice == Voice.BASS:
            too_wide = dist(lower.pitch_class, upper.pitch_class) > MAX_BASS_TENOR_DIST
        else:
            too_wide = (
                semitone_distance(
                    (lower.pitch_class, lower.octave), (upper.pitch_class, upper.octave)
                )
                > MAX_UPPER_VOICE_SPACING
            )
        if too_wide:
            raise VoiceSpacingExceeded(
                ErrorMessages.VOICE_SPACING_EXCEEDED.format(**names), upper_voice
            )
    elif octave_gap > 1:
        # Two octaves apart is always wider than an octave
        raise VoiceSpacingExceeded(
            ErrorMessages.VOICE_SPACING_EXCEEDED.format(**names), upper_voice
        )
    else:
        raise VoiceSpacingExceeded(ErrorMessages.VOICE_CROSSING.format(**names), upper_voice)


def iter_range_errors(voices: Mapping[Voice, Pitch]) -> Iterator[HarmonyError]:
    """
    Yield every register and spacing problem, registers first.

    Registers are checked bass up; spacing is checked bass-tenor,
    tenor-alto, then alto-soprano.
    """
    for voice in (Voice.BASS, Voice.TENOR, Voice.ALTO, Voice.SOPRANO):
        try:
            check_voice_range(voice, voices[voice])
        except VoiceOutOfRange as e:
            yield e

    for lower_voice, upper_voice in ADJACENT_VOICE_PAIRS:
        try:
            check_voice_spacing(lower_voice, voices[lower_voice], upper_voice, voices[upper_voice])
        except VoiceSpacingExceeded as e:
            yield e


def check_ranges(voices: Mapping[Voice, Pitch]) -> None:
    """
    Validate all registers and spacings, failing on the first problem.

    Raises:
        VoiceOutOfRange: If a voice is outside its register
        VoiceSpacingExceeded: If two adjacent voices are too far apart
    """
    for error in iter_range_errors(voices):
        logger.debug(f"Range check failed: {error.message}")
        raise error
