"""
Harmony rejection reasons.

Every rule the validated SATB constructor enforces has its own exception
type with a stable code, so callers can branch on the reason or report it.
All of them are ValueErrors.
"""

from __future__ import annotations

from chuk_mcp_harmony.constants import Voice


class HarmonyError(ValueError):
    """Base class for illegal four-part harmonies."""

    code: str = "HARMONY_ERROR"

    def __init__(self, message: str, voice: Voice | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.voice = voice

    @property
    def location(self) -> str | None:
        """The offending voice name, if the error is tied to one."""
        return self.voice.value if self.voice else None


class VoiceOutOfRange(HarmonyError):
    """A voice sits outside its idiomatic register."""

    code = "VOICE_OUT_OF_RANGE"


class VoiceSpacingExceeded(HarmonyError):
    """Two adjacent voices are too far apart, or cross."""

    code = "VOICE_SPACING_EXCEEDED"


class NoRootPresent(HarmonyError):
    """No voice sounds the declared root."""

    code = "NO_ROOT_PRESENT"


class InvalidVoiceCount(HarmonyError):
    """The number of distinct pitch classes is not 2, 3 or 4."""

    code = "INVALID_VOICE_COUNT"


class InvalidBassFunction(HarmonyError):
    """In a triad, the bass is not the root, third or fifth."""

    code = "INVALID_BASS_FUNCTION"


class IncompleteHarmonicFunction(HarmonyError):
    """A required chord member (third, fifth, seventh) is missing."""

    code = "INCOMPLETE_HARMONIC_FUNCTION"


class InvalidDoubling(HarmonyError):
    """All chord members are present but the wrong one is doubled."""

    code = "INVALID_DOUBLING"
