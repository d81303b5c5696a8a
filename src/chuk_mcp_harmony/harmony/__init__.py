"""
Four-part harmony - register, spacing and chord legality.

This module provides:
- SATB: Immutable four-voice harmony (validated or unchecked)
- classify: Harmonic-function classifier for root + four pitch classes
- check_ranges: Voice register and spacing checks
- validate_satb: Non-fail-fast diagnostic report
- HarmonyError and its subclasses: typed rejection reasons
"""

from chuk_mcp_harmony.harmony.classifier import Classification, Sonority, classify, is_legal
from chuk_mcp_harmony.harmony.errors import (
    HarmonyError,
    IncompleteHarmonicFunction,
    InvalidBassFunction,
    InvalidDoubling,
    InvalidVoiceCount,
    NoRootPresent,
    VoiceOutOfRange,
    VoiceSpacingExceeded,
)
from chuk_mcp_harmony.harmony.ranges import (
    check_ranges,
    check_voice_range,
    check_voice_spacing,
    voice_in_range,
)
from chuk_mcp_harmony.harmony.satb import SATB
from chuk_mcp_harmony.harmony.validator import (
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_satb,
)

__all__ = [
    # Harmony value
    "SATB",
    # Classifier
    "Classification",
    "Sonority",
    "classify",
    "is_legal",
    # Ranges
    "check_ranges",
    "check_voice_range",
    "check_voice_spacing",
    "voice_in_range",
    # Diagnostics
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_satb",
    # Errors
    "HarmonyError",
    "VoiceOutOfRange",
    "VoiceSpacingExceeded",
    "NoRootPresent",
    "InvalidVoiceCount",
    "InvalidBassFunction",
    "IncompleteHarmonicFunction",
    "InvalidDoubling",
]
