"""
Harmony Validator - full diagnostic report for a four-voice harmony.

SATB.new() stops at the first broken rule. This validator keeps going
and reports every register and spacing problem, then the classifier's
verdict, so a caller can see everything that needs fixing at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_harmony.constants import Voice
from chuk_mcp_harmony.core.pitch import Pitch
from chuk_mcp_harmony.harmony.classifier import Classification, classify
from chuk_mcp_harmony.harmony.errors import HarmonyError
from chuk_mcp_harmony.harmony.ranges import iter_range_errors


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Harmony is illegal
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    @classmethod
    def from_error(cls, error: HarmonyError) -> ValidationIssue:
        """Wrap a rejection as an error issue."""
        return cls(ValidationSeverity.ERROR, error.code, error.message, error.location)

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating a harmony."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []
        self.classification: Classification | None = None

    def add_error(self, error: HarmonyError) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue.from_error(error))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Add an info issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (info is OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


def validate_satb(
    root: int, soprano: Pitch, alto: Pitch, tenor: Pitch, bass: Pitch
) -> ValidationResult:
    """
    Check every rule SATB.new() enforces and collect the problems.

    Args:
        root: Root pitch class (0-11)
        soprano: Soprano pitch
        alto: Alto pitch
        tenor: Tenor pitch
        bass: Bass pitch

    Returns:
        ValidationResult; its classification is set when the chord is legal
    """
    result = ValidationResult()
    voices = {
        Voice.SOPRANO: soprano,
        Voice.ALTO: alto,
        Voice.TENOR: tenor,
        Voice.BASS: bass,
    }

    for error in iter_range_errors(voices):
        result.add_error(error)

    try:
        classification = classify(
            root, soprano.pitch_class, alto.pitch_class, tenor.pitch_class, bass.pitch_class
        )
    except HarmonyError as e:
        result.add_error(e)
        return result

    if result.is_valid:
        result.classification = classification
    result.add_info(
        "SONORITY",
        f"Pitch classes form a {classification.sonority.value.replace('_', ' ')}",
        "harmony",
    )
    return result
