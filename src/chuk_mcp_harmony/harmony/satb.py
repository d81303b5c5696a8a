"""
SATB - an immutable four-voice harmony.

SATB.new() checks registers, spacing and harmonic function before
returning; SATB.new_unchecked() trusts the caller, for deliberately
non-traditional voicings. Neither allows mutation: with_voices() builds
a new harmony and validates it again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chuk_mcp_harmony.constants import Voice
from chuk_mcp_harmony.core.interval import HarmonicFunction, PitchClassSet, harmonic_function
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass
from chuk_mcp_harmony.harmony.classifier import Classification, Sonority, classify
from chuk_mcp_harmony.harmony.errors import HarmonyError
from chuk_mcp_harmony.harmony.ranges import check_ranges
from chuk_mcp_harmony.synth.wave import sound_wave

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SATB:
    """
    Four voices sounding together over a declared root.

    Constructing SATB directly performs no harmony checks; use SATB.new
    for a validated harmony or SATB.new_unchecked to make the intent clear.

    Immutable and hashable.
    """

    root: PitchClass
    soprano: Pitch
    alto: Pitch
    tenor: Pitch
    bass: Pitch
    sonority: Sonority | None = field(default=None, compare=False)
    pitch_classes: PitchClassSet = field(init=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize the root and collect the sounding pitch classes."""
        object.__setattr__(self, "root", PitchClass(self.root))
        object.__setattr__(
            self,
            "pitch_classes",
            PitchClassSet(p.pitch_class for p in (self.soprano, self.alto, self.tenor, self.bass)),
        )

    @classmethod
    def new(cls, root: int, soprano: Pitch, alto: Pitch, tenor: Pitch, bass: Pitch) -> SATB:
        """
        Create a harmony that obeys four-part writing rules.

        Args:
            root: Root pitch class (0-11)
            soprano: Soprano pitch
            alto: Alto pitch
            tenor: Tenor pitch
            bass: Bass pitch

        Returns:
            A validated SATB with its sonority set

        Raises:
            HarmonyError: The first rule the voices break (see harmony.errors)
        """
        voices = {
            Voice.SOPRANO: soprano,
            Voice.ALTO: alto,
            Voice.TENOR: tenor,
            Voice.BASS: bass,
        }
        try:
            check_ranges(voices)
            classification = classify(
                root,
                soprano.pitch_class,
                alto.pitch_class,
                tenor.pitch_class,
                bass.pitch_class,
            )
        except HarmonyError as e:
            logger.debug(f"Rejected harmony [{e.code}]: {e.message}")
            raise

        return cls(root, soprano, alto, tenor, bass, sonority=classification.sonority)

    @classmethod
    def new_unchecked(
        cls, root: int, soprano: Pitch, alto: Pitch, tenor: Pitch, bass: Pitch
    ) -> SATB:
        """Create a harmony without any range or harmony checks."""
        return cls(root, soprano, alto, tenor, bass)

    @property
    def is_validated(self) -> bool:
        """True if this harmony came through the validated constructor."""
        return self.sonority is not None

    @property
    def voices(self) -> dict[Voice, Pitch]:
        """The four voices, soprano first."""
        return {
            Voice.SOPRANO: self.soprano,
            Voice.ALTO: self.alto,
            Voice.TENOR: self.tenor,
            Voice.BASS: self.bass,
        }

    def functions(self) -> dict[Voice, HarmonicFunction]:
        """Harmonic function of each voice relative to the root."""
        return {
            voice: harmonic_function(self.root, pitch.pitch_class)
            for voice, pitch in self.voices.items()
        }

    def classify(self) -> Classification:
        """
        Run the harmony classifier on this chord's pitch classes.

        Works on unchecked harmonies too; raises HarmonyError if illegal.
        """
        return classify(
            self.root,
            self.soprano.pitch_class,
            self.alto.pitch_class,
            self.tenor.pitch_class,
            self.bass.pitch_class,
        )

    def with_voices(self, *, validate: bool = True, **changes: Pitch) -> SATB:
        """
        Return a new harmony with some voices replaced.

        Args:
            validate: Re-run all checks on the result (default True)
            **changes: Voice name to new Pitch, e.g. soprano=Pitch.parse("G4")

        Example:
            i_chord.with_voices(soprano=Pitch.parse("G4"))
        """
        voices = {voice.value: pitch for voice, pitch in self.voices.items()}
        for name, pitch in changes.items():
            if name not in voices:
                raise ValueError(f"Unknown voice: {name}")
            voices[name] = pitch

        constructor = self.new if validate else self.new_unchecked
        return constructor(self.root, **voices)

    def with_root(self, root: int, *, validate: bool = True) -> SATB:
        """Return the same voicing heard over a different root."""
        constructor = self.new if validate else self.new_unchecked
        return constructor(root, self.soprano, self.alto, self.tenor, self.bass)

    def sound_wave(self, duration: int, sample_freq: int) -> list[float]:
        """
        Render the harmony as a sum of four sine waves.

        See synth.wave.sound_wave.
        """
        return sound_wave(self, duration, sample_freq)

    def __str__(self) -> str:
        voices = " ".join(f"{p}" for p in (self.soprano, self.alto, self.tenor, self.bass))
        return f"SATB({self.root.display()}: {voices})"
