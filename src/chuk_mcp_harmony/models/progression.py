"""
Progression model - a sequence of SATB voicings to render.

A Progression is a YAML-friendly document: a list of voicings, each a
root plus four note names. It only describes what to play; chord-to-chord
voice leading is never analysed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_harmony.constants import DEFAULT_SAMPLE_RATE, Voice
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass
from chuk_mcp_harmony.export.wav import DEFAULT_GAIN, SampleFormat, WavSpec
from chuk_mcp_harmony.harmony.satb import SATB


class VoiceSpec(BaseModel):
    """
    One voice of a voicing.

    The note name fixes pitch class and octave. The frequency defaults
    to the equal-tempered value but can be pinned explicitly.
    """

    note: str = Field(..., description="Note name with octave (e.g., 'C4', 'F#3', 'Bb2')")
    frequency: float | None = Field(None, gt=0, description="Frequency override in Hz")

    model_config = {"frozen": True}

    @field_validator("note")
    @classmethod
    def validate_note(cls, v: str) -> str:
        """Validate note name format."""
        Pitch.parse(v)
        return v.strip()

    def to_pitch(self) -> Pitch:
        """Build the Pitch for this voice."""
        pitch = Pitch.parse(self.note)
        if self.frequency is None:
            return pitch
        return Pitch(self.frequency, pitch.pitch_class, pitch.octave)


class VoicingSpec(BaseModel):
    """
    A single four-voice chord over a declared root.

    Voices accept either a note name or a {note, frequency} mapping.
    """

    root: int = Field(..., ge=0, le=11, description="Root pitch class (0-11 or note name)")
    soprano: VoiceSpec = Field(..., description="Soprano voice")
    alto: VoiceSpec = Field(..., description="Alto voice")
    tenor: VoiceSpec = Field(..., description="Tenor voice")
    bass: VoiceSpec = Field(..., description="Bass voice")
    label: str | None = Field(None, description="Display label (e.g., 'I', 'ii42')")
    checked: bool = Field(True, description="Enforce four-part writing rules")

    model_config = {"frozen": True}

    @field_validator("root", mode="before")
    @classmethod
    def parse_root(cls, v: Any) -> Any:
        """Accept note names for the root."""
        if isinstance(v, str):
            return int(PitchClass.parse(v))
        return v

    @field_validator("soprano", "alto", "tenor", "bass", mode="before")
    @classmethod
    def parse_voice(cls, v: Any) -> Any:
        """Accept a bare note name as shorthand."""
        if isinstance(v, str):
            return {"note": v}
        return v

    def to_satb(self) -> SATB:
        """
        Build the harmony.

        Raises:
            HarmonyError: If checked and the voicing breaks a rule
        """
        constructor = SATB.new if self.checked else SATB.new_unchecked
        return constructor(
            self.root,
            self.soprano.to_pitch(),
            self.alto.to_pitch(),
            self.tenor.to_pitch(),
            self.bass.to_pitch(),
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a dictionary suitable for YAML serialization."""
        data: dict[str, Any] = {"root": PitchClass(self.root).spell()}
        if self.label:
            data["label"] = self.label
        for voice in Voice:
            spec: VoiceSpec = getattr(self, voice.value)
            if spec.frequency is None:
                data[voice.value] = spec.note
            else:
                data[voice.value] = {"note": spec.note, "frequency": spec.frequency}
        if not self.checked:
            data["checked"] = False
        return data


class Progression(BaseModel):
    """A named sequence of voicings with rendering settings."""

    name: str = Field(..., description="Progression name")
    description: str = Field("", description="Human-readable description")
    tempo: int = Field(60, gt=0, le=300, description="Tempo in BPM (MIDI export)")
    seconds_per_chord: int = Field(1, ge=0, description="Audio length of each chord in seconds")
    sample_rate: int = Field(DEFAULT_SAMPLE_RATE, gt=0, description="Audio sample rate")
    bits_per_sample: int = Field(16, description="WAV sample width (16 or 32)")
    sample_format: SampleFormat = Field(SampleFormat.INT, description="WAV sample format")
    gain: float = Field(DEFAULT_GAIN, gt=0, description="Scale applied before writing")
    chords: list[VoicingSpec] = Field(..., min_length=1, description="Voicings in order")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure progression name is valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid progression name: {v}")
        return v

    @model_validator(mode="after")
    def validate_wav_format(self) -> Progression:
        """Reject sample width and format pairs the WAV writer cannot store."""
        self.wav_spec()
        return self

    def wav_spec(self) -> WavSpec:
        """The WAV output format for this progression."""
        return WavSpec(
            sample_rate=self.sample_rate,
            bits_per_sample=self.bits_per_sample,
            sample_format=self.sample_format,
        )

    def to_harmonies(self) -> list[SATB]:
        """
        Build every chord, in order.

        Raises:
            HarmonyError: If a checked voicing breaks a rule
        """
        return [chord.to_satb() for chord in self.chords]

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a dictionary suitable for YAML serialization."""
        return {
            "schema": "progression/v1",
            "name": self.name,
            "description": self.description,
            "tempo": self.tempo,
            "seconds_per_chord": self.seconds_per_chord,
            "sample_rate": self.sample_rate,
            "bits_per_sample": self.bits_per_sample,
            "sample_format": self.sample_format.value,
            "gain": self.gain,
            "chords": [chord.to_yaml_dict() for chord in self.chords],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Progression:
        """Create from a YAML dictionary."""
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            tempo=data.get("tempo", 60),
            seconds_per_chord=data.get("seconds_per_chord", 1),
            sample_rate=data.get("sample_rate", DEFAULT_SAMPLE_RATE),
            bits_per_sample=data.get("bits_per_sample", 16),
            sample_format=data.get("sample_format", SampleFormat.INT),
            gain=data.get("gain", DEFAULT_GAIN),
            chords=data.get("chords", []),
        )
